"""Result type yielded by the field stream."""

from dataclasses import dataclass
from typing import cast

from securitytxt.domain.entities import Field
from securitytxt.domain.exceptions import ParseError


@dataclass(frozen=True)
class FieldResult:
    """Outcome of parsing one non-comment line: a field or the error it raised."""

    line_number: int
    field: Field | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.field is None) == (self.error is None):
            raise ValueError("FieldResult needs exactly one of field or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Field:
        """Return the field, raising the stored error if parsing failed."""
        if self.error is not None:
            raise self.error
        return cast(Field, self.field)
