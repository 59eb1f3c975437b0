"""Lint report DTOs."""

from dataclasses import dataclass, field

from securitytxt.domain.entities import SecurityTxt
from securitytxt.domain.exceptions import ParseError


@dataclass
class LintIssue:
    """One problem found in a security.txt file."""

    line_number: int | None
    code: str
    message: str

    @classmethod
    def from_error(cls, error: ParseError) -> "LintIssue":
        return cls(line_number=error.line_number, code=error.code, message=error.message)


@dataclass
class LintReport:
    """All issues in a file; ``document`` is set only when there are none."""

    document: SecurityTxt | None
    issues: list[LintIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.document is not None and not self.issues
