"""A classified line of a security.txt file."""

from dataclasses import dataclass
from typing import TypeAlias

from securitytxt.domain.entities.field import Field


@dataclass(frozen=True)
class Comment:
    """Text following the leading ``#``."""

    text: str


@dataclass(frozen=True)
class FieldLine:
    """A line holding a parsed field."""

    field: Field


Line: TypeAlias = Comment | FieldLine
