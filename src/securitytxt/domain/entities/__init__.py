"""Domain entities."""

from securitytxt.domain.entities.field import (
    Acknowledgments,
    Canonical,
    Contact,
    Encryption,
    Expires,
    Extension,
    Field,
    Hiring,
    Policy,
    PreferredLanguages,
    UrlField,
)
from securitytxt.domain.entities.line import Comment, FieldLine, Line
from securitytxt.domain.entities.security_txt import SecurityTxt

__all__ = [
    "Acknowledgments",
    "Canonical",
    "Comment",
    "Contact",
    "Encryption",
    "Expires",
    "Extension",
    "Field",
    "FieldLine",
    "Hiring",
    "Line",
    "Policy",
    "PreferredLanguages",
    "SecurityTxt",
    "UrlField",
]
