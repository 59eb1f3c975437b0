"""Domain exceptions."""


class SecurityTxtError(Exception):
    """Base exception for securitytxt."""

    pass


class ParseError(SecurityTxtError):
    """A security.txt line or document could not be parsed.

    ``code`` is a stable machine-readable identifier; ``line_number`` is the
    1-based line the error refers to, when known.
    """

    code = "parse_error"
    default_message = "Invalid security.txt"

    def __init__(self, message: str | None = None, line_number: int | None = None) -> None:
        self.message = message or self.default_message
        self.line_number = line_number
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"line {self.line_number}: {self.message}"
        return self.message

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.message, self.line_number) == (other.message, other.line_number)

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.line_number))


class MissingSeparator(ParseError):
    """A field line has no ``:`` between name and value."""

    code = "missing_separator"
    default_message = "Missing `:`"


class InvalidValue(ParseError):
    """A field value does not match its grammar."""

    code = "invalid_value"


class InvalidUrl(InvalidValue):
    """Value is not an absolute URL."""

    code = "invalid_url"


class InvalidTimestamp(InvalidValue):
    """Value is not a date-time with a timezone offset."""

    code = "invalid_timestamp"


class InvalidLanguageTag(InvalidValue):
    """Value contains a malformed language tag."""

    code = "invalid_language_tag"


class CardinalityError(ParseError):
    """A field appears too often or not at all."""

    code = "cardinality"


class DuplicateExpires(CardinalityError):
    code = "duplicate_expires"
    default_message = "The Expires field must only appear once"


class DuplicatePreferredLanguages(CardinalityError):
    code = "duplicate_preferred_languages"
    default_message = "The Preferred-Languages field must only appear once"


class MissingContact(CardinalityError):
    code = "missing_contact"
    default_message = "Must have at least one Contact field"


class MissingExpires(CardinalityError):
    code = "missing_expires"
    default_message = "Must have an Expires field"
