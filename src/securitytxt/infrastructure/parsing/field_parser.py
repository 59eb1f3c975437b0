"""Field parser: split a ``Name: Value`` line and dispatch on the name."""

from collections.abc import Callable

from securitytxt.application.dto.parser_options import DEFAULT_OPTIONS, ParserOptions
from securitytxt.domain.entities import (
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
from securitytxt.domain.exceptions import MissingSeparator
from securitytxt.domain.value_objects import FieldName
from securitytxt.infrastructure.parsing.value_parsers import (
    parse_language_tags,
    parse_timestamp,
    parse_url,
)

ValueParser = Callable[[str, ParserOptions], Field]


def _url_field(field_type: type[UrlField]) -> ValueParser:
    def parse(value: str, options: ParserOptions) -> Field:
        return field_type(parse_url(value, require_https=options.require_https))

    return parse


def _expires(value: str, options: ParserOptions) -> Field:
    return Expires(parse_timestamp(value))


def _preferred_languages(value: str, options: ParserOptions) -> Field:
    return PreferredLanguages(parse_language_tags(value, trim=options.trim_language_tags))


# lower-cased field name -> value parser
_PARSERS_BY_NAME: dict[str, ValueParser] = {
    FieldName.ACKNOWLEDGMENTS: _url_field(Acknowledgments),
    FieldName.CANONICAL: _url_field(Canonical),
    FieldName.CONTACT: _url_field(Contact),
    FieldName.ENCRYPTION: _url_field(Encryption),
    FieldName.EXPIRES: _expires,
    FieldName.HIRING: _url_field(Hiring),
    FieldName.POLICY: _url_field(Policy),
    FieldName.PREFERRED_LANGUAGES: _preferred_languages,
}


def split_field(line: str) -> tuple[str, str]:
    """Split at the first ``:``; the value keeps any later colons."""
    name, sep, value = line.partition(":")
    if not sep:
        raise MissingSeparator()
    return name, value


def get_parser_for_name(name: str) -> ValueParser | None:
    """Return the value parser for a field name (any case) or None."""
    return _PARSERS_BY_NAME.get(name.lower())


def parse_field(line: str, options: ParserOptions | None = None) -> Field:
    """
    Parse one field line into a Field.
    Unrecognized names become Extension with the name's original case.
    Raises MissingSeparator or the value parser's InvalidValue subclass.
    """
    name, value = split_field(line)
    parser = get_parser_for_name(name)
    if parser is None:
        return Extension(name, value)
    return parser(value, options or DEFAULT_OPTIONS)


def known_field_names() -> list[str]:
    """Return the recognized field names, sorted."""
    return sorted(str(name) for name in _PARSERS_BY_NAME)
