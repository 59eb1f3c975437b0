"""Grammar checks for field values."""

from datetime import datetime
from email.utils import parsedate_to_datetime

from pydantic import AnyUrl, TypeAdapter, ValidationError

from securitytxt.domain.exceptions import (
    InvalidLanguageTag,
    InvalidTimestamp,
    InvalidUrl,
)
from securitytxt.domain.value_objects import LanguageTag

_URL_ADAPTER = TypeAdapter(AnyUrl)


def parse_url(value: str, require_https: bool = False) -> AnyUrl:
    """Parse an absolute URL. Raises InvalidUrl with the validator's reason."""
    try:
        url = _URL_ADAPTER.validate_python(value.strip(" \t"))
    except ValidationError as e:
        raise InvalidUrl(e.errors()[0]["msg"]) from e
    if require_https and url.scheme != "https":
        raise InvalidUrl(f"URL must use https, got {url.scheme!r}")
    return url


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 or RFC 5322 date-time; the offset is kept as written."""
    text = value.strip()
    if not text:
        raise InvalidTimestamp("Timestamp is empty")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidTimestamp(f"Invalid timestamp {text!r}") from e
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise InvalidTimestamp(f"Timestamp {text!r} has no timezone offset")
    return parsed


def parse_language_tags(value: str, trim: bool = False) -> tuple[LanguageTag, ...]:
    """Split on commas and check every tag; one bad tag fails the whole list."""
    tags: list[LanguageTag] = []
    for token in value.split(","):
        if trim:
            token = token.strip()
        try:
            tags.append(LanguageTag(token))
        except ValueError as e:
            raise InvalidLanguageTag(str(e)) from e
    return tuple(tags)
