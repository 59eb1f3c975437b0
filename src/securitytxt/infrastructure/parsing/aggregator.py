"""Document aggregator: fold a field stream into a validated SecurityTxt."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime
from functools import reduce

from pydantic import AnyUrl

from securitytxt.application.dto.parser_options import ParserOptions
from securitytxt.domain.entities import (
    Acknowledgments,
    Canonical,
    Contact,
    Encryption,
    Expires,
    Extension,
    Hiring,
    Policy,
    PreferredLanguages,
    SecurityTxt,
)
from securitytxt.domain.exceptions import (
    DuplicateExpires,
    DuplicatePreferredLanguages,
    MissingContact,
    MissingExpires,
    ParseError,
)
from securitytxt.domain.value_objects import LanguageTag
from securitytxt.infrastructure.parsing.base import FieldResult
from securitytxt.infrastructure.parsing.field_stream import parse_fields

logger = logging.getLogger(__name__)

# URL field type -> accumulator sequence it appends to
_URL_SEQUENCES: dict[type, str] = {
    Acknowledgments: "acknowledgments",
    Canonical: "canonical",
    Contact: "contacts",
    Encryption: "encryptions",
    Hiring: "hiring",
    Policy: "policies",
}


@dataclass(frozen=True)
class _Accumulator:
    acknowledgments: tuple[AnyUrl, ...] = ()
    canonical: tuple[AnyUrl, ...] = ()
    contacts: tuple[AnyUrl, ...] = ()
    encryptions: tuple[AnyUrl, ...] = ()
    expires: datetime | None = None
    hiring: tuple[AnyUrl, ...] = ()
    policies: tuple[AnyUrl, ...] = ()
    preferred_languages: tuple[LanguageTag, ...] | None = None
    extensions: tuple[tuple[str, str], ...] = ()


def _fold_step(acc: _Accumulator, result: FieldResult) -> _Accumulator:
    """Return the accumulator with one more field; raise on the first error."""
    field = result.unwrap()

    sequence = _URL_SEQUENCES.get(type(field))
    if sequence is not None:
        return replace(acc, **{sequence: getattr(acc, sequence) + (field.url,)})

    if isinstance(field, Expires):
        if acc.expires is not None:
            raise DuplicateExpires(line_number=result.line_number)
        return replace(acc, expires=field.timestamp)

    if isinstance(field, PreferredLanguages):
        if acc.preferred_languages is not None:
            raise DuplicatePreferredLanguages(line_number=result.line_number)
        return replace(acc, preferred_languages=field.languages)

    if isinstance(field, Extension):
        return replace(acc, extensions=acc.extensions + ((field.name, field.value),))

    raise TypeError(f"Unsupported field: {field!r}")


def _build(acc: _Accumulator) -> SecurityTxt:
    """Check required fields (Contact first, then Expires) and build the document."""
    if not acc.contacts:
        raise MissingContact()
    if acc.expires is None:
        raise MissingExpires()
    return SecurityTxt(
        contacts=acc.contacts,
        expires=acc.expires,
        acknowledgments=acc.acknowledgments,
        canonical=acc.canonical,
        encryptions=acc.encryptions,
        hiring=acc.hiring,
        policies=acc.policies,
        preferred_languages=acc.preferred_languages or (),
        extensions=acc.extensions,
    )


def aggregate(results: Iterable[FieldResult]) -> SecurityTxt:
    """
    Fold field results into a SecurityTxt.
    Raises the first line error, DuplicateExpires, DuplicatePreferredLanguages,
    MissingContact or MissingExpires; no document is built on error.
    """
    try:
        document = _build(reduce(_fold_step, results, _Accumulator()))
    except ParseError as e:
        logger.debug("Aggregation stopped: %s", e)
        raise
    logger.debug(
        "Built security.txt: %d contacts, %d extensions",
        len(document.contacts),
        len(document.extensions),
    )
    return document


def parse(text: str, options: ParserOptions | None = None) -> SecurityTxt:
    """Parse and validate a whole security.txt document."""
    return aggregate(parse_fields(text, options))
