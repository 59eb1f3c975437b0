"""BCP 47 language tag (RFC 5646), checked for well-formedness only."""

import re
from dataclasses import dataclass

_LANGTAG = re.compile(
    r"""
    (?:[a-z]{2,3}(?:-[a-z]{3}){0,3}|[a-z]{4}|[a-z]{5,8})   # language, extlang
    (?:-[a-z]{4})?                                          # script
    (?:-(?:[a-z]{2}|[0-9]{3}))?                             # region
    (?:-(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*                # variants
    (?:-[0-9a-wy-z](?:-[a-z0-9]{2,8})+)*                    # extensions
    (?:-x(?:-[a-z0-9]{1,8})+)?                              # private use
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

_PRIVATE_USE = re.compile(r"x(?:-[a-z0-9]{1,8})+", re.IGNORECASE | re.ASCII)

# Irregular and regular grandfathered tags, lower-cased.
_GRANDFATHERED = frozenset(
    {
        "en-gb-oed",
        "i-ami",
        "i-bnn",
        "i-default",
        "i-enochian",
        "i-hak",
        "i-klingon",
        "i-lux",
        "i-mingo",
        "i-navajo",
        "i-pwn",
        "i-tao",
        "i-tay",
        "i-tsu",
        "sgn-be-fr",
        "sgn-be-nl",
        "sgn-ch-de",
        "art-lojban",
        "cel-gaulish",
        "no-bok",
        "no-nyn",
        "zh-guoyu",
        "zh-hakka",
        "zh-min",
        "zh-min-nan",
        "zh-xiang",
    }
)


def _has_repeated_subtags(tag: str) -> bool:
    """True if a variant or an extension singleton appears twice (RFC 5646 2.2.5, 2.2.6)."""
    subtags = tag.lower().split("-")
    if "x" in subtags:
        subtags = subtags[: subtags.index("x")]
    singletons: list[str] = []
    variants: list[str] = []
    for subtag in subtags[1:]:
        if len(subtag) == 1:
            singletons.append(subtag)
        elif not singletons and (len(subtag) >= 5 or (len(subtag) == 4 and subtag[0].isdigit())):
            variants.append(subtag)
    return len(set(singletons)) != len(singletons) or len(set(variants)) != len(variants)


def is_well_formed(tag: str) -> bool:
    """Return True if tag matches the RFC 5646 Language-Tag production."""
    if tag.lower() in _GRANDFATHERED:
        return True
    if _PRIVATE_USE.fullmatch(tag):
        return True
    return bool(_LANGTAG.fullmatch(tag)) and not _has_repeated_subtags(tag)


@dataclass(frozen=True)
class LanguageTag:
    """Language tag as written in the file; case is preserved."""

    value: str

    def __post_init__(self) -> None:
        if not is_well_formed(self.value):
            raise ValueError(f"Invalid language tag: {self.value!r}")

    def __str__(self) -> str:
        return self.value
