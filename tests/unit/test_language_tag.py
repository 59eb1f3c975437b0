"""Unit tests for LanguageTag value object."""

import pytest

from securitytxt.domain.value_objects import LanguageTag
from securitytxt.domain.value_objects.language_tag import is_well_formed


@pytest.mark.parametrize(
    "tag",
    [
        "en",
        "EN",
        "fr-CA",
        "zh-Hant-TW",
        "de-CH-1996",
        "sl-rozaj-biske",
        "es-419",
        "zh-yue-HK",
        "en-a-bbb-x-a-ccc",
        "x-private",
        "i-klingon",
        "zh-min-nan",
    ],
)
def test_well_formed_tags(tag: str) -> None:
    """Tags matching RFC 5646 are accepted."""
    assert is_well_formed(tag)
    assert str(LanguageTag(tag)) == tag


@pytest.mark.parametrize(
    "tag",
    [
        "",
        "e",
        "en_US",
        "en-",
        "-en",
        "en--US",
        "toolonglanguage",
        "123",
        " en",
        "en-x",
        "en-a",
        "en-a-bbb-a-ccc",
        "de-1996-1996",
        "sl-Rozaj-rozaj",
    ],
)
def test_malformed_tags(tag: str) -> None:
    """Malformed tags raise ValueError."""
    assert not is_well_formed(tag)
    with pytest.raises(ValueError, match="Invalid language tag"):
        LanguageTag(tag)


def test_language_tag_keeps_case() -> None:
    """Case is preserved as written."""
    assert LanguageTag("en-GB").value == "en-GB"
