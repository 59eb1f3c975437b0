"""Unit tests for parsing.value_parsers."""

from datetime import UTC, datetime, timedelta

import pytest

from securitytxt.domain.exceptions import (
    InvalidLanguageTag,
    InvalidTimestamp,
    InvalidUrl,
)
from securitytxt.infrastructure.parsing.value_parsers import (
    parse_language_tags,
    parse_timestamp,
    parse_url,
)


class TestParseUrl:
    """Tests for parse_url."""

    def test_https_url(self) -> None:
        url = parse_url("https://example.com/security")
        assert str(url) == "https://example.com/security"
        assert url.scheme == "https"

    def test_url_with_port_keeps_port(self) -> None:
        url = parse_url("https://example.com:8443/report")
        assert url.port == 8443

    def test_mailto_accepted(self) -> None:
        url = parse_url("mailto:security@example.com")
        assert url.scheme == "mailto"

    def test_surrounding_spaces_ignored(self) -> None:
        assert str(parse_url(" https://example.com/security")) == "https://example.com/security"

    def test_relative_url_rejected(self) -> None:
        with pytest.raises(InvalidUrl):
            parse_url("/security")

    def test_garbage_rejected(self) -> None:
        with pytest.raises(InvalidUrl):
            parse_url("not a url")

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidUrl):
            parse_url("")

    def test_reason_is_carried(self) -> None:
        with pytest.raises(InvalidUrl) as exc_info:
            parse_url("not a url")
        assert exc_info.value.message

    def test_require_https_rejects_http(self) -> None:
        with pytest.raises(InvalidUrl, match="https"):
            parse_url("http://example.com/security", require_https=True)

    def test_require_https_accepts_https(self) -> None:
        assert parse_url("https://example.com/", require_https=True).scheme == "https"

    def test_http_accepted_by_default(self) -> None:
        assert parse_url("http://example.com/").scheme == "http"


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_rfc3339_utc(self) -> None:
        assert parse_timestamp("2025-01-01T00:00:00Z") == datetime(2025, 1, 1, tzinfo=UTC)

    def test_rfc3339_offset_is_kept(self) -> None:
        ts = parse_timestamp("2025-01-01T00:00:00+02:00")
        assert ts.utcoffset() == timedelta(hours=2)
        assert ts.hour == 0

    def test_rfc5322_numeric_offset(self) -> None:
        ts = parse_timestamp("Wed, 01 Jan 2025 00:00:00 -0500")
        assert ts.utcoffset() == timedelta(hours=-5)
        assert (ts.year, ts.month, ts.day) == (2025, 1, 1)

    def test_rfc5322_named_zone(self) -> None:
        ts = parse_timestamp("Wed, 01 Jan 2025 00:00:00 GMT")
        assert ts == datetime(2025, 1, 1, tzinfo=UTC)

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_timestamp(" 2025-01-01T00:00:00Z") == datetime(2025, 1, 1, tzinfo=UTC)

    def test_missing_offset_rejected(self) -> None:
        with pytest.raises(InvalidTimestamp, match="no timezone offset"):
            parse_timestamp("2025-01-01T00:00:00")

    def test_date_only_rejected(self) -> None:
        with pytest.raises(InvalidTimestamp):
            parse_timestamp("2025-01-01")

    def test_garbage_rejected(self) -> None:
        with pytest.raises(InvalidTimestamp):
            parse_timestamp("someday")

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidTimestamp, match="empty"):
            parse_timestamp("")

    def test_out_of_range_offset_rejected(self) -> None:
        with pytest.raises(InvalidTimestamp):
            parse_timestamp("Wed, 01 Jan 2025 00:00:00 +99999999999999")


class TestParseLanguageTags:
    """Tests for parse_language_tags."""

    def test_order_preserved(self) -> None:
        tags = parse_language_tags("en,fr,de")
        assert [str(t) for t in tags] == ["en", "fr", "de"]

    def test_single_tag(self) -> None:
        assert [str(t) for t in parse_language_tags("nl-BE")] == ["nl-BE"]

    def test_one_bad_tag_fails_whole_list(self) -> None:
        with pytest.raises(InvalidLanguageTag):
            parse_language_tags("en,en_US,fr")

    def test_spaces_not_trimmed_by_default(self) -> None:
        with pytest.raises(InvalidLanguageTag):
            parse_language_tags("en, fr")

    def test_spaces_trimmed_when_asked(self) -> None:
        tags = parse_language_tags(" en, fr ", trim=True)
        assert [str(t) for t in tags] == ["en", "fr"]

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(InvalidLanguageTag):
            parse_language_tags("")

    def test_trailing_comma_rejected(self) -> None:
        with pytest.raises(InvalidLanguageTag):
            parse_language_tags("en,")
