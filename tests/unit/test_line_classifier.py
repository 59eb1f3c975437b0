"""Unit tests for parsing.line_classifier."""

import pytest

from securitytxt.domain.entities import Comment, Contact, FieldLine
from securitytxt.domain.exceptions import InvalidUrl, MissingSeparator
from securitytxt.infrastructure.parsing.line_classifier import parse_line


class TestParseLine:
    """Tests for parse_line."""

    def test_comment(self) -> None:
        assert parse_line("# hello") == Comment(" hello")

    def test_empty_comment(self) -> None:
        assert parse_line("#") == Comment("")

    @pytest.mark.parametrize("text", ["#Contact:nope", "# no colon here", "#\x00\xff"])
    def test_comment_never_fails(self, text: str) -> None:
        assert isinstance(parse_line(text), Comment)

    def test_field(self) -> None:
        line = parse_line("Contact:https://example.com/")
        assert isinstance(line, FieldLine)
        assert isinstance(line.field, Contact)

    def test_indented_hash_is_not_comment(self) -> None:
        with pytest.raises(MissingSeparator):
            parse_line(" # not a comment")

    def test_field_error_propagates(self) -> None:
        with pytest.raises(InvalidUrl):
            parse_line("Contact:nope")

    def test_blank_line_is_missing_separator(self) -> None:
        with pytest.raises(MissingSeparator):
            parse_line("")
