"""Field stream: lazy per-line parse results over a whole document."""

import logging
from collections.abc import Iterator

from securitytxt.application.dto.parser_options import DEFAULT_OPTIONS, ParserOptions
from securitytxt.domain.entities import Comment
from securitytxt.domain.exceptions import ParseError
from securitytxt.infrastructure.parsing.base import FieldResult
from securitytxt.infrastructure.parsing.line_classifier import parse_line

logger = logging.getLogger(__name__)


def iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) split on ``\\n``, dropping a trailing ``\\r``.

    A final newline does not start another line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line_number, line in enumerate(lines, start=1):
        yield line_number, line.removesuffix("\r")


class FieldStream:
    """Iterable of FieldResult, one per non-comment line, in line order.

    Each iteration parses the text again, so the stream can be consumed any
    number of times and stopped early.
    """

    __slots__ = ("_text", "_options")

    def __init__(self, text: str, options: ParserOptions | None = None) -> None:
        self._text = text
        self._options = options or DEFAULT_OPTIONS

    def __iter__(self) -> Iterator[FieldResult]:
        for line_number, line in iter_lines(self._text):
            if self._options.skip_blank_lines and not line.strip():
                continue
            try:
                parsed = parse_line(line, self._options)
            except ParseError as e:
                e.line_number = line_number
                logger.debug("Rejected line %d: %s", line_number, e.message)
                yield FieldResult(line_number, error=e)
                continue
            if isinstance(parsed, Comment):
                continue
            yield FieldResult(line_number, field=parsed.field)

    def errors(self) -> list[ParseError]:
        """Return every line error in the text."""
        return [result.error for result in self if result.error is not None]


def parse_fields(text: str, options: ParserOptions | None = None) -> FieldStream:
    """Return a restartable stream of field results for text."""
    return FieldStream(text, options)
