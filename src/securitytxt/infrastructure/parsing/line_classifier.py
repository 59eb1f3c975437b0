"""Line classifier: comment or field."""

from securitytxt.application.dto.parser_options import ParserOptions
from securitytxt.domain.entities import Comment, FieldLine, Line
from securitytxt.infrastructure.parsing.field_parser import parse_field

COMMENT_PREFIX = "#"


def parse_line(line: str, options: ParserOptions | None = None) -> Line:
    """Classify one line (without its newline). Field errors propagate unchanged."""
    if line.startswith(COMMENT_PREFIX):
        return Comment(line[len(COMMENT_PREFIX) :])
    return FieldLine(parse_field(line, options))
