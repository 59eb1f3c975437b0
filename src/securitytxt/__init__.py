"""Parser and validator for security.txt files."""

from securitytxt.application.dto.parser_options import ParserOptions
from securitytxt.domain.constants import FILENAME, MIMETYPE, WELL_KNOWN_PATH
from securitytxt.domain.entities import Field, Line, SecurityTxt
from securitytxt.domain.exceptions import ParseError, SecurityTxtError
from securitytxt.infrastructure.parsing import (
    FieldResult,
    aggregate,
    parse,
    parse_field,
    parse_fields,
    parse_line,
)

__version__ = "0.1.0"

__all__ = [
    "FILENAME",
    "MIMETYPE",
    "WELL_KNOWN_PATH",
    "Field",
    "FieldResult",
    "Line",
    "ParseError",
    "ParserOptions",
    "SecurityTxt",
    "SecurityTxtError",
    "__version__",
    "aggregate",
    "parse",
    "parse_field",
    "parse_fields",
    "parse_line",
]
