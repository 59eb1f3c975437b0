"""Security.txt parsing: value grammars, line classification, field stream and aggregation."""

from securitytxt.infrastructure.parsing.aggregator import aggregate, parse
from securitytxt.infrastructure.parsing.base import FieldResult
from securitytxt.infrastructure.parsing.field_parser import (
    known_field_names,
    parse_field,
)
from securitytxt.infrastructure.parsing.field_stream import FieldStream, parse_fields
from securitytxt.infrastructure.parsing.line_classifier import parse_line

__all__ = [
    "FieldResult",
    "FieldStream",
    "aggregate",
    "known_field_names",
    "parse",
    "parse_field",
    "parse_fields",
    "parse_line",
]
