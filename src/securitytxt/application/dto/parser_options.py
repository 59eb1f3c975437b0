"""Parser options DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserOptions:
    """Switches for behavior the security.txt format leaves open.

    The defaults keep the strict reading: any URL scheme is accepted, blank
    lines are malformed fields and language tags are not trimmed.
    """

    require_https: bool = False
    skip_blank_lines: bool = False
    trim_language_tags: bool = False


DEFAULT_OPTIONS = ParserOptions()
