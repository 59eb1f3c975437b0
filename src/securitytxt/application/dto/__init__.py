"""Application DTOs."""

from securitytxt.application.dto.lint_report import LintIssue, LintReport
from securitytxt.application.dto.parser_options import ParserOptions

__all__ = ["LintIssue", "LintReport", "ParserOptions"]
