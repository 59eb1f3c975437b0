"""Lint document use case - report every problem in a security.txt file."""

import logging

from securitytxt.application.dto.lint_report import LintIssue, LintReport
from securitytxt.application.dto.parser_options import ParserOptions
from securitytxt.domain.exceptions import CardinalityError
from securitytxt.infrastructure.parsing import aggregate, parse_fields

logger = logging.getLogger(__name__)


class LintDocumentUseCase:
    """Collect all line errors plus the first document-level error."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options

    def execute(self, text: str) -> LintReport:
        """Lint text. Never raises ParseError; problems go into the report."""
        results = list(parse_fields(text, self._options))
        issues = [LintIssue.from_error(r.error) for r in results if r.error is not None]

        document = None
        try:
            # Cardinality is checked over the lines that parsed.
            document = aggregate(r for r in results if r.ok)
        except CardinalityError as e:
            issues.append(LintIssue.from_error(e))

        if issues:
            document = None
        logger.info(
            "Linted security.txt: %d fields, %d line errors, %d issues",
            sum(1 for r in results if r.ok),
            sum(1 for r in results if not r.ok),
            len(issues),
        )
        return LintReport(document=document, issues=issues)
