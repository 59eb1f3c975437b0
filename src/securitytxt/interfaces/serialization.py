"""JSON-ready dicts for documents and lint reports."""

from securitytxt.application.dto.lint_report import LintIssue, LintReport
from securitytxt.domain.entities import SecurityTxt
from securitytxt.domain.exceptions import ParseError


def document_to_dict(d: SecurityTxt) -> dict:
    return {
        "primary_contact": str(d.primary_contact),
        "contacts": [str(u) for u in d.contacts],
        "expires": d.expires.isoformat(),
        "acknowledgments": [str(u) for u in d.acknowledgments],
        "canonical": [str(u) for u in d.canonical],
        "encryptions": [str(u) for u in d.encryptions],
        "hiring": [str(u) for u in d.hiring],
        "policies": [str(u) for u in d.policies],
        "preferred_languages": [str(t) for t in d.preferred_languages],
        "extensions": [[name, value] for name, value in d.extensions],
    }


def error_to_dict(e: ParseError) -> dict:
    return {"error": e.code, "message": e.message, "line": e.line_number}


def issue_to_dict(issue: LintIssue) -> dict:
    return {"line": issue.line_number, "code": issue.code, "message": issue.message}


def report_to_dict(report: LintReport) -> dict:
    return {
        "valid": report.is_valid,
        "issues": [issue_to_dict(i) for i in report.issues],
        "document": document_to_dict(report.document) if report.document else None,
    }
