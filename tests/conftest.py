"""Pytest fixtures for securitytxt tests."""

import pytest

from securitytxt.application.dto.parser_options import ParserOptions

MINIMAL = "Contact:https://example.com/security\nExpires:2025-01-01T00:00:00Z"

FULL = "\n".join(
    [
        "# security.txt for example.com",
        "Contact:https://example.com/security",
        "Contact:mailto:security@example.com",
        "Expires:2025-01-01T00:00:00+02:00",
        "Acknowledgments:https://example.com/thanks",
        "Canonical:https://example.com/.well-known/security.txt",
        "Encryption:https://example.com/key.asc",
        "Hiring:https://example.com/jobs",
        "Policy:https://example.com/policy",
        "Preferred-Languages:en,fr",
        "X-Team:Red Team",
    ]
)


@pytest.fixture
def minimal_text() -> str:
    """Smallest valid document: one Contact and one Expires."""
    return MINIMAL


@pytest.fixture
def full_text() -> str:
    """Document using every recognized field plus one extension."""
    return FULL


@pytest.fixture
def lenient_options() -> ParserOptions:
    """Options that skip blank lines and trim language tags."""
    return ParserOptions(skip_blank_lines=True, trim_language_tags=True)
