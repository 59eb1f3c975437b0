"""Fixtures for API tests."""

from pathlib import Path

import pytest
from falcon.testing import TestClient

from securitytxt.application.dto.parser_options import ParserOptions
from securitytxt.application.use_cases.lint_document import LintDocumentUseCase
from securitytxt.interfaces.api.app import create_app
from securitytxt.interfaces.api.resources.documents import LintResource, ParseResource
from securitytxt.interfaces.api.resources.health import HealthResource
from securitytxt.interfaces.api.resources.well_known import WellKnownResource

SERVED = "Contact:mailto:security@example.com\nExpires:2030-01-01T00:00:00Z\n"


@pytest.fixture
def served_file(tmp_path: Path) -> Path:
    """security.txt written to a temporary file."""
    path = tmp_path / "security.txt"
    path.write_text(SERVED, encoding="utf-8")
    return path


def _build_app(security_txt_path: str | None):
    options = ParserOptions()
    return create_app(
        lint_resource=LintResource(LintDocumentUseCase(options)),
        parse_resource=ParseResource(options),
        well_known_resource=WellKnownResource(security_txt_path),
        health_resource=HealthResource(security_txt_path),
    )


@pytest.fixture
def app(served_file: Path):
    """Falcon ASGI app serving a security.txt file."""
    return _build_app(str(served_file))


@pytest.fixture
def client(app) -> TestClient:
    """Test client for the app."""
    return TestClient(app)


@pytest.fixture
def bare_client() -> TestClient:
    """Test client for an app with no security.txt configured."""
    return TestClient(_build_app(None))
