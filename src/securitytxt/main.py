"""Application entry point and composition root."""

import logging
import sys

from falcon.asgi import App

from securitytxt.application.use_cases.lint_document import LintDocumentUseCase
from securitytxt.config import Settings, get_settings
from securitytxt.interfaces.api.app import create_app
from securitytxt.interfaces.api.resources.documents import LintResource, ParseResource
from securitytxt.interfaces.api.resources.health import HealthResource
from securitytxt.interfaces.api.resources.well_known import WellKnownResource
from securitytxt.interfaces.cli import run


def configure_logging(level: str) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    sys.exit(run(settings=settings))


def create_securitytxt_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    options = settings.parser_options()

    lint_resource = LintResource(LintDocumentUseCase(options))
    parse_resource = ParseResource(options)
    well_known_resource = WellKnownResource(settings.security_txt_path)
    health_resource = HealthResource(settings.security_txt_path)

    return create_app(
        lint_resource=lint_resource,
        parse_resource=parse_resource,
        well_known_resource=well_known_resource,
        health_resource=health_resource,
    )


def run_server(settings: Settings | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    app = create_securitytxt_app(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())
