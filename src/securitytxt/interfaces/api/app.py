"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from securitytxt.domain.constants import WELL_KNOWN_PATH
from securitytxt.interfaces.api.middleware.request_logging import RequestLoggingMiddleware
from securitytxt.interfaces.api.resources.documents import LintResource, ParseResource
from securitytxt.interfaces.api.resources.health import HealthResource
from securitytxt.interfaces.api.resources.well_known import WellKnownResource

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params) -> None:
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    lint_resource: LintResource,
    parse_resource: ParseResource,
    well_known_resource: WellKnownResource,
    health_resource: HealthResource,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=[RequestLoggingMiddleware()])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/lint", lint_resource)
    app.add_route("/v1/parse", parse_resource)
    app.add_route(WELL_KNOWN_PATH, well_known_resource)
    return app
