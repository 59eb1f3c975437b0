"""Request logging middleware - one log line per request."""

import logging
import time

import falcon.asgi

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Middleware that logs method, path, status and duration."""

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Remember when the request started."""
        req.context.started_at = time.perf_counter()

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        """Log the finished request."""
        started_at = getattr(req.context, "started_at", None)
        elapsed_ms = (time.perf_counter() - started_at) * 1000 if started_at is not None else 0.0
        logger.info("%s %s -> %s (%.1f ms)", req.method, req.path, resp.status, elapsed_ms)
