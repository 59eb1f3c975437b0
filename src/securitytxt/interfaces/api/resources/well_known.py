"""Serve the configured security.txt at the well-known path."""

import logging
from pathlib import Path

import falcon.asgi

from securitytxt.domain.constants import MIMETYPE

logger = logging.getLogger(__name__)


class WellKnownResource:
    """GET /.well-known/security.txt"""

    def __init__(self, path: str | None) -> None:
        self._path = Path(path) if path else None

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Return the file as text/plain; 404 when none is configured or readable."""
        if self._path is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "security.txt not configured"}
            return
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", self._path, e)
            resp.status = falcon.HTTP_404
            resp.media = {"error": "security.txt not available"}
            return
        resp.content_type = f"{MIMETYPE}; charset=utf-8"
        resp.text = text
        resp.status = falcon.HTTP_200
