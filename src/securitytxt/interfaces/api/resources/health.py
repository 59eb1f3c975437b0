"""Health check endpoints."""

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, well_known_path: str | None = None) -> None:
        self._well_known_path = well_known_path

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness, reports whether a security.txt is being served."""
        resp.media = {"status": "ready", "serving_security_txt": bool(self._well_known_path)}
        resp.status = falcon.HTTP_200
