"""Lint and parse API resources."""

import falcon.asgi

from securitytxt.application.dto.parser_options import ParserOptions
from securitytxt.application.use_cases.lint_document import LintDocumentUseCase
from securitytxt.domain.exceptions import ParseError
from securitytxt.infrastructure.parsing import parse
from securitytxt.interfaces.serialization import (
    document_to_dict,
    error_to_dict,
    report_to_dict,
)


async def _read_content(req: falcon.asgi.Request) -> str:
    """Return the security.txt text from a text/plain body or JSON {"content": ...}."""
    content_type = req.content_type or ""
    if content_type.startswith("application/json"):
        body = await req.get_media()
        content = body.get("content") if isinstance(body, dict) else None
        if not isinstance(content, str):
            raise ValueError("JSON body must have a string 'content'")
        return content
    data = await req.stream.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Body is not valid UTF-8: {e}") from e


class LintResource:
    """POST /v1/lint - report every problem in a security.txt."""

    def __init__(self, lint_document: LintDocumentUseCase) -> None:
        self._lint_document = lint_document

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Lint the body. Always 200 when the body is readable; see "valid"."""
        try:
            content = await _read_content(req)
        except (ValueError, falcon.MediaMalformedError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        report = self._lint_document.execute(content)
        resp.media = report_to_dict(report)
        resp.status = falcon.HTTP_200


class ParseResource:
    """POST /v1/parse - parse a security.txt into a document or the first error."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Parse the body."""
        try:
            content = await _read_content(req)
        except (ValueError, falcon.MediaMalformedError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        try:
            document = parse(content, self._options)
        except ParseError as e:
            resp.status = falcon.HTTP_422
            resp.media = error_to_dict(e)
            return
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_200
