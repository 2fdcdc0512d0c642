"""Request body size limit enforced before the multipart form is parsed."""

from __future__ import annotations

import logging

from fastapi import status
from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from csvjson.api.errors import FORM_PARSE_MESSAGE
from csvjson.core.exceptions import FormParseError

logger = logging.getLogger(__name__)

# Room for multipart boundaries and part headers around the file itself.
FORM_OVERHEAD_BYTES = 64 * 1024


class UploadLimitMiddleware:
    """Reject request bodies larger than ``max_body_bytes``.

    A declared Content-Length over the limit is refused without reading the
    body. Bodies without one are counted as they stream in, and the read fails
    with ``FormParseError`` once the limit is crossed.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None and (not declared.isdigit() or int(declared) > self.max_body_bytes):
            logger.warning(
                "Refused %s %s: Content-Length %s exceeds %d",
                scope["method"],
                scope["path"],
                declared,
                self.max_body_bytes,
            )
            response = PlainTextResponse(FORM_PARSE_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    raise FormParseError(FORM_PARSE_MESSAGE)
            return message

        await self.app(scope, limited_receive, send)
