"""Tests for the request body size middleware."""

from __future__ import annotations

import asyncio

import pytest

from csvjson.api.limits import UploadLimitMiddleware
from csvjson.core.exceptions import FormParseError


def _scope(headers: list[tuple[bytes, bytes]] | None = None) -> dict:
    return {"type": "http", "method": "POST", "path": "/convert", "headers": headers or []}


async def _drain(scope, receive, send):
    while (await receive()).get("more_body"):
        pass
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b""})


def _run(middleware, scope, chunks):
    messages = [
        {"type": "http.request", "body": chunk, "more_body": i < len(chunks) - 1}
        for i, chunk in enumerate(chunks)
    ]
    sent: list[dict] = []

    async def receive():
        return messages.pop(0)

    async def send(message):
        sent.append(message)

    asyncio.run(middleware(scope, receive, send))
    return sent


class TestUploadLimitMiddleware:
    def test_body_within_limit_passes(self):
        sent = _run(UploadLimitMiddleware(_drain, max_body_bytes=10), _scope(), [b"12345", b"12345"])
        assert sent[0]["status"] == 200

    def test_streamed_body_over_limit_raises(self):
        with pytest.raises(FormParseError):
            _run(UploadLimitMiddleware(_drain, max_body_bytes=10), _scope(), [b"123456", b"123456"])

    def test_declared_length_over_limit_never_reaches_app(self):
        reached = []

        async def app(scope, receive, send):
            reached.append(scope)

        scope = _scope([(b"content-length", b"11")])
        sent = _run(UploadLimitMiddleware(app, max_body_bytes=10), scope, [b""])
        assert reached == []
        assert sent[0]["status"] == 400

    def test_invalid_declared_length_refused(self):
        scope = _scope([(b"content-length", b"lots")])
        sent = _run(UploadLimitMiddleware(_drain, max_body_bytes=10), scope, [b""])
        assert sent[0]["status"] == 400
