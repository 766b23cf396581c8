"""Unit tests for raw-ASGI middleware helpers and behaviour."""

import asyncio

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tracker.middleware import RequestSizeLimitMiddleware, TimeoutMiddleware
from tracker.middleware.request_id import _sanitize_request_id, redact_path


class TestRedactPath:
    def test_webhook_id_is_hidden(self) -> None:
        assert redact_path("/api/webhook/s3cr3t-id") == "/api/webhook/***"

    def test_other_paths_unchanged(self) -> None:
        assert redact_path("/api/servers/abc") == "/api/servers/abc"


class TestSanitizeRequestId:
    def test_valid_id_kept(self) -> None:
        assert _sanitize_request_id("abc-123_X") == "abc-123_X"

    def test_unsafe_id_replaced(self) -> None:
        replaced = _sanitize_request_id("bad\nid")
        assert replaced != "bad\nid"
        assert len(replaced) == 32


def _echo_app() -> FastAPI:
    app = FastAPI()

    @app.post("/echo")
    async def echo(body: dict) -> dict:
        return body

    @app.get("/slow")
    async def slow() -> dict:
        await asyncio.sleep(5)
        return {"ok": True}

    return app


async def test_request_size_limit_rejects_large_body() -> None:
    app = RequestSizeLimitMiddleware(_echo_app(), max_bytes=32)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        small = await client.post("/echo", json={"a": 1})
        large = await client.post("/echo", json={"a": "x" * 100})
    assert small.status_code == 200
    assert large.status_code == 413


async def test_timeout_returns_504() -> None:
    app = TimeoutMiddleware(_echo_app(), timeout_seconds=1)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/slow")
    assert response.status_code == 504
