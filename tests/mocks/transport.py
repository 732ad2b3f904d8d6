"""Queued ``httpx.AsyncClient`` stand-in for client tests."""

from __future__ import annotations

import json as jsonlib
from http import HTTPStatus
from typing import Any

import httpx


class DummyHTTPResponse:
    def __init__(
        self,
        status_code: int = 200,
        json_data: Any = None,
        text: str | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data
        if text is None:
            text = jsonlib.dumps(json_data) if json_data is not None else ""
        self.text = text
        self.content = content if content is not None else text.encode()
        self.headers = httpx.Headers(headers or {})

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def reason_phrase(self) -> str:
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:  # pragma: no cover - helper
            return ""

    def json(self) -> Any:
        if self._json_data is None:
            raise ValueError("No JSON data")
        return self._json_data


Queued = DummyHTTPResponse | Exception


class DummyAsyncClient:
    """Serves queued responses per HTTP method and records every request."""

    def __init__(self, queues: dict[str, list[Queued]]) -> None:
        self._queues = queues
        self.requests: list[dict[str, Any]] = []

    async def __aenter__(self) -> "DummyAsyncClient":  # pragma: no cover - helper
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:  # pragma: no cover - helper
        return None

    async def _dispatch(self, method: str, url: str, **kwargs: Any) -> DummyHTTPResponse:
        self.requests.append({"method": method, "url": url, **kwargs})
        queue = self._queues.get(method) or []
        if not queue:
            raise RuntimeError(f"No {method} responses queued")
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def get(self, url: str, **kwargs: Any) -> DummyHTTPResponse:
        return await self._dispatch("GET", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> DummyHTTPResponse:
        return await self._dispatch("PUT", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> DummyHTTPResponse:
        return await self._dispatch("POST", url, **kwargs)

    def calls(self, method: str) -> list[dict[str, Any]]:
        return [request for request in self.requests if request["method"] == method]


def configure_httpx(
    monkeypatch,
    *,
    get: list[Queued] | None = None,
    put: list[Queued] | None = None,
    post: list[Queued] | None = None,
) -> DummyAsyncClient:
    client = DummyAsyncClient({"GET": list(get or []), "PUT": list(put or []), "POST": list(post or [])})

    def factory(*args, **kwargs):
        return client

    monkeypatch.setattr("httpx.AsyncClient", factory)
    return client
