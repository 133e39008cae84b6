from __future__ import annotations

from typing import Any, Callable

import httpx


class Recorder:
    """Mock upstream: records requests and answers from a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def jsonapi_response(status_code: int, payload: Any = None) -> httpx.Response:
    if payload is None:
        return httpx.Response(status_code)
    return httpx.Response(
        status_code,
        json=payload,
        headers={"Content-Type": "application/vnd.api+json"},
    )


def post_resource(post_id: str, title: str, **attributes: Any) -> dict[str, Any]:
    return {"type": "posts", "id": post_id, "attributes": {"title": title, **attributes}}
