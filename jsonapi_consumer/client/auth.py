"""Token authentication step for the upstream HTTP pipeline."""

from __future__ import annotations

from typing import Generator

import httpx

from jsonapi_consumer.core.credentials import Credentials


class TokenAuth(httpx.Auth):
    """Attach ``Authorization: Token token="...", email="..."`` to each request.

    Bound to one :class:`Credentials` value and passed per request, so the
    same client can serve many users without shared auth state.
    """

    def __init__(self, credentials: Credentials) -> None:
        self.credentials = credentials

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self.credentials.authorization_header()
        yield request
