from __future__ import annotations

from typing import Callable

import httpx
import pytest

from jsonapi_consumer import ConsumerSettings, Credentials, JSONAPIClient
from tests.helpers import Recorder

API_URL = "http://api.example"


@pytest.fixture
def settings() -> ConsumerSettings:
    return ConsumerSettings(api_url=API_URL, default_page_size=25)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(email="jane@example.com", token="s3cret")


@pytest.fixture
def make_client(settings: ConsumerSettings) -> Callable[..., tuple[JSONAPIClient, Recorder]]:
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[JSONAPIClient, Recorder]:
        recorder = Recorder(handler)
        client = JSONAPIClient(settings=settings, transport=httpx.MockTransport(recorder))
        return client, recorder

    return factory
