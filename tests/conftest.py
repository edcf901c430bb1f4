"""Shared fixtures for client tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import httpx
import pytest

from biologreen.api.client import BioLogreenClient
from biologreen.config.settings import ClientSettings

IMAGE_BYTES = b"\x89PNG\r\n\x1a\n-fake-face-image-\x00\xff"


@pytest.fixture
def image_path(tmp_path: Path) -> Path:
    path = tmp_path / "face.png"
    path.write_bytes(IMAGE_BYTES)
    return path


ClientFactory = Callable[[Callable[[httpx.Request], httpx.Response]], BioLogreenClient]


@pytest.fixture
def make_client() -> Iterator[ClientFactory]:
    clients: list[BioLogreenClient] = []

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> BioLogreenClient:
        settings = ClientSettings(api_key="test-key", base_url="https://biologreen.test/v1")
        client = BioLogreenClient(settings, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _factory
    for client in clients:
        client.close()
