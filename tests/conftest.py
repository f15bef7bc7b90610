"""Pytest fixtures for yandex_disk_client tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest
from helpers import RecordingHandler

from yandex_disk_client import YandexDiskClient

TEST_TOKEN = "test_token"


@pytest.fixture
def handler() -> RecordingHandler:
    """Handler answering 200 with an empty JSON object."""
    return RecordingHandler()


@pytest.fixture
def make_client() -> Iterator[Callable[[RecordingHandler], YandexDiskClient]]:
    """Factory building clients wired to a mock transport; closes them afterwards."""
    clients: list[YandexDiskClient] = []

    def factory(handler: RecordingHandler, **options: object) -> YandexDiskClient:
        client = YandexDiskClient(
            TEST_TOKEN,
            timeout=5,
            transport=httpx.MockTransport(handler),
            **options,  # type: ignore[arg-type]
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def client(
    handler: RecordingHandler, make_client: Callable[[RecordingHandler], YandexDiskClient]
) -> YandexDiskClient:
    """Client sending to the default handler."""
    return make_client(handler)
