"""Shared fixtures: a session record and clients wired to an in-memory transport."""

from typing import Callable

import httpx
import pytest

from mammut import AsyncMastodon, SessionRecord

BASE = "https://ex.social"

ACCOUNT = {
    "id": "1",
    "username": "alice",
    "acct": "alice",
    "display_name": "Alice",
    "url": "https://ex.social/@alice",
    "followers_count": 7,
}


def status(id: str) -> dict:
    return {
        "id": id,
        "uri": f"https://ex.social/users/alice/statuses/{id}",
        "created_at": "2024-01-01T00:00:00.000Z",
        "account": ACCOUNT,
        "content": f"<p>toot {id}</p>",
    }


@pytest.fixture
def record() -> SessionRecord:
    return SessionRecord(
        base=BASE,
        client_id="abc",
        client_secret="xyz",
        redirect="urn:ietf:wg:oauth:2.0:oob",
        token="tok123",
    )


@pytest.fixture
def sent() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(record: SessionRecord, sent: list[httpx.Request]):
    """Build an AsyncMastodon whose requests are answered by ``handler`` and recorded."""

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        session: SessionRecord = record,
    ) -> AsyncMastodon:
        def recording(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        return AsyncMastodon(session, transport=httpx.MockTransport(recording))

    return factory
