"""
Integration tests for mammut — run against a real Mastodon instance.

Requires environment variables:
  MAMMUT_SESSION_FILE  — path to a saved SessionRecord with a valid token

Run: MAMMUT_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from mammut import ApiError, AsyncMastodon, SessionRecord

SKIP = not os.environ.get("MAMMUT_INTEGRATION")
SESSION_FILE = os.environ.get("MAMMUT_SESSION_FILE", "session.json")

pytestmark = pytest.mark.skipif(SKIP, reason="MAMMUT_INTEGRATION not set")


def make_client() -> AsyncMastodon:
    return AsyncMastodon(SessionRecord.load(SESSION_FILE))


class TestAccount:

    @pytest.mark.asyncio
    async def test_verify_credentials(self):
        async with make_client() as client:
            me = await client.verify_credentials()
            assert me.id
            fetched = await client.get_account(id=me.id)
            assert fetched.acct == me.acct


class TestTimelines:

    @pytest.mark.asyncio
    async def test_home_timeline_pages(self):
        async with make_client() as client:
            page = await client.get_home_timeline(limit=2)
            assert len(page) <= 2
            if page.next:
                older = await page.next_page()
                assert older is not None
                assert not {s.id for s in older} & {s.id for s in page}

    @pytest.mark.asyncio
    async def test_instance_is_public(self):
        record = SessionRecord.load(SESSION_FILE).with_token("")
        async with AsyncMastodon(record) as client:
            info = await client.instance()
            assert info.uri


class TestErrorHandling:

    @pytest.mark.asyncio
    async def test_get_nonexistent_status(self):
        async with make_client() as client:
            with pytest.raises(ApiError):
                await client.get_status(id="999999999999999999")
