"""
AsyncMastodon / Mastodon — main clients.

Every entry of ``mammut.routes.ROUTES`` is available as a method named after
the route:

    client = AsyncMastodon(SessionRecord.load("session.json"))
    me = await client.verify_credentials()
    page = await client.get_home_timeline(limit=20)
    older = await page.next_page()
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional

import httpx

from mammut.dispatcher import Dispatcher
from mammut.models.session import SessionRecord
from mammut.page import Page
from mammut.routes import ROUTES, Route
from mammut.transport.http import DEFAULT_TIMEOUT, HttpClient


def _route(name: str) -> Route:
    try:
        return ROUTES[name]
    except KeyError:
        raise AttributeError(f"No Mastodon route named {name!r}") from None


class AsyncMastodon:
    """Async Mastodon client (primary)."""

    def __init__(
        self,
        record: SessionRecord,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.http = HttpClient(record.base, timeout=timeout, transport=transport)
        self.dispatcher = Dispatcher(record, self.http)

    @property
    def record(self) -> SessionRecord:
        return self.dispatcher.record

    @property
    def authenticated(self) -> bool:
        return self.record.authenticated

    async def call(self, name: str, **arguments: Any) -> Any:
        """Call the route called ``name``."""
        return await self.dispatcher.dispatch(_route(name), **arguments)

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        if name.startswith("_"):
            raise AttributeError(name)
        route = _route(name)

        async def method(**arguments: Any) -> Any:
            return await self.dispatcher.dispatch(route, **arguments)

        method.__name__ = name
        return method

    async def next_page(self, page: Page[Any]) -> Optional[Page[Any]]:
        return await page.next_page()

    async def prev_page(self, page: Page[Any]) -> Optional[Page[Any]]:
        return await page.prev_page()

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncMastodon":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class Mastodon:
    """Sync wrapper around AsyncMastodon. Runs the event loop internally."""

    def __init__(self, record: SessionRecord, **kwargs: Any):
        self._async = AsyncMastodon(record, **kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def record(self) -> SessionRecord:
        return self._async.record

    @property
    def authenticated(self) -> bool:
        return self._async.authenticated

    def call(self, name: str, **arguments: Any) -> Any:
        return self._run(self._async.call(name, **arguments))

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        route = _route(name)

        def method(**arguments: Any) -> Any:
            return self._run(self._async.dispatcher.dispatch(route, **arguments))

        method.__name__ = name
        return method

    def next_page(self, page: Page[Any]) -> Optional[Page[Any]]:
        return self._run(page.next_page())

    def prev_page(self, page: Page[Any]) -> Optional[Page[Any]]:
        return self._run(page.prev_page())

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
