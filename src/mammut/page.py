"""
Pagination over list endpoints, driven by the ``Link`` response header.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, AsyncGenerator, Generic, Iterator, Optional, TypeVar

import httpx
from pydantic import TypeAdapter

from mammut.transport.decode import decode_response

if TYPE_CHECKING:
    from mammut.dispatcher import Dispatcher

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results.

    ``next`` and ``prev`` are the link URLs exactly as the server sent them.
    Moving to another page returns a new ``Page``; this one never changes.
    """

    items: tuple[T, ...]
    next: Optional[str] = None
    prev: Optional[str] = None
    item_type: Any = field(default=None, repr=False, compare=False)
    _dispatcher: Optional[Dispatcher] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_response(cls, dispatcher: Dispatcher, resp: httpx.Response, item_type: Any) -> Page[Any]:
        items = decode_response(resp, TypeAdapter(list[item_type]))
        return cls(
            items=tuple(items),
            next=_link(resp, "next"),
            prev=_link(resp, "prev"),
            item_type=item_type,
            _dispatcher=dispatcher,
        )

    async def _follow(self, url: Optional[str]) -> Optional[Page[T]]:
        if url is None:
            return None
        if self._dispatcher is None:
            raise RuntimeError("Page is not bound to a dispatcher")
        resp = await self._dispatcher.fetch(url)
        return Page.from_response(self._dispatcher, resp, self.item_type)

    async def next_page(self) -> Optional[Page[T]]:
        """The following page, or None at the end of the results."""
        return await self._follow(self.next)

    async def prev_page(self) -> Optional[Page[T]]:
        """The preceding page, or None at the start of the results."""
        return await self._follow(self.prev)

    async def walk(self) -> AsyncGenerator[T, None]:
        """Yield items from this page and every following one."""
        page: Optional[Page[T]] = self
        while page is not None:
            for item in page.items:
                yield item
            page = await page.next_page()

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _link(resp: httpx.Response, rel: str) -> Optional[str]:
    return resp.links.get(rel, {}).get("url")
