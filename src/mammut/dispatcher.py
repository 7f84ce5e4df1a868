"""
Request dispatcher — one authenticated HTTP call per route invocation.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from mammut.errors import AccessTokenRequired
from mammut.models.session import SessionRecord
from mammut.page import Page
from mammut.routes import ResponseKind, Route
from mammut.transport.decode import decode_response, raise_for_status_class
from mammut.transport.http import HttpClient

logger = logging.getLogger(__name__)


class Dispatcher:
    """Interprets route descriptors against one instance with one session record.

    Holds no state besides the (immutable) record and the transport, so a
    single dispatcher can be shared by concurrent tasks.
    """

    def __init__(self, record: SessionRecord, http: HttpClient):
        self._record = record
        self._http = http

    @property
    def record(self) -> SessionRecord:
        return self._record

    def _token_for(self, route: Route) -> str:
        if route.requires_auth and not self._record.authenticated:
            raise AccessTokenRequired()
        return self._record.token

    async def dispatch(self, route: Route, **arguments: Any) -> Any:
        """Call ``route`` and return its decoded response.

        Paginated routes return a ``Page``; the others return the decoded
        entity or list of entities.

        Raises AccessTokenRequired, NetworkError, ClientError, ServerError,
        ApiError or DecodeError.
        """
        token = self._token_for(route)
        bound = route.bind(arguments)
        logger.debug("dispatch %s", route.name)
        resp = await self._http.request(
            bound.method, self._http.api_url(bound.path),
            token=token, params=bound.params,
            json=bound.json, data=bound.data, files=bound.files,
        )
        if route.classifies_status:
            raise_for_status_class(resp)
        if route.kind is ResponseKind.PAGINATED:
            return Page.from_response(self, resp, route.response)
        return decode_response(resp, route.adapter)

    async def fetch(self, url: str) -> httpx.Response:
        """Authenticated GET against an absolute URL, e.g. a page link."""
        return await self._http.get(url, token=self._record.token)
