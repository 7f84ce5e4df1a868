"""
REST HTTP transport for Mastodon instances.

Owns the connection pool. Credentials are passed per request so one transport
can serve both the registration flow and authenticated calls.
"""

import logging
from typing import Any, Optional

import httpx

from mammut._version import __version__
from mammut.errors import NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
API_PREFIX = "/api/v1/"
USER_AGENT = f"mammut/{__version__}"


class HttpClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def api_url(self, path: str) -> str:
        """``{base}/api/v1/{path}``"""
        return f"{self._base_url}{API_PREFIX}{path.lstrip('/')}"

    def url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    @staticmethod
    def _auth_headers(token: Optional[str]) -> dict[str, str]:
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def request(
        self,
        method: str,
        url: str,
        *,
        token: Optional[str] = None,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        data: Optional[dict[str, Any]] = None,
        files: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one request. Transport failures become NetworkError; HTTP statuses are left to the caller."""
        logger.debug("%s %s", method, url)
        try:
            resp = await self._client.request(
                method, url,
                params=params, json=json, data=data, files=files,
                headers=self._auth_headers(token),
            )
        except httpx.TransportError as e:
            logger.debug("%s %s failed: %r", method, url, e)
            raise NetworkError(f"{method} {url} failed: {e}", cause=e) from e
        logger.debug("%s %s -> %d", method, url, resp.status_code)
        return resp

    async def get(self, url: str, token: Optional[str] = None, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        return await self.request("GET", url, token=token, params=params)

    async def post_form(self, url: str, data: dict[str, Any]) -> httpx.Response:
        return await self.request("POST", url, data=data)

    async def close(self) -> None:
        await self._client.aclose()
