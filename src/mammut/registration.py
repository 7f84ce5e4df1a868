"""
Registration flow — OAuth2 authorization code handshake.

Three stages, each its own type:

    registration = Registration("https://mastodon.social")
    registered = await registration.register(App(client_name="my-app"))
    url = registered.authorize_url()
    # send the user to ``url`` and collect the code they are shown
    record = await registered.exchange_code(code)

No stage is retried. To start over, build a new ``Registration``.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from mammut.errors import ApiError, ClientIdRequired, ClientSecretRequired, ProtocolError
from mammut.models.app import AccessToken, App, AppCredentials, RegisteredApp
from mammut.models.session import SessionRecord
from mammut.transport.decode import parse_error_payload
from mammut.transport.http import DEFAULT_TIMEOUT, HttpClient

logger = logging.getLogger(__name__)

APPS_PATH = "apps"
AUTHORIZE_PATH = "oauth/authorize"
TOKEN_PATH = "oauth/token"


class Registration:
    """Unregistered stage: an instance and nothing else."""

    def __init__(
        self,
        base: str,
        http: Optional[HttpClient] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base = base.rstrip("/")
        self._http = http or HttpClient(self._base, timeout=timeout, transport=transport)

    @property
    def base(self) -> str:
        return self._base

    async def register(self, app: App) -> Registered:
        """Step 1: register the application and receive client credentials.

        Raises NetworkError, or ProtocolError if the response lacks
        ``client_id`` or ``client_secret``.
        """
        resp = await self._http.post_form(self._http.api_url(APPS_PATH), app.form())
        try:
            credentials = AppCredentials.model_validate_json(resp.content)
        except ValidationError as e:
            raise ProtocolError(
                f"App registration response is missing client_id or client_secret (HTTP {resp.status_code})",
                {"status": resp.status_code, "body": resp.text[:200]},
            ) from e
        logger.debug("Registered %r on %s", app.client_name, self._base)
        return Registered(
            RegisteredApp(
                base=self._base,
                client_id=credentials.client_id,
                client_secret=credentials.client_secret,
                redirect=app.redirect_uris,
                scopes=app.scopes,
            ),
            self._http,
        )

    async def close(self) -> None:
        await self._http.close()


class Registered:
    """Registered stage: client credentials are known, the user has not authorized yet."""

    def __init__(self, app: RegisteredApp, http: HttpClient):
        self._app = app
        self._http = http

    @classmethod
    def from_app(
        cls,
        app: RegisteredApp,
        http: Optional[HttpClient] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> Registered:
        """Resume the flow from a saved ``RegisteredApp``."""
        _require_credentials(app)
        return cls(app, http or HttpClient(app.base, timeout=timeout, transport=transport))

    @property
    def app(self) -> RegisteredApp:
        return self._app

    def authorize_url(self) -> str:
        """Step 2: the page where the user grants access. No request is made."""
        query = urlencode({
            "client_id": self._app.client_id,
            "redirect_uri": self._app.redirect,
            "response_type": "code",
            "scope": self._app.scopes.value,
        })
        return f"{self._http.url(AUTHORIZE_PATH)}?{query}"

    async def exchange_code(self, code: str) -> SessionRecord:
        """Step 3: trade the authorization code for an access token.

        Raises NetworkError, ApiError if the instance rejects the code, or
        ProtocolError if the response is neither a token nor an error.
        """
        _require_credentials(self._app)
        resp = await self._http.post_form(self._http.url(TOKEN_PATH), {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": self._app.client_id,
            "client_secret": self._app.client_secret,
            "redirect_uri": self._app.redirect,
        })
        try:
            token = AccessToken.model_validate_json(resp.content)
        except ValidationError as first:
            try:
                payload = parse_error_payload(resp.content)
            except ValidationError:
                raise ProtocolError(
                    f"Token response has no access_token (HTTP {resp.status_code})",
                    {"status": resp.status_code, "body": resp.text[:200]},
                ) from first
            raise ApiError(payload) from None
        if not token.access_token:
            raise ProtocolError("Token response has an empty access_token", {"status": resp.status_code})
        logger.debug("Authorized on %s", self._app.base)
        return SessionRecord(
            base=self._app.base,
            client_id=self._app.client_id,
            client_secret=self._app.client_secret,
            redirect=self._app.redirect,
            token=token.access_token,
        )

    async def close(self) -> None:
        await self._http.close()


def _require_credentials(app: RegisteredApp) -> None:
    if not app.client_id:
        raise ClientIdRequired()
    if not app.client_secret:
        raise ClientSecretRequired()
