"""
mammut — Mastodon API client for Python.

OAuth app registration, authenticated requests and Link-header pagination
over the Mastodon REST API.
"""

from mammut.client import AsyncMastodon, Mastodon
from mammut.dispatcher import Dispatcher
from mammut.errors import (
    AccessTokenRequired,
    ApiError,
    ClientError,
    ClientIdRequired,
    ClientSecretRequired,
    CredentialRequired,
    DecodeError,
    HttpStatusError,
    MammutError,
    NetworkError,
    ProtocolError,
    ServerError,
)
from mammut.models.app import App, RegisteredApp, Scopes
from mammut.models.error import ApiErrorPayload
from mammut.models.session import SessionRecord
from mammut.page import Page
from mammut.registration import Registered, Registration
from mammut.routes import ROUTES, BodyKind, ResponseKind, Route

from mammut._version import __version__
__all__ = [
    "AsyncMastodon",
    "Mastodon",
    "Dispatcher",
    "Registration",
    "Registered",
    "SessionRecord",
    "App",
    "RegisteredApp",
    "Scopes",
    "Page",
    "Route",
    "ROUTES",
    "BodyKind",
    "ResponseKind",
    "ApiErrorPayload",
    "MammutError",
    "NetworkError",
    "HttpStatusError",
    "ClientError",
    "ServerError",
    "ApiError",
    "DecodeError",
    "ProtocolError",
    "CredentialRequired",
    "AccessTokenRequired",
    "ClientIdRequired",
    "ClientSecretRequired",
]
