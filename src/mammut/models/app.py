"""
Application descriptors for the OAuth registration flow.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_REDIRECT = "urn:ietf:wg:oauth:2.0:oob"


class Scopes(str, Enum):
    READ = "read"
    WRITE = "write"
    FOLLOW = "follow"
    READ_WRITE = "read write"
    READ_FOLLOW = "read follow"
    WRITE_FOLLOW = "write follow"
    ALL = "read write follow"

    def __str__(self) -> str:
        return self.value


class App(BaseModel):
    """What the instance is told about the application at registration."""

    client_name: str
    redirect_uris: str = DEFAULT_REDIRECT
    scopes: Scopes = Scopes.READ
    website: Optional[str] = None

    def form(self) -> dict[str, str]:
        data = {
            "client_name": self.client_name,
            "redirect_uris": self.redirect_uris,
            "scopes": self.scopes.value,
        }
        if self.website:
            data["website"] = self.website
        return data


class RegisteredApp(BaseModel):
    """Registered stage of the flow, persistable across the browser round trip."""

    model_config = ConfigDict(frozen=True)

    base: str
    client_id: str
    client_secret: str
    redirect: str
    scopes: Scopes = Scopes.READ


class AppCredentials(BaseModel):
    """``POST /api/v1/apps`` response"""
    client_id: str
    client_secret: str


class AccessToken(BaseModel):
    """``POST /oauth/token`` response"""
    access_token: str
    token_type: Optional[str] = None
    scope: Optional[str] = None
    created_at: Optional[int] = None
