"""
Entities returned by the Mastodon API.

Only the identifying fields are declared; everything else the instance sends
is kept as extra attributes.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    model_config = ConfigDict(extra="allow")


class Empty(BaseModel):
    """``{}`` acknowledgement. Rejects any key so an error body never passes as one."""
    model_config = ConfigDict(extra="forbid")


class Account(Entity):
    id: str
    username: str
    acct: str
    display_name: str = ""
    url: Optional[str] = None


class Attachment(Entity):
    id: str
    type: str
    url: Optional[str] = None
    preview_url: Optional[str] = None
    description: Optional[str] = None


class Emoji(Entity):
    shortcode: str
    url: str
    static_url: Optional[str] = None


class Tag(Entity):
    name: str
    url: Optional[str] = None


class Status(Entity):
    id: str
    uri: str
    created_at: str
    account: Account
    content: str = ""
    visibility: Optional[str] = None
    in_reply_to_id: Optional[str] = None
    reblog: Optional[Status] = None
    media_attachments: list[Attachment] = []


class Context(Entity):
    ancestors: list[Status]
    descendants: list[Status]


class Card(Entity):
    url: str
    title: str = ""
    description: str = ""
    type: Optional[str] = None


class Instance(Entity):
    uri: str
    title: str = ""
    version: Optional[str] = None


class Notification(Entity):
    id: str
    type: str
    created_at: str
    account: Account
    status: Optional[Status] = None


class Relationship(Entity):
    id: str
    following: bool = False
    followed_by: bool = False
    blocking: bool = False
    muting: bool = False
    requested: bool = False


class Report(Entity):
    id: str
    action_taken: Any = None


class SearchResult(Entity):
    accounts: list[Account]
    statuses: list[Status]
    hashtags: list[Any]
