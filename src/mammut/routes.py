"""
Route descriptors — one entry per Mastodon API operation.

Each route is plain data interpreted by ``Dispatcher.dispatch``. Paths are
relative to ``/api/v1/`` and may contain named placeholders such as ``{id}``.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from pathlib import Path
from typing import Any, Mapping, Optional
from urllib.parse import quote

from pydantic import TypeAdapter

from mammut.models.entities import (
    Account,
    Attachment,
    Card,
    Context,
    Emoji,
    Empty,
    Instance,
    Notification,
    Relationship,
    Report,
    SearchResult,
    Status,
)


class BodyKind(str, Enum):
    NONE = "none"
    JSON = "json"
    MULTIPART = "multipart"


class ResponseKind(str, Enum):
    SINGLE = "single"
    COLLECTION = "collection"
    PAGINATED = "paginated"


@dataclass(frozen=True)
class BoundRequest:
    method: str
    path: str
    params: Optional[dict[str, Any]] = None
    json: Optional[dict[str, Any]] = None
    data: Optional[dict[str, Any]] = None
    files: Optional[dict[str, Any]] = None


@dataclass(frozen=True)
class Route:
    name: str
    method: str
    path: str
    response: Any
    kind: ResponseKind = ResponseKind.SINGLE
    body: BodyKind = BodyKind.NONE
    fields: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    # argument name -> query-string key
    query: Mapping[str, str] = field(default_factory=dict)
    requires_auth: bool = True
    check_status: Optional[bool] = None

    @property
    def placeholders(self) -> tuple[str, ...]:
        return tuple(name for _, name, _, _ in string.Formatter().parse(self.path) if name)

    @property
    def classifies_status(self) -> bool:
        """Routes that send a body reject 4xx/5xx before looking at the response body."""
        if self.check_status is not None:
            return self.check_status
        return self.body is not BodyKind.NONE

    @cached_property
    def adapter(self) -> TypeAdapter[Any]:
        if self.kind is ResponseKind.SINGLE:
            return TypeAdapter(self.response)
        return TypeAdapter(list[self.response])

    def bind(self, arguments: Mapping[str, Any]) -> BoundRequest:
        """Split call arguments into path, query and body. Raises TypeError on bad arguments."""
        placeholders = self.placeholders
        accepted = set(placeholders) | set(self.query) | set(self.fields) | set(self.files)
        unexpected = sorted(set(arguments) - accepted)
        if unexpected:
            raise TypeError(f"{self.name}() got an unexpected keyword argument {unexpected[0]!r}")
        missing = [p for p in placeholders if arguments.get(p) is None]
        if missing:
            raise TypeError(f"{self.name}() missing required argument {missing[0]!r}")

        path = self.path.format(**{p: quote(str(arguments[p]), safe="") for p in placeholders})

        params: dict[str, Any] = {}
        for arg, key in self.query.items():
            value = arguments.get(arg)
            if value is None or value is False:
                continue
            if value is True:
                value = "1"
            elif isinstance(value, (list, tuple)):
                value = [str(v) for v in value]
            params[key] = value

        if self.body is BodyKind.JSON:
            body = {k: arguments[k] for k in self.fields if arguments.get(k) is not None}
            return BoundRequest(self.method, path, params or None, json=body)
        if self.body is BodyKind.MULTIPART:
            # text fields go in as filename-less parts so the body is multipart even without files
            files: dict[str, Any] = {
                k: (None, str(arguments[k])) for k in self.fields if arguments.get(k) is not None
            }
            for k in self.files:
                if arguments.get(k) is not None:
                    file_path = Path(arguments[k])
                    files[k] = (file_path.name, file_path.read_bytes())
            return BoundRequest(self.method, path, params or None, files=files or None)
        return BoundRequest(self.method, path, params or None)


def _q(*names: str) -> dict[str, str]:
    return {name: name for name in names}


PAGE_QUERY = _q("max_id", "since_id", "min_id", "limit")

_ROUTES = [
    # Timelines
    Route("get_home_timeline", "GET", "timelines/home", Status, ResponseKind.PAGINATED, query=PAGE_QUERY),
    Route("get_public_timeline", "GET", "timelines/public", Status, ResponseKind.PAGINATED,
          query={**PAGE_QUERY, **_q("local", "only_media")}, requires_auth=False),
    Route("get_tagged_timeline", "GET", "timelines/tag/{hashtag}", Status, ResponseKind.PAGINATED,
          query={**PAGE_QUERY, **_q("local", "only_media")}, requires_auth=False),

    # Accounts
    Route("verify_credentials", "GET", "accounts/verify_credentials", Account),
    Route("update_credentials", "PATCH", "accounts/update_credentials", Account,
          body=BodyKind.MULTIPART, fields=("display_name", "note"), files=("avatar", "header")),
    Route("get_account", "GET", "accounts/{id}", Account),
    Route("statuses", "GET", "accounts/{id}/statuses", Status, ResponseKind.PAGINATED,
          query={**PAGE_QUERY, **_q("only_media", "exclude_replies", "pinned")}),
    Route("followers", "GET", "accounts/{id}/followers", Account, ResponseKind.PAGINATED, query=PAGE_QUERY),
    Route("following", "GET", "accounts/{id}/following", Account, ResponseKind.PAGINATED, query=PAGE_QUERY),
    Route("follow", "POST", "accounts/{id}/follow", Relationship),
    Route("unfollow", "POST", "accounts/{id}/unfollow", Relationship),
    Route("block", "POST", "accounts/{id}/block", Relationship),
    Route("unblock", "POST", "accounts/{id}/unblock", Relationship),
    Route("mute", "POST", "accounts/{id}/mute", Relationship),
    Route("unmute", "POST", "accounts/{id}/unmute", Relationship),
    Route("relationships", "GET", "accounts/relationships", Relationship, ResponseKind.COLLECTION,
          query={"ids": "id[]"}),
    Route("search_accounts", "GET", "accounts/search", Account, ResponseKind.COLLECTION,
          query=_q("q", "limit", "resolve", "following")),
    Route("follows", "POST", "follows", Account, body=BodyKind.JSON, fields=("uri",)),

    # Blocks, mutes, follow requests
    Route("blocks", "GET", "blocks", Account, ResponseKind.PAGINATED, query=PAGE_QUERY),
    Route("mutes", "GET", "mutes", Account, ResponseKind.PAGINATED, query=PAGE_QUERY),
    Route("domain_blocks", "GET", "domain_blocks", str, ResponseKind.COLLECTION, query=PAGE_QUERY),
    Route("block_domain", "POST", "domain_blocks", Empty, body=BodyKind.JSON, fields=("domain",)),
    Route("unblock_domain", "DELETE", "domain_blocks", Empty, body=BodyKind.JSON, fields=("domain",)),
    Route("follow_requests", "GET", "follow_requests", Account, ResponseKind.PAGINATED, query=PAGE_QUERY),
    Route("authorize_follow_request", "POST", "follow_requests/{id}/authorize", Relationship),
    Route("reject_follow_request", "POST", "follow_requests/{id}/reject", Relationship),

    # Favourites
    Route("favourites", "GET", "favourites", Status, ResponseKind.PAGINATED, query=PAGE_QUERY),

    # Notifications
    Route("notifications", "GET", "notifications", Notification, ResponseKind.PAGINATED,
          query={**PAGE_QUERY, "exclude_types": "exclude_types[]"}),
    Route("get_notification", "GET", "notifications/{id}", Notification),
    Route("clear_notifications", "POST", "notifications/clear", Empty),

    # Reports
    Route("reports", "GET", "reports", Report, ResponseKind.COLLECTION),
    Route("report", "POST", "reports", Report, body=BodyKind.JSON,
          fields=("account_id", "status_ids", "comment")),

    # Search
    Route("search", "GET", "search", SearchResult, query=_q("q", "resolve")),

    # Instance
    Route("instance", "GET", "instance", Instance, requires_auth=False),
    Route("get_emojis", "GET", "custom_emojis", Emoji, ResponseKind.COLLECTION, requires_auth=False),

    # Media
    Route("media", "POST", "media", Attachment, body=BodyKind.MULTIPART,
          fields=("description", "focus"), files=("file",)),

    # Statuses
    Route("new_status", "POST", "statuses", Status, body=BodyKind.JSON,
          fields=("status", "in_reply_to_id", "media_ids", "sensitive", "spoiler_text", "visibility"),
          check_status=False),
    Route("get_status", "GET", "statuses/{id}", Status),
    Route("delete_status", "DELETE", "statuses/{id}", Status),
    Route("get_context", "GET", "statuses/{id}/context", Context),
    Route("get_card", "GET", "statuses/{id}/card", Card),
    Route("reblogged_by", "GET", "statuses/{id}/reblogged_by", Account, ResponseKind.PAGINATED, query=PAGE_QUERY),
    Route("favourited_by", "GET", "statuses/{id}/favourited_by", Account, ResponseKind.PAGINATED, query=PAGE_QUERY),
    Route("reblog", "POST", "statuses/{id}/reblog", Status),
    Route("unreblog", "POST", "statuses/{id}/unreblog", Status),
    Route("favourite", "POST", "statuses/{id}/favourite", Status),
    Route("unfavourite", "POST", "statuses/{id}/unfavourite", Status),
]

ROUTES: dict[str, Route] = {route.name: route for route in _ROUTES}
