"""
Session record — the credentials for one authorized app+user on one instance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator


class SessionRecord(BaseModel):
    """Immutable. Save it after registration to skip the OAuth flow on later runs."""

    model_config = ConfigDict(frozen=True)

    base: str
    client_id: str
    client_secret: str
    redirect: str
    token: str = ""

    @field_validator("base")
    @classmethod
    def _strip_base(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def authenticated(self) -> bool:
        return bool(self.token)

    def with_token(self, token: str) -> SessionRecord:
        return self.model_copy(update={"token": token})

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, path: Union[str, Path]) -> SessionRecord:
        return cls.model_validate_json(Path(path).read_text())
