"""
Mammut error types.

Every failure is raised to the caller exactly once; nothing here is retried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import httpx

if TYPE_CHECKING:
    from pydantic import ValidationError

    from mammut.models.error import ApiErrorPayload


class MammutError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class NetworkError(MammutError):
    """DNS, TLS, connection or timeout failure below the HTTP layer."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__("network_error", message)
        self.cause = cause


class HttpStatusError(MammutError):
    def __init__(self, code: str, status: int):
        reason = httpx.codes.get_reason_phrase(status) or "Unknown Status code"
        super().__init__(code, f"HTTP {status}: {reason}", {"status": status})
        self.status = status


class ClientError(HttpStatusError):
    def __init__(self, status: int):
        super().__init__("client_error", status)


class ServerError(HttpStatusError):
    def __init__(self, status: int):
        super().__init__("server_error", status)


class ApiError(MammutError):
    """The instance answered with ``{"error": ..., "error_description": ...}``."""

    def __init__(self, payload: ApiErrorPayload):
        super().__init__("api_error", payload.error_description or payload.error, payload.model_dump())
        self.payload = payload

    @property
    def error(self) -> str:
        return self.payload.error

    @property
    def error_description(self) -> Optional[str]:
        return self.payload.error_description


class DecodeError(MammutError):
    """Body matched neither the expected type nor the error payload.

    ``cause`` is the failure from decoding the expected type, which usually
    points at the field the server changed.
    """

    def __init__(self, cause: ValidationError, body: bytes = b""):
        super().__init__("decode_error", f"Could not decode response: {cause}")
        self.cause = cause
        self.body = body


class ProtocolError(MammutError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("protocol_error", message, details)


class CredentialRequired(MammutError):
    def __init__(self, code: str, message: str):
        super().__init__(code, message)


class AccessTokenRequired(CredentialRequired):
    def __init__(self, message: str = "An access token is required. Complete the registration flow first."):
        super().__init__("access_token_required", message)


class ClientIdRequired(CredentialRequired):
    def __init__(self, message: str = "A client_id is required. Register the application first."):
        super().__init__("client_id_required", message)


class ClientSecretRequired(CredentialRequired):
    def __init__(self, message: str = "A client_secret is required. Register the application first."):
        super().__init__("client_secret_required", message)
