"""
Response decoding — success payload or API error payload.

Both arrive as arbitrary JSON, and the status code alone does not tell them
apart. The expected type is tried first; the error payload only on failure.
"""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from mammut.errors import ApiError, ClientError, DecodeError, ServerError
from mammut.models.error import ApiErrorPayload

logger = logging.getLogger(__name__)

T = TypeVar("T")


def raise_for_status_class(resp: httpx.Response) -> None:
    """4xx -> ClientError, 5xx -> ServerError. The body is not inspected."""
    if resp.is_client_error:
        raise ClientError(resp.status_code)
    if resp.is_server_error:
        raise ServerError(resp.status_code)


def parse_error_payload(raw: bytes) -> ApiErrorPayload:
    """Raises ValidationError if ``raw`` is not an error payload."""
    return ApiErrorPayload.model_validate_json(raw)


def decode(raw: bytes, adapter: TypeAdapter[T], status: Optional[int] = None) -> T:
    """Decode ``raw`` as the adapter's type.

    Raises ApiError if it is an error payload instead. If it is neither, a
    4xx/5xx ``status`` raises ClientError/ServerError and anything else
    raises DecodeError carrying the first failure.
    """
    try:
        return adapter.validate_json(raw)
    except ValidationError as first:
        try:
            payload = parse_error_payload(raw)
        except ValidationError:
            logger.debug("Undecodable body: %r", raw[:200])
            if status is not None and 400 <= status < 500:
                raise ClientError(status) from first
            if status is not None and status >= 500:
                raise ServerError(status) from first
            raise DecodeError(first, raw) from first
        raise ApiError(payload) from None


def decode_response(resp: httpx.Response, adapter: TypeAdapter[Any]) -> Any:
    return decode(resp.content, adapter, resp.status_code)
