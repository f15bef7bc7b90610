"""Shared request/response handling used by both clients."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx

from yandex_disk_client._internal.endpoints import ApiCall, QueryValue
from yandex_disk_client.config import ClientConfig
from yandex_disk_client.exceptions import (
    ApiError,
    DecodeError,
    UnknownApiError,
    ValidationError,
)
from yandex_disk_client.models import ErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

BODY_EXCERPT_LENGTH = 200


def request_headers(config: ClientConfig) -> dict[str, str]:
    """Headers attached to every request."""
    return {
        "Accept": "application/json",
        "Authorization": f"OAuth {config.token}",
        "User-Agent": config.user_agent,
    }


def encode_params(params: Mapping[str, QueryValue]) -> dict[str, str]:
    """Serialize query values: booleans as true/false, integers in decimal."""
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


def build_request(
    http: httpx.Client | httpx.AsyncClient,
    config: ClientConfig,
    call: ApiCall[T],
    timeout: float | None = None,
) -> httpx.Request:
    """Build the httpx request for a call.

    Args:
        http: Client the request will be sent with
        config: Client configuration (base URL, token)
        call: Operation to build the request for
        timeout: Per-call timeout in seconds, overrides the configured one

    Raises:
        ValidationError: If timeout is given and not positive
    """
    if timeout is not None and timeout <= 0:
        raise ValidationError("timeout must be positive", fields=["timeout"])

    return http.build_request(
        call.method,
        f"{config.endpoint}{call.path}",
        params=encode_params(call.params),
        headers=request_headers(config),
        timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
    )


def _excerpt(response: httpx.Response) -> str:
    return response.text[:BODY_EXCERPT_LENGTH]


def error_from_response(response: httpx.Response) -> ApiError | UnknownApiError:
    """Turn an unsuccessful response into the matching exception."""
    try:
        error = ErrorResponse.from_dict(response.json())
    except (ValueError, TypeError):
        return UnknownApiError(response.status_code)
    return ApiError(response.status_code, error)


def parse_response(response: httpx.Response, call: ApiCall[T]) -> T:
    """Decode a fully read response into the call's result type.

    Status codes from 200 up to (not including) 400 are successful. An empty
    successful body decodes like an empty JSON object.

    Raises:
        ApiError: Error status with a structured error body
        UnknownApiError: Error status with any other body
        DecodeError: Successful status with a body that doesn't fit the result
    """
    status = response.status_code
    logger.debug(f"{call.method} {call.path or '/'} -> {status}")

    if status < 200 or status >= 400:
        raise error_from_response(response)

    if not response.content.strip():
        data: Any = {}
    else:
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError("malformed JSON body", status, _excerpt(response)) from e

    try:
        return call.decode(data)
    except (TypeError, ValueError, AttributeError) as e:
        raise DecodeError(f"unexpected response body: {e}", status, _excerpt(response)) from e
