"""Exception hierarchy for the yandex_disk_client library."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yandex_disk_client.models import ErrorResponse


class YandexDiskError(Exception):
    """Base exception for all yandex_disk_client errors."""

    pass


class ConfigurationError(YandexDiskError):
    """Raised when the client is constructed with invalid settings."""

    pass


class ValidationError(YandexDiskError, ValueError):
    """Raised when a required operation argument is missing.

    No request is sent when this is raised.
    """

    def __init__(self, message: str, fields: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.fields = tuple(fields)


class ApiError(YandexDiskError):
    """Raised when the API answers with an error status and a readable error body."""

    def __init__(self, status_code: int, response: ErrorResponse) -> None:
        super().__init__(f"{response.info()}, status code: {status_code}")
        self.status_code = status_code
        self.response = response


class UnknownApiError(YandexDiskError):
    """Raised when the API answers with an error status and an unreadable body."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"unknown error, status code: {status_code}")
        self.status_code = status_code


class DecodeError(YandexDiskError):
    """Raised when a successful response body can't be decoded into the result type."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(f"{message}, status code: {status_code}")
        self.status_code = status_code
        self.body = body
