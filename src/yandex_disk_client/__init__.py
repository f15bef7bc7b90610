"""Yandex Disk Client - A Python client for the Yandex Disk REST API.

Example usage:
    from yandex_disk_client import YandexDiskClient

    # Using context manager (recommended)
    with YandexDiskClient("oauth-token", timeout=10) as client:
        disk = client.get_disk_info()
        print(f"{disk.used_space} of {disk.total_space} bytes used")
        client.mkdir("disk:/Backups")

    # Async usage
    async with AsyncYandexDiskClient("oauth-token", timeout=10) as client:
        files = await client.get_files(limit=20)
"""

from yandex_disk_client.async_client import AsyncYandexDiskClient
from yandex_disk_client.client import YandexDiskClient
from yandex_disk_client.config import BASE_URL, TRASH_ROOT, ClientConfig
from yandex_disk_client.exceptions import (
    ApiError,
    ConfigurationError,
    DecodeError,
    UnknownApiError,
    ValidationError,
    YandexDiskError,
)
from yandex_disk_client.models import (
    Disk,
    ErrorResponse,
    FilesResourceList,
    OperationStatus,
    PublicResourcesList,
    Resource,
    SuccessResponse,
    TrashResource,
    TrashResourceList,
    User,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "YandexDiskClient",
    "AsyncYandexDiskClient",
    "ClientConfig",
    "BASE_URL",
    "TRASH_ROOT",
    # Models
    "Disk",
    "User",
    "Resource",
    "TrashResource",
    "FilesResourceList",
    "PublicResourcesList",
    "TrashResourceList",
    "SuccessResponse",
    "OperationStatus",
    "ErrorResponse",
    # Exceptions
    "YandexDiskError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "UnknownApiError",
    "DecodeError",
]
