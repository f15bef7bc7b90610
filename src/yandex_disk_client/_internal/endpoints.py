"""Request descriptions for every Yandex Disk REST operation.

Each function validates its arguments and returns an ``ApiCall``; it never
touches the network. Both the sync and the async client send the same calls.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from yandex_disk_client.exceptions import ValidationError
from yandex_disk_client.models import (
    Disk,
    FilesResourceList,
    OperationStatus,
    PublicResourcesList,
    SuccessResponse,
    TrashResourceList,
)

T = TypeVar("T")

QueryValue = str | int | bool


@dataclass(frozen=True)
class ApiCall(Generic[T]):
    """A single request: verb, path below the base URL, query and result decoder."""

    method: str
    path: str
    decode: Callable[[Mapping[str, Any]], T]
    params: Mapping[str, QueryValue] = field(default_factory=dict)


def _require(message: str, **values: str) -> None:
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ValidationError(message, fields=missing)


def get_disk_info() -> ApiCall[Disk]:
    return ApiCall("GET", "", Disk.from_dict)


def get_files(limit: int) -> ApiCall[FilesResourceList]:
    return ApiCall("GET", "/resources/files", FilesResourceList.from_dict, {"limit": limit})


def delete(path: str, permanently: bool) -> ApiCall[SuccessResponse]:
    _require("path can't be empty", path=path)
    return ApiCall(
        "DELETE",
        "/resources",
        SuccessResponse.from_dict,
        {"path": path, "permanently": permanently},
    )


def download(path: str) -> ApiCall[SuccessResponse]:
    _require("path can't be empty", path=path)
    return ApiCall("GET", "/resources/download", SuccessResponse.from_dict, {"path": path})


def upload(path: str) -> ApiCall[SuccessResponse]:
    _require("path can't be empty", path=path)
    return ApiCall("GET", "/resources/upload", SuccessResponse.from_dict, {"path": path})


def upload_by_url(path: str, url: str) -> ApiCall[SuccessResponse]:
    _require("path or url can't be empty", path=path, url=url)
    return ApiCall(
        "POST",
        "/resources/upload",
        SuccessResponse.from_dict,
        {"url": url, "path": path},
    )


def publish(path: str) -> ApiCall[SuccessResponse]:
    _require("path can't be empty", path=path)
    return ApiCall("PUT", "/resources/publish", SuccessResponse.from_dict, {"path": path})


def unpublish(path: str) -> ApiCall[SuccessResponse]:
    _require("path can't be empty", path=path)
    return ApiCall("PUT", "/resources/unpublish", SuccessResponse.from_dict, {"path": path})


def get_public_files(limit: int) -> ApiCall[PublicResourcesList]:
    return ApiCall("GET", "/resources/public", PublicResourcesList.from_dict, {"limit": limit})


def move(from_path: str, path: str) -> ApiCall[SuccessResponse]:
    _require("paths can't be empty", from_path=from_path, path=path)
    return ApiCall(
        "POST",
        "/resources/move",
        SuccessResponse.from_dict,
        {"from": from_path, "path": path},
    )


def copy(from_path: str, path: str) -> ApiCall[SuccessResponse]:
    _require("paths can't be empty", from_path=from_path, path=path)
    return ApiCall(
        "POST",
        "/resources/copy",
        SuccessResponse.from_dict,
        {"from": from_path, "path": path},
    )


def mkdir(path: str) -> ApiCall[SuccessResponse]:
    _require("path can't be empty", path=path)
    return ApiCall("PUT", "/resources", SuccessResponse.from_dict, {"path": path})


def get_trash(path: str, limit: int) -> ApiCall[TrashResourceList]:
    _require("path can't be empty", path=path)
    return ApiCall(
        "GET",
        "/trash/resources",
        TrashResourceList.from_dict,
        {"limit": limit, "path": path},
    )


def clear_trash(path: str) -> ApiCall[SuccessResponse]:
    # The trash root ("trash:/") empties the whole trash.
    _require("path can't be empty", path=path)
    return ApiCall("DELETE", "/trash/resources", SuccessResponse.from_dict, {"path": path})


def restore_trash(path: str) -> ApiCall[SuccessResponse]:
    # Needs the full path of a trashed item, the trash root is rejected by the API.
    _require("path can't be empty", path=path)
    return ApiCall("PUT", "/trash/resources/restore", SuccessResponse.from_dict, {"path": path})


def get_operation_status(operation_id: str) -> ApiCall[OperationStatus]:
    _require("operation id can't be empty", operation_id=operation_id)
    return ApiCall("GET", f"/operations/{quote(operation_id, safe='')}", OperationStatus.from_dict)
