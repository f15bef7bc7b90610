"""Data models for the yandex_disk_client library.

Every model is a frozen dataclass decoded from an API response with its
``from_dict`` classmethod. Nested collections are tuples and nested objects are
read-only mappings, so nothing returned by the client can be mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _as_mapping(value: Any, name: str) -> Mapping[str, Any]:
    """Return value as a mapping, rejecting anything that isn't a JSON object."""
    if value is None:
        return _EMPTY
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a JSON object, got {type(value).__name__}")
    return value


def _empty() -> Mapping[str, Any]:
    return _EMPTY


def _frozen(value: Any, name: str) -> Mapping[str, Any]:
    return MappingProxyType(dict(_as_mapping(value, name)))


def _str(value: Any, name: str) -> str | None:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _int(value: Any, name: str) -> int | None:
    # bool is a subclass of int
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def _bool(value: Any, name: str) -> bool | None:
    if value is not None and not isinstance(value, bool):
        raise TypeError(f"{name} must be a boolean, got {type(value).__name__}")
    return value


def _parse_datetime(value: Any, name: str) -> datetime | None:
    value = _str(value, name)
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _items(value: Any, name: str) -> list[Mapping[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{name} must be a JSON array, got {type(value).__name__}")
    return [_as_mapping(item, name) for item in value]


@dataclass(frozen=True)
class User:
    """Owner of the disk."""

    uid: str | None = None
    login: str | None = None
    display_name: str | None = None
    country: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        data = _as_mapping(data, "user")
        return cls(
            uid=_str(data.get("uid"), "uid"),
            login=_str(data.get("login"), "login"),
            display_name=_str(data.get("display_name"), "display_name"),
            country=_str(data.get("country"), "country"),
        )


@dataclass(frozen=True)
class Disk:
    """Account level storage information."""

    total_space: int | None = None
    used_space: int | None = None
    trash_size: int | None = None
    max_file_size: int | None = None
    is_paid: bool | None = None
    unlimited_autoupload_enabled: bool | None = None
    revision: int | None = None
    system_folders: Mapping[str, str] = field(default_factory=_empty)
    user: User | None = None

    @property
    def free_space(self) -> int | None:
        """Space left on the disk, if both totals are known."""
        if self.total_space is None or self.used_space is None:
            return None
        return self.total_space - self.used_space

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Disk:
        data = _as_mapping(data, "disk")
        user = data.get("user")
        return cls(
            total_space=_int(data.get("total_space"), "total_space"),
            used_space=_int(data.get("used_space"), "used_space"),
            trash_size=_int(data.get("trash_size"), "trash_size"),
            max_file_size=_int(data.get("max_file_size"), "max_file_size"),
            is_paid=_bool(data.get("is_paid"), "is_paid"),
            unlimited_autoupload_enabled=_bool(
                data.get("unlimited_autoupload_enabled"), "unlimited_autoupload_enabled"
            ),
            revision=_int(data.get("revision"), "revision"),
            system_folders=_frozen(data.get("system_folders"), "system_folders"),
            user=User.from_dict(user) if user is not None else None,
        )


@dataclass(frozen=True)
class Resource:
    """A file or folder on the disk."""

    name: str | None = None
    path: str | None = None
    type: str | None = None
    size: int | None = None
    created: datetime | None = None
    modified: datetime | None = None
    mime_type: str | None = None
    media_type: str | None = None
    md5: str | None = None
    sha256: str | None = None
    resource_id: str | None = None
    public_key: str | None = None
    public_url: str | None = None
    preview: str | None = None
    file: str | None = None
    custom_properties: Mapping[str, Any] = field(default_factory=_empty)

    @property
    def is_dir(self) -> bool:
        return self.type == "dir"

    @property
    def is_file(self) -> bool:
        return self.type == "file"

    @classmethod
    def _fields_from_dict(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "name": _str(data.get("name"), "name"),
            "path": _str(data.get("path"), "path"),
            "type": _str(data.get("type"), "type"),
            "size": _int(data.get("size"), "size"),
            "created": _parse_datetime(data.get("created"), "created"),
            "modified": _parse_datetime(data.get("modified"), "modified"),
            "mime_type": _str(data.get("mime_type"), "mime_type"),
            "media_type": _str(data.get("media_type"), "media_type"),
            "md5": _str(data.get("md5"), "md5"),
            "sha256": _str(data.get("sha256"), "sha256"),
            "resource_id": _str(data.get("resource_id"), "resource_id"),
            "public_key": _str(data.get("public_key"), "public_key"),
            "public_url": _str(data.get("public_url"), "public_url"),
            "preview": _str(data.get("preview"), "preview"),
            "file": _str(data.get("file"), "file"),
            "custom_properties": _frozen(data.get("custom_properties"), "custom_properties"),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Resource:
        return cls(**cls._fields_from_dict(_as_mapping(data, "resource")))


@dataclass(frozen=True)
class TrashResource(Resource):
    """A resource in the trash, remembering where it was deleted from."""

    origin_path: str | None = None
    deleted: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TrashResource:
        data = _as_mapping(data, "trash resource")
        return cls(
            **cls._fields_from_dict(data),
            origin_path=_str(data.get("origin_path"), "origin_path"),
            deleted=_parse_datetime(data.get("deleted"), "deleted"),
        )


@dataclass(frozen=True)
class FilesResourceList:
    """Flat list of files on the disk."""

    items: tuple[Resource, ...] = ()
    limit: int | None = None
    offset: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FilesResourceList:
        data = _as_mapping(data, "files resource list")
        return cls(
            items=tuple(Resource.from_dict(item) for item in _items(data.get("items"), "items")),
            limit=_int(data.get("limit"), "limit"),
            offset=_int(data.get("offset"), "offset"),
        )


@dataclass(frozen=True)
class PublicResourcesList:
    """List of published resources."""

    items: tuple[Resource, ...] = ()
    type: str | None = None
    limit: int | None = None
    offset: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PublicResourcesList:
        data = _as_mapping(data, "public resources list")
        return cls(
            items=tuple(Resource.from_dict(item) for item in _items(data.get("items"), "items")),
            type=_str(data.get("type"), "type") or None,
            limit=_int(data.get("limit"), "limit"),
            offset=_int(data.get("offset"), "offset"),
        )


@dataclass(frozen=True)
class TrashResourceList:
    """A trash folder together with its embedded items."""

    name: str | None = None
    path: str | None = None
    type: str | None = None
    items: tuple[TrashResource, ...] = ()
    limit: int | None = None
    offset: int | None = None
    total: int | None = None
    sort: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TrashResourceList:
        data = _as_mapping(data, "trash resource list")
        embedded = _as_mapping(data.get("_embedded"), "_embedded")
        return cls(
            name=_str(data.get("name"), "name"),
            path=_str(data.get("path"), "path"),
            type=_str(data.get("type"), "type"),
            items=tuple(
                TrashResource.from_dict(item) for item in _items(embedded.get("items"), "items")
            ),
            limit=_int(embedded.get("limit"), "limit"),
            offset=_int(embedded.get("offset"), "offset"),
            total=_int(embedded.get("total"), "total"),
            sort=_str(embedded.get("sort"), "sort") or None,
        )


@dataclass(frozen=True)
class SuccessResponse:
    """Acknowledgement of an operation.

    Operations that finish later return a link to the operation status,
    upload and download requests return the link to transfer data with.
    Synchronous operations answered with an empty body have every field unset.
    """

    href: str | None = None
    method: str | None = None
    templated: bool | None = None

    @property
    def operation_id(self) -> str | None:
        """Identifier of the asynchronous operation the href points to, if any."""
        if not self.href:
            return None
        marker = "/operations/"
        _, sep, tail = self.href.partition(marker)
        if not sep:
            return None
        operation_id = tail.split("?", 1)[0].strip("/")
        return operation_id or None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SuccessResponse:
        data = _as_mapping(data, "success response")
        return cls(
            href=_str(data.get("href"), "href"),
            method=_str(data.get("method"), "method"),
            templated=_bool(data.get("templated"), "templated"),
        )


@dataclass(frozen=True)
class OperationStatus:
    """Status of an asynchronous operation."""

    status: str | None = None

    @property
    def is_finished(self) -> bool:
        return self.status in ("success", "failed")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OperationStatus:
        data = _as_mapping(data, "operation status")
        return cls(status=_str(data.get("status"), "status"))


@dataclass(frozen=True)
class ErrorResponse:
    """Error body returned by the API for unsuccessful requests."""

    error: str | None = None
    message: str | None = None
    description: str | None = None

    def info(self) -> str:
        """Combined, human readable description of the error."""
        parts = [part for part in (self.error, self.message) if part]
        text = ": ".join(parts) or "error"
        if self.description and self.description != self.message:
            text = f"{text} ({self.description})"
        return text

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ErrorResponse:
        data = _as_mapping(data, "error response")
        return cls(
            error=_str(data.get("error"), "error"),
            message=_str(data.get("message"), "message"),
            description=_str(data.get("description"), "description"),
        )
