"""Shared test helpers for yandex_disk_client tests."""

from __future__ import annotations

from typing import Any

import httpx


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replies with a fixed response."""

    def __init__(
        self,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.json = json if json is not None else {}
        self.content = content
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


RESOURCE_JSON = {
    "name": "report.pdf",
    "path": "disk:/Documents/report.pdf",
    "type": "file",
    "size": 52411,
    "created": "2023-04-19T11:32:51+00:00",
    "modified": "2023-04-20T08:01:02+00:00",
    "mime_type": "application/pdf",
    "media_type": "document",
    "md5": "4d4bab3d2a3c3b5bd5e1aa6ef1b5b9f4",
    "resource_id": "123:abc",
    "file": "https://downloader.disk.yandex.ru/disk/abc",
}

DISK_JSON = {
    "total_space": 10737418240,
    "used_space": 1073741824,
    "trash_size": 4096,
    "max_file_size": 1073741824,
    "is_paid": False,
    "unlimited_autoupload_enabled": False,
    "revision": 1681900000000000,
    "system_folders": {
        "applications": "disk:/Applications",
        "downloads": "disk:/Downloads/",
    },
    "user": {
        "uid": "42",
        "login": "tester",
        "display_name": "Test User",
        "country": "ru",
    },
}

TRASH_JSON = {
    "name": "trash",
    "path": "trash:/",
    "type": "dir",
    "_embedded": {
        "items": [
            {
                **RESOURCE_JSON,
                "path": "trash:/report.pdf",
                "origin_path": "disk:/Documents/report.pdf",
                "deleted": "2023-05-01T10:00:00+00:00",
            }
        ],
        "limit": 20,
        "offset": 0,
        "total": 1,
        "sort": "",
        "path": "trash:/",
    },
}

ERROR_JSON = {
    "error": "DiskNotFoundError",
    "message": "Resource not found.",
    "description": "Resource not found.",
}
