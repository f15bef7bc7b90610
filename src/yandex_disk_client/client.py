"""Main YandexDiskClient class for interacting with the Yandex Disk REST API."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx

from yandex_disk_client._internal import endpoints
from yandex_disk_client._internal.dispatch import build_request, parse_response
from yandex_disk_client._internal.endpoints import ApiCall
from yandex_disk_client.config import (
    BASE_URL,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_USER_AGENT,
    ClientConfig,
    Transport,
)
from yandex_disk_client.exceptions import ConfigurationError
from yandex_disk_client.models import (
    Disk,
    FilesResourceList,
    OperationStatus,
    PublicResourcesList,
    SuccessResponse,
    TrashResourceList,
)

T = TypeVar("T")


class YandexDiskClient:
    """Synchronous client for the Yandex Disk REST API.

    Every method performs exactly one HTTP request and returns the decoded
    result. The client keeps no per-call state and can be shared between
    threads.

    Example (context manager - recommended):
        with YandexDiskClient("oauth-token", timeout=10) as client:
            disk = client.get_disk_info()
            link = client.upload("disk:/Documents/report.pdf")

    Example (manual lifetime):
        client = YandexDiskClient("oauth-token", timeout=10)
        client.mkdir("disk:/Backups")
        client.close()
    """

    def __init__(
        self,
        token: str,
        timeout: float | None,
        *,
        base_url: str = BASE_URL,
        follow_redirects: bool = True,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        transport: Transport | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize the client.

        Args:
            token: OAuth token for the account
            timeout: Request timeout in seconds, must be positive
            base_url: API endpoint (defaults to the public Yandex Disk API)
            follow_redirects: Whether the transport follows redirects
            max_redirects: Maximum number of redirects to follow
            transport: Optional httpx transport, mainly for tests
            user_agent: User-Agent header value

        Raises:
            ConfigurationError: If any setting is invalid
        """
        self._config = ClientConfig(
            token=token,
            timeout=timeout,
            base_url=base_url,
            follow_redirects=follow_redirects,
            max_redirects=max_redirects,
            transport=transport,
            user_agent=user_agent,
        )
        if transport is not None and not isinstance(transport, httpx.BaseTransport):
            raise ConfigurationError("YandexDiskClient needs a synchronous httpx transport")

        self._http = httpx.Client(
            timeout=self._config.timeout,
            follow_redirects=follow_redirects,
            max_redirects=max_redirects,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> YandexDiskClient:
        """Create a client from an existing configuration."""
        return cls(
            config.token,
            config.timeout,
            base_url=config.base_url,
            follow_redirects=config.follow_redirects,
            max_redirects=config.max_redirects,
            transport=config.transport,
            user_agent=config.user_agent,
        )

    def __enter__(self) -> YandexDiskClient:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit context manager."""
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _send(self, call: ApiCall[T], timeout: float | None) -> T:
        """Send one call and decode its response.

        Transport errors (httpx.TransportError and subclasses such as
        httpx.TimeoutException) propagate unchanged.
        """
        request = build_request(self._http, self._config, call, timeout)
        response = self._http.send(request)
        try:
            return parse_response(response, call)
        finally:
            response.close()

    def get_disk_info(self, *, timeout: float | None = None) -> Disk:
        """Get account level disk information (space, system folders, owner)."""
        return self._send(endpoints.get_disk_info(), timeout)

    def get_files(self, limit: int, *, timeout: float | None = None) -> FilesResourceList:
        """List files on the disk, newest first.

        Args:
            limit: Maximum number of files to return
            timeout: Per-call timeout in seconds
        """
        return self._send(endpoints.get_files(limit), timeout)

    def delete(
        self, path: str, permanently: bool = False, *, timeout: float | None = None
    ) -> SuccessResponse:
        """Delete a file or folder.

        Args:
            path: Resource path, e.g. "disk:/Documents/old.txt"
            permanently: Skip the trash and delete right away
            timeout: Per-call timeout in seconds

        Returns:
            SuccessResponse, with an operation link when deletion runs asynchronously

        Raises:
            ValidationError: If path is empty
            ApiError: If the API rejects the request
        """
        return self._send(endpoints.delete(path, permanently), timeout)

    def download(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Get a download link for a file; the href is used to fetch the content."""
        return self._send(endpoints.download(path), timeout)

    def upload(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Get an upload link for a file; the content is then PUT to the href."""
        return self._send(endpoints.upload(path), timeout)

    def upload_by_url(
        self, path: str, url: str, *, timeout: float | None = None
    ) -> SuccessResponse:
        """Ask the disk to download a file from the internet into path.

        Args:
            path: Destination resource path
            url: Source URL of the file
            timeout: Per-call timeout in seconds

        Raises:
            ValidationError: If path or url is empty
        """
        return self._send(endpoints.upload_by_url(path, url), timeout)

    def publish(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Publish a resource, making it reachable by a public link."""
        return self._send(endpoints.publish(path), timeout)

    def unpublish(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Revoke public access to a resource."""
        return self._send(endpoints.unpublish(path), timeout)

    def get_public_files(
        self, limit: int, *, timeout: float | None = None
    ) -> PublicResourcesList:
        """List published resources."""
        return self._send(endpoints.get_public_files(limit), timeout)

    def move(self, from_path: str, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Move a resource from from_path to path."""
        return self._send(endpoints.move(from_path, path), timeout)

    def copy(self, from_path: str, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Copy a resource from from_path to path."""
        return self._send(endpoints.copy(from_path, path), timeout)

    def mkdir(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Create a folder. Parent folders must already exist."""
        return self._send(endpoints.mkdir(path), timeout)

    def get_trash(
        self, path: str, limit: int, *, timeout: float | None = None
    ) -> TrashResourceList:
        """List the contents of a trash folder.

        Args:
            path: Trash path, "trash:/" for the trash root
            limit: Maximum number of items to return
            timeout: Per-call timeout in seconds
        """
        return self._send(endpoints.get_trash(path, limit), timeout)

    def clear_trash(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Remove items from the trash; "trash:/" empties the whole trash."""
        return self._send(endpoints.clear_trash(path), timeout)

    def restore_trash(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        """Restore a trashed item.

        Only the full path of an item in the trash works; the trash root
        itself can't be restored.
        """
        return self._send(endpoints.restore_trash(path), timeout)

    def get_operation_status(
        self, operation_id: str, *, timeout: float | None = None
    ) -> OperationStatus:
        """Get the status of an asynchronous operation.

        The id comes from SuccessResponse.operation_id.
        """
        return self._send(endpoints.get_operation_status(operation_id), timeout)

    def close(self) -> None:
        """Close the client and release its connections."""
        self._http.close()
