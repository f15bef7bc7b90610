"""Asynchronous client for the Yandex Disk REST API.

Mirrors YandexDiskClient method for method; every operation is a coroutine.
Cancelling the awaiting task cancels the request.
"""

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


class AsyncYandexDiskClient:
    """Asynchronous client for the Yandex Disk REST API.

    Example:
        async with AsyncYandexDiskClient("oauth-token", timeout=10) as client:
            files = await client.get_files(limit=50)
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
        """Initialize the client. Arguments match YandexDiskClient.

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
        if transport is not None and not isinstance(transport, httpx.AsyncBaseTransport):
            raise ConfigurationError("AsyncYandexDiskClient needs an asynchronous httpx transport")

        self._http = httpx.AsyncClient(
            timeout=self._config.timeout,
            follow_redirects=follow_redirects,
            max_redirects=max_redirects,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> AsyncYandexDiskClient:
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

    async def __aenter__(self) -> AsyncYandexDiskClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def _send(self, call: ApiCall[T], timeout: float | None) -> T:
        request = build_request(self._http, self._config, call, timeout)
        response = await self._http.send(request)
        try:
            return parse_response(response, call)
        finally:
            await response.aclose()

    async def get_disk_info(self, *, timeout: float | None = None) -> Disk:
        return await self._send(endpoints.get_disk_info(), timeout)

    async def get_files(self, limit: int, *, timeout: float | None = None) -> FilesResourceList:
        return await self._send(endpoints.get_files(limit), timeout)

    async def delete(
        self, path: str, permanently: bool = False, *, timeout: float | None = None
    ) -> SuccessResponse:
        return await self._send(endpoints.delete(path, permanently), timeout)

    async def download(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        return await self._send(endpoints.download(path), timeout)

    async def upload(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        return await self._send(endpoints.upload(path), timeout)

    async def upload_by_url(
        self, path: str, url: str, *, timeout: float | None = None
    ) -> SuccessResponse:
        return await self._send(endpoints.upload_by_url(path, url), timeout)

    async def publish(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        return await self._send(endpoints.publish(path), timeout)

    async def unpublish(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        return await self._send(endpoints.unpublish(path), timeout)

    async def get_public_files(
        self, limit: int, *, timeout: float | None = None
    ) -> PublicResourcesList:
        return await self._send(endpoints.get_public_files(limit), timeout)

    async def move(
        self, from_path: str, path: str, *, timeout: float | None = None
    ) -> SuccessResponse:
        return await self._send(endpoints.move(from_path, path), timeout)

    async def copy(
        self, from_path: str, path: str, *, timeout: float | None = None
    ) -> SuccessResponse:
        return await self._send(endpoints.copy(from_path, path), timeout)

    async def mkdir(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        return await self._send(endpoints.mkdir(path), timeout)

    async def get_trash(
        self, path: str, limit: int, *, timeout: float | None = None
    ) -> TrashResourceList:
        return await self._send(endpoints.get_trash(path, limit), timeout)

    async def clear_trash(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        return await self._send(endpoints.clear_trash(path), timeout)

    async def restore_trash(self, path: str, *, timeout: float | None = None) -> SuccessResponse:
        return await self._send(endpoints.restore_trash(path), timeout)

    async def get_operation_status(
        self, operation_id: str, *, timeout: float | None = None
    ) -> OperationStatus:
        return await self._send(endpoints.get_operation_status(operation_id), timeout)

    async def aclose(self) -> None:
        """Close the client and release its connections."""
        await self._http.aclose()
