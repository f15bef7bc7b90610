"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from yandex_disk_client.exceptions import ConfigurationError

BASE_URL = "https://cloud-api.yandex.net/v1/disk"
TRASH_ROOT = "trash:/"

DEFAULT_MAX_REDIRECTS = 10
DEFAULT_USER_AGENT = "yandex-disk-client/0.1.0"

Transport = httpx.BaseTransport | httpx.AsyncBaseTransport


@dataclass(frozen=True)
class ClientConfig:
    """Settings a client is built from.

    Every client owns its own transport and redirect policy, so two clients
    never share them.

    Attributes:
        token: OAuth token sent with every request
        timeout: Request timeout in seconds, must be positive
        base_url: API endpoint all operation paths are appended to
        follow_redirects: Whether redirects are followed by the transport
        max_redirects: Upper bound on followed redirects
        transport: Optional httpx transport (e.g. httpx.MockTransport)
        user_agent: Value of the User-Agent header
    """

    token: str
    timeout: float | None
    base_url: str = BASE_URL
    follow_redirects: bool = True
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    transport: Transport | None = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if self.timeout is None or self.timeout <= 0:
            raise ConfigurationError("timeout must be a positive number of seconds")
        if not self.base_url:
            raise ConfigurationError("base_url can't be empty")
        if self.max_redirects < 0:
            raise ConfigurationError("max_redirects can't be negative")

    @property
    def endpoint(self) -> str:
        """Base URL without a trailing slash."""
        return self.base_url.rstrip("/")
