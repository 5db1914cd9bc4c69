"""Transport interface and the default httpx-backed implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Sequence

import httpx

from twcai.errors import RequestTimeoutError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """One HTTP answer. Header names are lower-case."""

    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    """Contract every transport must implement.

    ``send`` performs one HTTP exchange and returns whatever status the server
    answered with. Failures before a response are raised as TransportError.
    """

    @abstractmethod
    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes | None = None,
        params: Sequence[tuple[str, str]] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        ...

    async def close(self) -> None:
        pass


class HttpxTransport(Transport):
    """Pooled transport over ``httpx.AsyncClient``, created lazily."""

    def __init__(self, client: httpx.AsyncClient | None = None, connect_timeout: float = 10.0) -> None:
        self._client = client
        self._owns_client = client is None
        self.connect_timeout = connect_timeout

    def _get_client(self, timeout: float | None) -> httpx.AsyncClient:
        if self._client is not None and self._client.is_closed and self._owns_client:
            self._client = None
        if self._client is None:
            total = timeout or 120.0
            logger.debug("Opening HTTP connection pool (timeout=%.1fs)", total)
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(total, connect=min(self.connect_timeout, total)))
        return self._client

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes | None = None,
        params: Sequence[tuple[str, str]] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        client = self._get_client(timeout)
        try:
            resp = await client.request(
                method,
                url,
                headers=dict(headers),
                content=body,
                params=list(params) if params else None,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"{method} {url} timed out: {exc}", cause=exc) from exc
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            # Connect, DNS, read/write, protocol, malformed-URL and non-ASCII header failures.
            raise TransportError(f"{method} {url} failed: {exc}", cause=exc) from exc

        headers = {k.lower(): v for k, v in resp.headers.items()}
        return RawResponse(status_code=resp.status_code, body=resp.content, headers=headers)

    async def close(self) -> None:
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None
