"""Core TWCai client: request dispatch and response classification."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Mapping
from urllib.parse import quote

from twcai.api import AgentsAPI, ConversationsAPI, ResponsesAPI
from twcai.codec import decode, encode_json, encode_query
from twcai.config import ClientConfig
from twcai.errors import ApiError, RequestTimeoutError, TransportError, TwcError, error_from_response
from twcai.transport import HttpxTransport, RawResponse, Transport
from twcai.types import WireModel

logger = logging.getLogger(__name__)


def render_path(template: str, **path_params: str) -> str:
    """Fill ``{name}`` placeholders with percent-encoded identifiers."""
    return template.format(**{k: quote(str(v), safe="") for k, v in path_params.items()})


class Client:
    """Dispatches typed requests to the Timeweb Cloud AI agent API.

    Holds only immutable configuration and a transport handle, so one instance
    can be shared by concurrent callers.
    """

    def __init__(self, config: ClientConfig, transport: Transport | None = None) -> None:
        self.config = config
        self.transport = transport or HttpxTransport()
        self.agents = AgentsAPI(self)
        self.responses = ResponsesAPI(self)
        self.conversations = ConversationsAPI(self)

    @classmethod
    def from_env(cls, transport: Transport | None = None) -> Client:
        """Build a client from TWCAI_* environment variables."""
        return cls(ClientConfig.from_env(), transport=transport)

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.transport.close()

    # -- dispatch ----------------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        response_type: Any = None,
        body: WireModel | None = None,
        params: WireModel | Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        authenticate: bool = True,
        **path_params: str,
    ) -> Any:
        """Perform one HTTP exchange and return the decoded ``response_type``.

        ``response_type=None`` discards the body and ``response_type=str``
        returns it as text. Every failure is raised as a TwcError subclass;
        nothing is retried here.
        """
        rendered = render_path(path, **path_params)
        url = f"{self.config.base_url}{rendered}"

        send_headers = {"Accept": "application/json"}
        if authenticate:
            send_headers["Authorization"] = self.config.auth_header
        payload = None
        if body is not None:
            payload = encode_json(body)
            send_headers["Content-Type"] = "application/json"
        if headers:
            send_headers.update(headers)

        started = time.monotonic()
        raw = await self._send(method, url, send_headers, payload, encode_query(params))
        elapsed_ms = (time.monotonic() - started) * 1000
        logger.debug("%s %s -> %d (%.0f ms)", method, rendered, raw.status_code, elapsed_ms)

        return self._classify(method, rendered, raw, response_type)

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        payload: bytes | None,
        params: list[tuple[str, str]],
    ) -> RawResponse:
        timeout = self.config.timeout
        try:
            return await asyncio.wait_for(
                self.transport.send(method, url, headers=headers, body=payload, params=params, timeout=timeout),
                timeout=timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("%s %s exceeded %.1fs deadline", method, url, timeout)
            raise RequestTimeoutError(f"{method} {url} exceeded {timeout}s deadline", cause=exc) from exc
        except TwcError as exc:
            logger.warning("%s %s transport failure: %s", method, url, exc)
            raise
        except Exception as exc:
            logger.warning("%s %s transport raised %s: %s", method, url, type(exc).__name__, exc)
            raise TransportError(f"{method} {url} failed: {exc}", cause=exc) from exc

    def _classify(self, method: str, path: str, raw: RawResponse, response_type: Any) -> Any:
        if raw.is_success:
            if response_type is None:
                return None
            if response_type is str:
                return raw.text
            try:
                return decode(response_type, raw.body)
            except TwcError as exc:
                logger.warning("%s %s returned an undecodable body: %s", method, path, exc)
                raise

        error: ApiError = error_from_response(raw.status_code, raw.body, raw.headers)
        logger.info("%s %s failed with %s: %s", method, path, error.kind.value, error)
        raise error
