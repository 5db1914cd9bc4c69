"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from twcai.errors import ConfigurationError

DEFAULT_BASE_URL = "https://agent.timeweb.cloud"
DEFAULT_TIMEOUT = 120.0

ENV_BASE_URL = "TWCAI_BASE_URL"
ENV_API_TOKEN = "TWCAI_API_TOKEN"
ENV_TIMEOUT = "TWCAI_TIMEOUT"


@dataclass(frozen=True)
class ClientConfig:
    """Resolved, immutable settings shared by every dispatch of one client."""

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.token:
            raise ConfigurationError("Token is required")
        if not self.token.isascii():
            raise ConfigurationError("Token must contain only ASCII characters")
        if not self.base_url:
            raise ConfigurationError("Base URL is required")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Read TWCAI_API_TOKEN, TWCAI_BASE_URL and TWCAI_TIMEOUT once."""
        env = os.environ if environ is None else environ

        token = env.get(ENV_API_TOKEN)
        if not token:
            raise ConfigurationError(f"{ENV_API_TOKEN} environment variable not set")

        raw_timeout = env.get(ENV_TIMEOUT)
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw_timeout!r}", cause=exc) from exc

        return cls(
            token=token,
            base_url=env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            timeout=timeout,
        )

    @property
    def auth_header(self) -> str:
        return f"Bearer {self.token}"

    def __repr__(self) -> str:
        return f"ClientConfig(base_url={self.base_url!r}, token='***', timeout={self.timeout!r})"
