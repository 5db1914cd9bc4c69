"""Shared plumbing for the API surface modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from twcai.client import Client

AGENT_PREFIX = "/api/v1/cloud-ai/agents/{agent_id}"

# Sent on agent endpoints so the server can attribute traffic to this client.
PROXY_SOURCE_HEADERS = {"x-proxy-source": "twcai-python"}


class Resource:
    """A group of operations bound to one client."""

    def __init__(self, client: Client) -> None:
        self._client = client
