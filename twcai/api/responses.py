"""Responses endpoints (OpenAI-compatible)."""

from __future__ import annotations

from twcai.api.base import AGENT_PREFIX, Resource
from twcai.types import CreateResponseRequest, GetResponseQuery, Response

RESPONSES_PATH = AGENT_PREFIX + "/v1/responses"
RESPONSE_PATH = RESPONSES_PATH + "/{response_id}"


class ResponsesAPI(Resource):

    async def create(self, agent_id: str, request: CreateResponseRequest) -> Response:
        return await self._client.request(
            "POST", RESPONSES_PATH, agent_id=agent_id, body=request, response_type=Response,
        )

    async def get(self, agent_id: str, response_id: str, query: GetResponseQuery | None = None) -> Response:
        return await self._client.request(
            "GET", RESPONSE_PATH, agent_id=agent_id, response_id=response_id, params=query, response_type=Response,
        )

    async def delete(self, agent_id: str, response_id: str) -> None:
        """Delete a stored response. The server answers 200 or 204 with no useful body."""
        await self._client.request("DELETE", RESPONSE_PATH, agent_id=agent_id, response_id=response_id)

    async def cancel(self, agent_id: str, response_id: str) -> Response:
        """Cancel a background response server-side."""
        return await self._client.request(
            "POST", RESPONSE_PATH + "/cancel", agent_id=agent_id, response_id=response_id, response_type=Response,
        )
