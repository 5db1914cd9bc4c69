"""Agent endpoints: calls, chat/text completions, models, embed code."""

from __future__ import annotations

import warnings
from typing import Any

from twcai.api.base import AGENT_PREFIX, PROXY_SOURCE_HEADERS, Resource
from twcai.types import (
    AgentCallRequest,
    AgentCallResponse,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ModelsResponse,
    TextCompletionRequest,
    TextCompletionResponse,
)


class AgentsAPI(Resource):

    async def call(self, agent_id: str, request: AgentCallRequest) -> AgentCallResponse:
        """POST /call: the agent's native single-message endpoint."""
        return await self._client.request(
            "POST",
            AGENT_PREFIX + "/call",
            agent_id=agent_id,
            body=request,
            headers=PROXY_SOURCE_HEADERS,
            response_type=AgentCallResponse,
        )

    async def chat_completions(self, agent_id: str, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """POST /v1/chat/completions: OpenAI-compatible chat completions."""
        return await self._client.request(
            "POST",
            AGENT_PREFIX + "/v1/chat/completions",
            agent_id=agent_id,
            body=request,
            headers=PROXY_SOURCE_HEADERS,
            response_type=ChatCompletionResponse,
        )

    async def call_agent(
        self,
        agent_id: str,
        message: str,
        system: str | None = None,
        **params: Any,
    ) -> ChatCompletionResponse:
        """Send one user message as a full chat completion request.

        Extra keyword arguments become generation parameters on the request
        (``temperature``, ``max_completion_tokens``, ...).
        """
        messages = [ChatMessage.user(message)]
        if system:
            messages.insert(0, ChatMessage.system(system))
        request = ChatCompletionRequest(messages=messages, **params)
        return await self.chat_completions(agent_id, request)

    async def text_completions(self, agent_id: str, request: TextCompletionRequest) -> TextCompletionResponse:
        """POST /v1/completions: legacy text completions."""
        warnings.warn(
            "text_completions is deprecated, use chat_completions instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self._client.request(
            "POST",
            AGENT_PREFIX + "/v1/completions",
            agent_id=agent_id,
            body=request,
            headers=PROXY_SOURCE_HEADERS,
            response_type=TextCompletionResponse,
        )

    async def list_models(self, agent_id: str) -> ModelsResponse:
        return await self._client.request(
            "GET",
            AGENT_PREFIX + "/v1/models",
            agent_id=agent_id,
            response_type=ModelsResponse,
        )

    async def get_embed_code(
        self,
        agent_id: str,
        *,
        referer: str,
        origin: str,
        collapsed: bool | None = None,
    ) -> str:
        """GET /embed.js: the widget's JavaScript, returned verbatim."""
        return await self._client.request(
            "GET",
            AGENT_PREFIX + "/embed.js",
            agent_id=agent_id,
            params={"collapsed": collapsed},
            headers={"referer": referer, "origin": origin, "Accept": "*/*"},
            authenticate=False,
            response_type=str,
        )
