"""Conversations endpoints (OpenAI-compatible).

Conversations and their items live entirely on the server; nothing is cached
between calls. Item listing is one request per page, driven by the caller with
``ListItemsQuery.after`` / ``limit``.
"""

from __future__ import annotations

from twcai.api.base import AGENT_PREFIX, Resource
from twcai.types import (
    Conversation,
    ConversationDeleted,
    ConversationItem,
    ConversationItemList,
    CreateConversationRequest,
    CreateItemsQuery,
    CreateItemsRequest,
    GetItemQuery,
    ListItemsQuery,
    UpdateConversationRequest,
)

CONVERSATIONS_PATH = AGENT_PREFIX + "/v1/conversations"
CONVERSATION_PATH = CONVERSATIONS_PATH + "/{conversation_id}"
ITEMS_PATH = CONVERSATION_PATH + "/items"
ITEM_PATH = ITEMS_PATH + "/{item_id}"


class ConversationsAPI(Resource):

    async def create(self, agent_id: str, request: CreateConversationRequest | None = None) -> Conversation:
        return await self._client.request(
            "POST",
            CONVERSATIONS_PATH,
            agent_id=agent_id,
            body=request or CreateConversationRequest(),
            response_type=Conversation,
        )

    async def get(self, agent_id: str, conversation_id: str) -> Conversation:
        return await self._client.request(
            "GET", CONVERSATION_PATH, agent_id=agent_id, conversation_id=conversation_id, response_type=Conversation,
        )

    async def update(self, agent_id: str, conversation_id: str, request: UpdateConversationRequest) -> Conversation:
        return await self._client.request(
            "POST",
            CONVERSATION_PATH,
            agent_id=agent_id,
            conversation_id=conversation_id,
            body=request,
            response_type=Conversation,
        )

    async def delete(self, agent_id: str, conversation_id: str) -> ConversationDeleted:
        return await self._client.request(
            "DELETE",
            CONVERSATION_PATH,
            agent_id=agent_id,
            conversation_id=conversation_id,
            response_type=ConversationDeleted,
        )

    # -- items -------------------------------------------------------------------

    async def list_items(
        self,
        agent_id: str,
        conversation_id: str,
        query: ListItemsQuery | None = None,
    ) -> ConversationItemList:
        return await self._client.request(
            "GET",
            ITEMS_PATH,
            agent_id=agent_id,
            conversation_id=conversation_id,
            params=query,
            response_type=ConversationItemList,
        )

    async def create_items(
        self,
        agent_id: str,
        conversation_id: str,
        request: CreateItemsRequest,
        query: CreateItemsQuery | None = None,
    ) -> ConversationItemList:
        return await self._client.request(
            "POST",
            ITEMS_PATH,
            agent_id=agent_id,
            conversation_id=conversation_id,
            body=request,
            params=query,
            response_type=ConversationItemList,
        )

    async def get_item(
        self,
        agent_id: str,
        conversation_id: str,
        item_id: str,
        query: GetItemQuery | None = None,
    ) -> ConversationItem:
        return await self._client.request(
            "GET",
            ITEM_PATH,
            agent_id=agent_id,
            conversation_id=conversation_id,
            item_id=item_id,
            params=query,
            response_type=ConversationItem,
        )

    async def delete_item(self, agent_id: str, conversation_id: str, item_id: str) -> Conversation:
        """Delete one item; the server answers with the owning conversation."""
        return await self._client.request(
            "DELETE",
            ITEM_PATH,
            agent_id=agent_id,
            conversation_id=conversation_id,
            item_id=item_id,
            response_type=Conversation,
        )
