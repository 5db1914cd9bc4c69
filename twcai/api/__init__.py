"""Typed operations layered on the client's dispatch."""

from twcai.api.agents import AgentsAPI
from twcai.api.conversations import ConversationsAPI
from twcai.api.responses import ResponsesAPI

__all__ = ["AgentsAPI", "ConversationsAPI", "ResponsesAPI"]
