"""TWCai: typed async client for the Timeweb Cloud AI agent API."""

from twcai.types import (
    AgentCallRequest,
    AgentCallResponse,
    ChatChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatContent,
    ChatMessage,
    ContentItem,
    Conversation,
    ConversationDeleted,
    ConversationItem,
    ConversationItemContent,
    ConversationItemList,
    ConversationItemMessage,
    CreateConversationRequest,
    CreateItemRequest,
    CreateItemsQuery,
    CreateItemsRequest,
    CreateResponseRequest,
    CustomTool,
    FileContent,
    FinishReason,
    FunctionTool,
    GetItemQuery,
    GetResponseQuery,
    ImageUrl,
    ImageUrlContent,
    InputAudio,
    InputAudioContent,
    ItemContentInput,
    ListItemsQuery,
    Model,
    ModelsResponse,
    RefusalContent,
    Response,
    ResponseFormatJsonObject,
    ResponseFormatJsonSchema,
    ResponseFormatText,
    ResponseUsage,
    Role,
    TextCompletionRequest,
    TextCompletionResponse,
    TextContent,
    UpdateConversationRequest,
    Usage,
)
from twcai.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    ErrorKind,
    ForbiddenError,
    InvalidRequestError,
    NotFoundError,
    RateLimitedError,
    RequestTimeoutError,
    ServerError,
    TransportError,
    TwcError,
    UnauthorizedError,
)
from twcai.config import ClientConfig
from twcai.transport import HttpxTransport, RawResponse, Transport
from twcai.client import Client
from twcai.retry import RetryPolicy, retry_call

__all__ = [
    "Role", "FinishReason",
    "TextContent", "ImageUrl", "ImageUrlContent", "InputAudio", "InputAudioContent",
    "FileContent", "RefusalContent", "ContentItem", "ChatContent", "ChatMessage",
    "FunctionTool", "CustomTool",
    "ResponseFormatText", "ResponseFormatJsonObject", "ResponseFormatJsonSchema",
    "ChatCompletionRequest", "ChatCompletionResponse", "ChatChoice", "Usage",
    "AgentCallRequest", "AgentCallResponse",
    "TextCompletionRequest", "TextCompletionResponse", "Model", "ModelsResponse",
    "CreateResponseRequest", "Response", "ResponseUsage", "GetResponseQuery",
    "Conversation", "ConversationDeleted", "ConversationItem", "ConversationItemContent",
    "ConversationItemList", "ConversationItemMessage", "ItemContentInput",
    "CreateConversationRequest", "UpdateConversationRequest", "CreateItemRequest",
    "CreateItemsRequest", "ListItemsQuery", "GetItemQuery", "CreateItemsQuery",
    "TwcError", "ErrorKind", "TransportError", "RequestTimeoutError", "DecodeError",
    "ApiError", "UnauthorizedError", "ForbiddenError", "NotFoundError",
    "InvalidRequestError", "RateLimitedError", "ServerError", "ConfigurationError",
    "ClientConfig", "Transport", "HttpxTransport", "RawResponse", "Client",
    "RetryPolicy", "retry_call",
]
