"""TWCai wire type definitions."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for every request/response body exchanged with the API."""

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump to the JSON shape sent on the wire; unset optionals are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class OpenWireModel(WireModel):
    """Response body that keeps fields the server adds beyond the documented ones."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    DEVELOPER = "developer"


class FinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"


# ---------------------------------------------------------------------------
# Content items
# ---------------------------------------------------------------------------

class TextContent(WireModel):
    content_type: Literal["text"] = Field("text", alias="type")
    text: str

    @classmethod
    def of(cls, text: str) -> TextContent:
        return cls(text=text)


class ImageUrl(WireModel):
    url: str
    detail: Optional[str] = None  # "low" | "high" | "auto"


class ImageUrlContent(WireModel):
    content_type: Literal["image_url"] = Field("image_url", alias="type")
    image_url: ImageUrl

    @classmethod
    def of(cls, url: str, detail: str | None = None) -> ImageUrlContent:
        return cls(image_url=ImageUrl(url=url, detail=detail))


class InputAudio(WireModel):
    data: str  # base64
    format: str  # wav, mp3, m4a, ogg, flac, webm


class InputAudioContent(WireModel):
    content_type: Literal["input_audio"] = Field("input_audio", alias="type")
    input_audio: InputAudio

    @classmethod
    def of(cls, data: str, format: str) -> InputAudioContent:
        return cls(input_audio=InputAudio(data=data, format=format))


class FileContent(WireModel):
    content_type: Literal["file"] = Field("file", alias="type")
    file: Dict[str, Any]


class RefusalContent(WireModel):
    content_type: Literal["refusal"] = Field("refusal", alias="type")
    refusal: str


ContentItem = Annotated[
    Union[TextContent, ImageUrlContent, InputAudioContent, FileContent, RefusalContent],
    Field(discriminator="content_type"),
]

# The API overloads message content: a bare string or a list of items.
# Selection is by shape: a JSON string is text, a JSON array is items.
ChatContent = Union[str, List[ContentItem]]


# ---------------------------------------------------------------------------
# Tools & response formats
# ---------------------------------------------------------------------------

class FunctionCall(WireModel):
    name: str
    arguments: str = ""


class ToolCall(WireModel):
    id: str
    type: str = "function"
    function: FunctionCall


class FunctionTool(WireModel):
    type: Literal["function"] = "function"
    function: Dict[str, Any]


class CustomTool(WireModel):
    type: Literal["custom"] = "custom"
    custom: Dict[str, Any]


Tool = Annotated[Union[FunctionTool, CustomTool], Field(discriminator="type")]


class ResponseFormatText(WireModel):
    type: Literal["text"] = "text"


class ResponseFormatJsonObject(WireModel):
    type: Literal["json_object"] = "json_object"


class ResponseFormatJsonSchema(WireModel):
    type: Literal["json_schema"] = "json_schema"
    json_schema: Dict[str, Any]


ResponseFormat = Annotated[
    Union[ResponseFormatText, ResponseFormatJsonObject, ResponseFormatJsonSchema],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

class ChatMessage(WireModel):
    role: Role
    content: Optional[ChatContent] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None
    refusal: Optional[str] = None

    # -- Convenience constructors ------------------------------------------------

    @classmethod
    def system(cls, text: str) -> ChatMessage:
        return cls(role=Role.SYSTEM, content=text)

    @classmethod
    def user(cls, text: str) -> ChatMessage:
        return cls(role=Role.USER, content=text)

    @classmethod
    def assistant(cls, text: str) -> ChatMessage:
        return cls(role=Role.ASSISTANT, content=text)

    @classmethod
    def user_multimodal(cls, items: List[ContentItem]) -> ChatMessage:
        return cls(role=Role.USER, content=list(items))

    @classmethod
    def tool(cls, text: str, tool_call_id: str) -> ChatMessage:
        return cls(role=Role.TOOL, content=text, tool_call_id=tool_call_id)

    @property
    def text(self) -> str:
        if self.content is None:
            return ""
        if isinstance(self.content, str):
            return self.content
        return "".join(item.text for item in self.content if isinstance(item, TextContent))


# ---------------------------------------------------------------------------
# Chat completions
# ---------------------------------------------------------------------------

class Usage(WireModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletionRequest(WireModel):
    messages: List[ChatMessage] = Field(default_factory=list)
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_completion_tokens: Optional[int] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stop: Optional[Union[str, List[str]]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = None
    seed: Optional[int] = None
    response_format: Optional[ResponseFormat] = None
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None
    user: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    store: Optional[bool] = None


class ChatChoice(OpenWireModel):
    index: int = 0
    message: ChatMessage
    finish_reason: Optional[FinishReason] = None
    logprobs: Optional[Dict[str, Any]] = None


class ChatCompletionResponse(OpenWireModel):
    id: str
    object: str = "chat.completion"
    created: int
    model: str
    choices: List[ChatChoice]
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None

    @property
    def text(self) -> str:
        return self.choices[0].message.text if self.choices else ""


# ---------------------------------------------------------------------------
# Agent call
# ---------------------------------------------------------------------------

class AgentCallRequest(WireModel):
    message: Optional[str] = None
    parent_message_id: Optional[str] = None
    file_ids: Optional[List[str]] = None


class AgentCallResponse(OpenWireModel):
    message: str
    id: Optional[str] = None


# ---------------------------------------------------------------------------
# Text completions (legacy)
# ---------------------------------------------------------------------------

class TextCompletionRequest(WireModel):
    prompt: str
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    logprobs: Optional[int] = None
    echo: Optional[bool] = None
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    user: Optional[str] = None


class TextCompletionLogprobs(WireModel):
    tokens: List[str]
    token_logprobs: List[float]
    top_logprobs: Any = None
    text_offset: List[int]


class TextCompletionChoice(WireModel):
    text: str
    index: int
    logprobs: Optional[TextCompletionLogprobs] = None
    finish_reason: Optional[str] = None


class TextCompletionResponse(OpenWireModel):
    id: str
    object: str = "text_completion"
    created: int
    model: str
    choices: List[TextCompletionChoice]
    usage: Usage


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class Model(WireModel):
    id: str
    object: str = "model"
    created: int
    owned_by: str


class ModelsResponse(WireModel):
    object: str = "list"
    data: List[Model]


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

ResponseInput = Union[str, List[Dict[str, Any]]]


class CreateResponseRequest(WireModel):
    model: Optional[str] = None  # ignored, the agent has its own configuration
    instructions: Optional[str] = None
    input: Optional[ResponseInput] = None
    max_output_tokens: Optional[int] = None
    temperature: Optional[float] = None
    metadata: Optional[Dict[str, Any]] = None
    tools: Optional[List[Dict[str, Any]]] = None
    background: Optional[bool] = None
    text: Optional[Dict[str, Any]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None
    max_tool_calls: Optional[int] = None
    previous_response_id: Optional[str] = None
    conversation: Optional[Union[str, Dict[str, Any]]] = None
    include: Optional[List[str]] = None
    store: Optional[bool] = None
    top_p: Optional[float] = None
    top_logprobs: Optional[int] = None
    truncation: Optional[str] = None
    service_tier: Optional[str] = None
    safety_identifier: Optional[str] = None
    prompt_cache_key: Optional[str] = None
    prompt: Optional[Dict[str, Any]] = None
    reasoning: Optional[Dict[str, Any]] = None
    user: Optional[str] = None


class ResponseUsage(OpenWireModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class Response(OpenWireModel):
    id: str
    object: str = "response"
    created_at: int
    model: str
    status: str
    usage: ResponseUsage
    output: Optional[List[Dict[str, Any]]] = None

    @property
    def output_text(self) -> str:
        parts: list[str] = []
        for item in self.output or []:
            for block in item.get("content") or []:
                if isinstance(block, dict) and block.get("type") == "output_text":
                    parts.append(block.get("text", ""))
        return "".join(parts)


class GetResponseQuery(WireModel):
    include: Optional[List[str]] = None
    include_obfuscation: Optional[bool] = None
    starting_after: Optional[int] = None


# ---------------------------------------------------------------------------
# Conversations
# ---------------------------------------------------------------------------

class ConversationItemContent(OpenWireModel):
    content_type: str = Field(alias="type")  # "input_text" | "output_text" | ...
    text: str


class ConversationItem(OpenWireModel):
    item_type: str = Field("message", alias="type")
    id: str
    status: str
    role: str
    content: List[ConversationItemContent]

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.content)


class ConversationItemList(WireModel):
    object: str = "list"
    data: List[ConversationItem]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False


class ItemContentInput(WireModel):
    content_type: str = Field("input_text", alias="type")
    text: str


class ConversationItemMessage(WireModel):
    item_type: Literal["message"] = Field("message", alias="type")
    role: Role
    content: List[ItemContentInput]

    @classmethod
    def of(cls, role: Role | str, text: str) -> ConversationItemMessage:
        return cls(role=Role(role), content=[ItemContentInput(text=text)])


CreateItemRequest = ConversationItemMessage


class CreateConversationRequest(WireModel):
    items: Optional[List[ConversationItemMessage]] = None  # up to 20
    metadata: Optional[Dict[str, str]] = None


class UpdateConversationRequest(WireModel):
    metadata: Dict[str, str]


class CreateItemsRequest(WireModel):
    items: List[ConversationItemMessage]  # up to 20


class Conversation(OpenWireModel):
    id: str
    object: str = "conversation"
    created_at: int
    metadata: Optional[Dict[str, Any]] = None


class ConversationDeleted(WireModel):
    id: str
    object: str = "conversation.deleted"
    deleted: bool


class ListItemsQuery(WireModel):
    after: Optional[str] = None
    include: Optional[List[str]] = None
    limit: Optional[int] = None  # 1-100, server default 20
    order: Optional[Literal["asc", "desc"]] = None


class GetItemQuery(WireModel):
    include: Optional[List[str]] = None


class CreateItemsQuery(WireModel):
    include: Optional[List[str]] = None
