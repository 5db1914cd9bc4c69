"""Tests for the TWCai wire type system."""

import json

import pytest

from twcai.codec import decode, decode_chat_content, decode_content_item, encode, encode_json
from twcai.errors import DecodeError
from twcai.types import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ConversationItemMessage,
    CreateResponseRequest,
    FileContent,
    FinishReason,
    ImageUrlContent,
    InputAudioContent,
    ListItemsQuery,
    RefusalContent,
    ResponseFormatJsonSchema,
    Role,
    TextCompletionResponse,
    TextContent,
)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

def test_message_system():
    m = ChatMessage.system("You are helpful.")
    assert m.role == Role.SYSTEM
    assert m.text == "You are helpful."


def test_message_user():
    m = ChatMessage.user("Hello")
    assert m.role == Role.USER
    assert m.content == "Hello"


def test_message_assistant():
    m = ChatMessage.assistant("Hi there")
    assert m.role == Role.ASSISTANT
    assert m.text == "Hi there"


def test_message_tool():
    m = ChatMessage.tool("42", tool_call_id="call_1")
    assert m.role == Role.TOOL
    assert m.to_wire() == {"role": "tool", "content": "42", "tool_call_id": "call_1"}


def test_message_user_multimodal():
    m = ChatMessage.user_multimodal([TextContent.of("What's in this image?"), ImageUrlContent.of("https://example.com/a.jpg")])
    assert m.role == Role.USER
    assert isinstance(m.content, list)
    assert m.text == "What's in this image?"


def test_role_serialization():
    assert json.dumps(Role.USER.value) == '"user"'
    assert ChatMessage.system("x").to_wire()["role"] == "system"


# ---------------------------------------------------------------------------
# Content items
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("item", [
    TextContent.of("hello"),
    ImageUrlContent.of("https://example.com/cat.png"),
    ImageUrlContent.of("https://example.com/cat.png", detail="high"),
    InputAudioContent.of("UklGRg==", "wav"),
    FileContent(file={"file_id": "file-123"}),
    RefusalContent(refusal="I can't help with that"),
])
def test_content_item_round_trip(item):
    assert decode_content_item(encode(item)) == item


def test_content_item_wire_shapes():
    assert encode(TextContent.of("hi")) == {"type": "text", "text": "hi"}
    assert encode(ImageUrlContent.of("https://x/y.png")) == {"type": "image_url", "image_url": {"url": "https://x/y.png"}}
    assert encode(ImageUrlContent.of("https://x/y.png", detail="low")) == {
        "type": "image_url",
        "image_url": {"url": "https://x/y.png", "detail": "low"},
    }
    assert encode(InputAudioContent.of("AAAA", "mp3")) == {"type": "input_audio", "input_audio": {"data": "AAAA", "format": "mp3"}}


def test_content_item_selected_by_tag():
    item = decode_content_item({"type": "image_url", "image_url": {"url": "https://x/y.png", "detail": "auto"}})
    assert isinstance(item, ImageUrlContent)
    assert item.content_type == "image_url"
    assert item.image_url.detail == "auto"


def test_unknown_discriminator_is_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        decode_content_item({"type": "bogus", "text": "hi"})
    assert "bogus" in str(exc_info.value)


def test_mismatched_discriminator_is_decode_error():
    with pytest.raises(DecodeError):
        decode_content_item({"type": "text", "image_url": {"url": "https://x/y.png"}})


def test_missing_discriminator_is_decode_error():
    with pytest.raises(DecodeError):
        decode_content_item({"text": "hi"})


# ---------------------------------------------------------------------------
# ChatContent string-or-array overload
# ---------------------------------------------------------------------------

def test_plain_text_content_is_bare_string():
    wire = ChatMessage.user("Hi").to_wire()
    assert wire["content"] == "Hi"


def test_chat_content_decodes_by_shape():
    assert decode_chat_content("Hi") == "Hi"
    items = decode_chat_content([{"type": "text", "text": "a"}, {"type": "text", "text": "b"}])
    assert [i.text for i in items] == ["a", "b"]


def test_chat_content_rejects_list_of_strings():
    with pytest.raises(DecodeError):
        decode_chat_content(["not", "items"])


def test_multimodal_message_round_trip_preserves_order():
    msg = ChatMessage.user_multimodal([
        TextContent.of("Describe this"),
        ImageUrlContent.of("https://example.com/cat.png"),
    ])
    wire = json.loads(encode_json(msg))
    assert [c["type"] for c in wire["content"]] == ["text", "image_url"]
    assert "detail" not in wire["content"][1]["image_url"]

    decoded = decode(ChatMessage, wire)
    assert decoded == msg
    assert isinstance(decoded.content[0], TextContent)
    assert isinstance(decoded.content[1], ImageUrlContent)
    assert decoded.content[1].image_url.detail is None


def test_multimodal_detail_kept_when_set():
    msg = ChatMessage.user_multimodal([TextContent.of("x"), ImageUrlContent.of("https://e/c.png", detail="high")])
    decoded = decode(ChatMessage, encode_json(msg))
    assert decoded.content[1].image_url.detail == "high"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

def test_chat_completion_request_default():
    request = ChatCompletionRequest()
    assert request.model is None
    assert request.messages == []
    assert request.temperature is None
    assert request.to_wire() == {"messages": []}


def test_chat_completion_request_omits_unset_fields():
    request = ChatCompletionRequest(
        messages=[ChatMessage.system("You are helpful"), ChatMessage.user("Hi")],
        temperature=0.7,
    )
    wire = json.loads(encode_json(request))
    assert wire["messages"] == [
        {"role": "system", "content": "You are helpful"},
        {"role": "user", "content": "Hi"},
    ]
    assert wire["temperature"] == 0.7
    assert "max_completion_tokens" not in wire
    assert None not in wire.values()


def test_response_format_tagged():
    request = ChatCompletionRequest(
        messages=[ChatMessage.user("json please")],
        response_format=ResponseFormatJsonSchema(json_schema={"name": "x", "schema": {"type": "object"}}),
    )
    assert request.to_wire()["response_format"]["type"] == "json_schema"
    decoded = decode(ChatCompletionRequest, request.to_wire())
    assert isinstance(decoded.response_format, ResponseFormatJsonSchema)


def test_create_response_request_input_overload():
    assert CreateResponseRequest(input="Hello").to_wire() == {"input": "Hello"}
    messages = [{"role": "user", "content": "Hello"}]
    assert CreateResponseRequest(input=messages).to_wire() == {"input": messages}


def test_conversation_item_message_helper():
    item = ConversationItemMessage.of("user", "Hello, let's talk.")
    assert item.to_wire() == {
        "type": "message",
        "role": "user",
        "content": [{"type": "input_text", "text": "Hello, let's talk."}],
    }


def test_list_items_query_default():
    query = ListItemsQuery()
    assert query.after is None
    assert query.include is None
    assert query.limit is None
    assert query.order is None
    assert query.to_wire() == {}


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

CHAT_RESPONSE = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "deepseek-reason",
    "choices": [
        {"index": 0, "message": {"role": "assistant", "content": "Paris."}, "finish_reason": "stop"},
    ],
    "usage": {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12},
    "x_vendor_field": "kept",
}


def test_chat_completion_response_decodes():
    resp = decode(ChatCompletionResponse, json.dumps(CHAT_RESPONSE))
    assert resp.text == "Paris."
    assert resp.choices[0].finish_reason == FinishReason.STOP
    assert resp.usage.total_tokens == 12
    assert resp.model_extra["x_vendor_field"] == "kept"


def test_chat_completion_response_missing_field():
    body = dict(CHAT_RESPONSE)
    del body["choices"]
    with pytest.raises(DecodeError, match="choices"):
        decode(ChatCompletionResponse, json.dumps(body))


def test_invalid_json_is_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        decode(ChatCompletionResponse, b"<html>oops</html>")
    assert exc_info.value.raw == "<html>oops</html>"


def test_invalid_utf8_is_decode_error():
    body = b'{"id":"c1","object":"chat.completion","created":1,"model":"m","choices":[{"index":0,"message":{"role":"assistant","content":"caf\xff"}}]}'
    with pytest.raises(DecodeError, match="UTF-8") as exc_info:
        decode(ChatCompletionResponse, body)
    assert "caf�" in exc_info.value.raw


def test_text_completion_null_finish_reason():
    resp = decode(TextCompletionResponse, json.dumps({
        "id": "t1", "object": "text_completion", "created": 1, "model": "m",
        "choices": [{"text": " world", "index": 0, "finish_reason": None}],
        "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
    }))
    assert resp.choices[0].finish_reason is None
