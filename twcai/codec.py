"""Wire encoding and decoding for TWCai types."""

from __future__ import annotations

import json
from typing import Any, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from twcai.errors import DecodeError
from twcai.types import ChatContent, ContentItem, WireModel

T = TypeVar("T")

_RAW_EXCERPT_LIMIT = 500


def encode(value: Any) -> Any:
    """Return the JSON-ready wire form of ``value``.

    Models are dumped by alias with unset optional fields left out, so the
    server applies its own defaults.
    """
    if isinstance(value, WireModel):
        return value.to_wire()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [encode(v) for v in value]
    if isinstance(value, dict):
        return {k: encode(v) for k, v in value.items() if v is not None}
    return value


def encode_json(value: Any) -> bytes:
    return json.dumps(encode(value), ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def encode_query(query: WireModel | dict | None) -> list[tuple[str, str]]:
    """Flatten a query model into (key, value) pairs; list values repeat the key."""
    if query is None:
        return []
    data = encode(query)
    params: list[tuple[str, str]] = []
    for key, value in data.items():
        values = value if isinstance(value, list) else [value]
        for v in values:
            if isinstance(v, bool):
                v = "true" if v else "false"
            params.append((key, str(v)))
    return params


_CONTENT_ITEM = TypeAdapter(ContentItem)
_CHAT_CONTENT = TypeAdapter(ChatContent)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def _validate(validator: Any, name: str, data: Any, raw: str | None = None) -> Any:
    try:
        if isinstance(validator, TypeAdapter):
            return validator.validate_python(data)
        return validator.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(f"Failed to decode {name}: {_describe(exc)}", cause=exc, raw=raw) from exc


def decode(type_: Type[T], data: Any) -> T:
    """Validate a response body into ``type_``, raising DecodeError on any mismatch.

    ``data`` may be raw JSON (``bytes``/``str``) or an already-parsed object.
    """
    raw: str | None = None
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raw = bytes(data[:_RAW_EXCERPT_LIMIT]).decode("utf-8", errors="replace")
            raise DecodeError("Response body is not valid UTF-8", cause=exc, raw=raw) from exc
    if isinstance(data, str):
        raw = data[:_RAW_EXCERPT_LIMIT]
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise DecodeError(f"Response body is not valid JSON: {exc}", cause=exc, raw=raw) from exc

    if isinstance(type_, type) and issubclass(type_, BaseModel):
        return _validate(type_, type_.__name__, data, raw)
    return _validate(TypeAdapter(type_), repr(type_), data, raw)


def decode_content_item(data: Any) -> Any:
    """Decode one parsed multimodal content item, selected by its ``type`` tag."""
    return _validate(_CONTENT_ITEM, "ContentItem", data)


def decode_chat_content(data: Any) -> Any:
    """Decode parsed message content: a bare string, or a list of content items."""
    return _validate(_CHAT_CONTENT, "ChatContent", data)
