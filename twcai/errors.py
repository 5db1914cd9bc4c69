"""TWCai error hierarchy."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Mapping

BODY_EXCERPT_LIMIT = 500


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    DECODE = "decode"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INVALID_REQUEST = "invalid_request"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    API = "api"
    CONFIGURATION = "configuration"


class TwcError(Exception):
    """Base error for the TWCai client."""

    kind: ErrorKind
    retryable: bool = False

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


# ---------------------------------------------------------------------------
# Client-side errors
# ---------------------------------------------------------------------------

class TransportError(TwcError):
    """No response was received: connect, DNS or I/O failure."""

    kind = ErrorKind.TRANSPORT
    retryable = True


class RequestTimeoutError(TransportError):
    """The per-call deadline expired before a response arrived."""


class DecodeError(TwcError):
    """A payload did not parse into the expected type."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str, cause: Exception | None = None, raw: str | None = None) -> None:
        super().__init__(message, cause)
        self.raw = raw


class ConfigurationError(TwcError):
    kind = ErrorKind.CONFIGURATION


# ---------------------------------------------------------------------------
# API errors
# ---------------------------------------------------------------------------

class ApiError(TwcError):
    """The server answered with a non-2xx status."""

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any = None,
        body_excerpt: str = "",
        error_message: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code
        self.body = body
        self.body_excerpt = body_excerpt
        self.error_message = error_message

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code})"


class UnauthorizedError(ApiError):
    """401: invalid or expired token."""

    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(ApiError):
    """403: domain not whitelisted or agent suspended."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(ApiError):
    """404: agent, response, conversation or item not found."""

    kind = ErrorKind.NOT_FOUND


class InvalidRequestError(ApiError):
    """Any other 4xx: malformed request."""

    kind = ErrorKind.INVALID_REQUEST


class RateLimitedError(ApiError):
    """429: rate limit exceeded."""

    kind = ErrorKind.RATE_LIMITED
    retryable = True

    def __init__(self, *args: Any, retry_after: float | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.retry_after = retry_after


class ServerError(ApiError):
    """500-599: server internal error."""

    kind = ErrorKind.SERVER_ERROR
    retryable = True


_DEFAULT_MESSAGES = {
    401: "Authentication failed - invalid or expired token",
    403: "Access forbidden - domain not whitelisted or agent suspended",
    404: "Resource not found",
    429: "Rate limit exceeded",
}


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def extract_error_message(body: Any) -> str | None:
    """Pull a human-readable message out of a decoded error body."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict):
        msg = error.get("message")
        if isinstance(msg, str) and msg:
            return msg
    for key in ("message", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def _parse_retry_after(headers: Mapping[str, str] | None) -> float | None:
    if not headers:
        return None
    value = headers.get("retry-after")
    if value is None:
        return None
    try:
        return max(float(value), 0.0)
    except ValueError:
        return None


def error_from_response(
    status: int,
    raw: bytes | str,
    headers: Mapping[str, str] | None = None,
) -> ApiError:
    """Map a non-2xx status and body to exactly one ApiError subclass."""
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    try:
        body = json.loads(text) if text else None
    except ValueError:
        body = None

    error_message = extract_error_message(body)
    excerpt = text[:BODY_EXCERPT_LIMIT]
    if 500 <= status < 600:
        default = "Internal server error"
    elif 400 <= status < 500:
        default = _DEFAULT_MESSAGES.get(status, "Bad request")
    else:
        default = f"Unexpected HTTP status {status}"
    message = error_message or _DEFAULT_MESSAGES.get(status) or excerpt or default

    kwargs = {
        "message": message,
        "status_code": status,
        "body": body,
        "body_excerpt": excerpt,
        "error_message": error_message,
    }
    if status == 401:
        return UnauthorizedError(**kwargs)
    if status == 403:
        return ForbiddenError(**kwargs)
    if status == 404:
        return NotFoundError(**kwargs)
    if status == 429:
        return RateLimitedError(**kwargs, retry_after=_parse_retry_after(headers))
    if 400 <= status < 500:
        return InvalidRequestError(**kwargs)
    if 500 <= status < 600:
        return ServerError(**kwargs)
    return ApiError(**kwargs)
