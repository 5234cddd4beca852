from __future__ import annotations

from typing import Any

from openai_chat.utils.response import api_error_message


class ChatClientError(Exception):
    """Base class for failures raised by the chat clients."""


class TransportError(ChatClientError):
    """No response was obtained (DNS, TLS, refused/reset connection, timeout)."""

    def __init__(self, endpoint: str, reason: str) -> None:
        super().__init__(f"POST {endpoint} failed before a response arrived: {reason}")
        self.endpoint = endpoint
        self.reason = reason


class DecodeError(ChatClientError):
    """A response arrived but its body is not valid JSON."""

    def __init__(self, endpoint: str, status_code: int, body: str, *, detail: str | None = None) -> None:
        preview = detail or (body[:200] if body else "<empty body>")
        super().__init__(f"POST {endpoint} returned HTTP {status_code} with a non-JSON body: {preview}")
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body


class ApiError(ChatClientError):
    """HTTP 4xx/5xx response. Only raised when the client opts into status checking."""

    def __init__(self, endpoint: str, status_code: int, payload: Any) -> None:
        detail = api_error_message(payload)
        if detail is None:
            detail = (payload if isinstance(payload, str) else repr(payload))[:200]
        super().__init__(f"POST {endpoint} returned HTTP {status_code}: {detail}")
        self.endpoint = endpoint
        self.status_code = status_code
        self.payload = payload
