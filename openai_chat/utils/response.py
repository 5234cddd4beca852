from __future__ import annotations

from typing import Any


def first_message_content(payload: Any) -> str:
    """
    Pull the assistant text out of a chat-completion payload.

    OpenAI returns: choices[0].message.content. Anything else (API error
    bodies, empty choices, non-object payloads) yields "".
    """
    if not isinstance(payload, dict):
        return ""
    choices = payload.get("choices") or []
    if not isinstance(choices, list) or not choices:
        return ""
    choice = choices[0]
    if not isinstance(choice, dict):
        return ""
    msg = choice.get("message")
    if not isinstance(msg, dict):
        return ""
    content = msg.get("content")
    return content if isinstance(content, str) else ""


def api_error_message(payload: Any) -> str | None:
    """Return the API-level error text carried by an error body, or None for ordinary payloads."""
    if not isinstance(payload, dict) or "error" not in payload:
        return None
    err = payload["error"]
    if isinstance(err, dict):
        return str(err.get("message") or err.get("type") or err.get("code") or err)
    if err is None:
        return None
    return str(err)
