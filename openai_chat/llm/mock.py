from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .base import JSONValue, MessageLike, Model, message_to_dict


@dataclass(frozen=True)
class MockChatClient:
    """Deterministic offline backend: same surface as ChatClient, no network."""

    model: Model = Model.GPT_35_TURBO

    def get_chat_completion(self, messages: Sequence[MessageLike]) -> JSONValue:
        convo = [message_to_dict(m) for m in messages]
        # Echo last user message in the chat-completion shape.
        last_user = next((m["content"] for m in reversed(convo) if m["role"] == "user"), "")
        return {
            "id": "chatcmpl-mock",
            "object": "chat.completion",
            "model": self.model.format(),
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": f"[mock] {last_user}"},
                    "finish_reason": "stop",
                }
            ],
            "usage": {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0},
        }

    async def aget_chat_completion(self, messages: Sequence[MessageLike]) -> JSONValue:
        return self.get_chat_completion(messages)
