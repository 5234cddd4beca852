from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Any, Mapping, Protocol, Sequence, Union

# Whatever json.loads hands back: dict / list / str / int / float / bool / None.
JSONValue = Any


@unique
class Model(str, Enum):
    """Chat models accepted by the completions endpoint; values are the wire strings."""

    GPT_35_TURBO = "gpt-3.5-turbo"
    GPT_35_TURBO_16K = "gpt-3.5-turbo-16k"
    GPT_35_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
    GPT_35_TURBO_1106 = "gpt-3.5-turbo-1106"
    GPT_4_1106_PREVIEW = "gpt-4-1106-preview"
    GPT_4 = "gpt-4"
    GPT_4_32K = "gpt-4-32k"
    GPT_4_INSTRUCT = "gpt-4-instruct"
    GPT_4_32K_0613 = "gpt-4-32k-0613"

    def format(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Model":
        wanted = text.strip().lower()
        for m in cls:
            if m.value == wanted:
                return m
        choices = "|".join(m.value for m in cls)
        raise ValueError(f"unknown model {text!r}, expected one of: {choices}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Message:
    role: str  # "system" | "user" | "assistant" (not enforced)
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


MessageLike = Union[Message, Mapping[str, str]]


def message_to_dict(m: MessageLike) -> dict[str, str]:
    if isinstance(m, Message):
        return m.to_dict()
    return {"role": m["role"], "content": m["content"]}


class ChatCompletionClient(Protocol):
    @property
    def model(self) -> Model: ...

    def get_chat_completion(self, messages: Sequence[MessageLike]) -> JSONValue:
        """Return the decoded JSON body of one chat-completion round trip."""
        raise NotImplementedError

    async def aget_chat_completion(self, messages: Sequence[MessageLike]) -> JSONValue:
        raise NotImplementedError
