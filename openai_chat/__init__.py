"""Thin client for the OpenAI chat-completions endpoint."""

from openai_chat.llm import (
    ApiError,
    ChatClient,
    ChatClientError,
    DecodeError,
    Message,
    MockChatClient,
    Model,
    TransportError,
    build_client,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ChatClient",
    "ChatClientError",
    "DecodeError",
    "Message",
    "MockChatClient",
    "Model",
    "TransportError",
    "build_client",
]
