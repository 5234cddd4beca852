from .base import ChatCompletionClient, JSONValue, Message, Model
from .errors import ApiError, ChatClientError, DecodeError, TransportError
from .factory import build_client
from .mock import MockChatClient
from .openai_compat import ChatClient, build_request_body, encode_request_body

__all__ = [
    "ApiError",
    "ChatClient",
    "ChatClientError",
    "ChatCompletionClient",
    "DecodeError",
    "JSONValue",
    "Message",
    "MockChatClient",
    "Model",
    "TransportError",
    "build_client",
    "build_request_body",
    "encode_request_body",
]
