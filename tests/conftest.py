import json

import httpx
import pytest

from openai_chat.llm import Message


class Recorder:
    """MockTransport handler that answers with a canned response and keeps every request."""

    def __init__(self, status_code=200, body=b'{"choices":[]}', exc=None):
        self.status_code = status_code
        self.body = body
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        content = self.body if isinstance(self.body, bytes) else json.dumps(self.body).encode("utf-8")
        return httpx.Response(self.status_code, content=content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_transport():
    def _make(status_code=200, body=b'{"choices":[]}', exc=None):
        recorder = Recorder(status_code=status_code, body=body, exc=exc)
        return recorder, httpx.MockTransport(recorder)

    return _make


@pytest.fixture
def hello_messages():
    return [Message(role="user", content="Hello, I'm a user!")]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "OPENAI_API_KEY",
        "OPENAI_CHAT_BACKEND",
        "OPENAI_CHAT_MODEL",
        "OPENAI_BASE_URL",
        "OPENAI_CHAT_TIMEOUT_S",
        "OPENAI_CHAT_LOG_LEVEL",
        "OPENAI_CHAT_LOG_DIR",
    ):
        monkeypatch.delenv(key, raising=False)
