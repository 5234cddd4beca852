from __future__ import annotations

from openai_chat.config import Settings
from openai_chat.utils.run_log import init_run_log, make_run_id

from .base import ChatCompletionClient
from .mock import MockChatClient
from .openai_compat import ChatClient


def build_client(settings: Settings) -> ChatCompletionClient:
    backend = settings.backend
    if backend == "mock":
        return MockChatClient(model=settings.model)
    if backend == "openai":
        if settings.api_key is None:
            raise RuntimeError("OPENAI_API_KEY is not set but OPENAI_CHAT_BACKEND=openai")
        run_log = None
        if settings.log_dir is not None:
            run_log = init_run_log(settings.log_dir, make_run_id())
        return ChatClient(
            settings.api_key,
            settings.model,
            base_url=settings.base_url,
            timeout_s=settings.timeout_s,
            run_log=run_log,
        )
    raise ValueError(f"unknown OPENAI_CHAT_BACKEND={backend!r}, expected: mock|openai")
