from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from pydantic import SecretStr

from openai_chat.llm.base import Model
from openai_chat.llm.openai_compat import DEFAULT_BASE_URL


@dataclass(frozen=True)
class Settings:
    backend: str

    api_key: SecretStr | None
    model: Model
    base_url: str
    timeout_s: float | None

    log_level: str
    log_dir: Path | None


def load_settings() -> Settings:
    # Allow users to keep secrets in a local `.env` (not committed).
    load_dotenv(override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v.strip() == "":
            return default
        return v

    backend = (getenv("OPENAI_CHAT_BACKEND", "openai") or "openai").strip().lower()

    raw_key = getenv("OPENAI_API_KEY", None)
    api_key = SecretStr(raw_key) if raw_key is not None else None

    model = Model.parse(getenv("OPENAI_CHAT_MODEL", Model.GPT_35_TURBO.value) or "")
    base_url = getenv("OPENAI_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL

    raw_timeout = getenv("OPENAI_CHAT_TIMEOUT_S", None)
    try:
        timeout_s = float(raw_timeout) if raw_timeout is not None else None
    except ValueError:
        raise ValueError(f"OPENAI_CHAT_TIMEOUT_S must be a number of seconds, got {raw_timeout!r}") from None

    log_level = (getenv("OPENAI_CHAT_LOG_LEVEL", "WARNING") or "WARNING").strip().upper()
    raw_log_dir = getenv("OPENAI_CHAT_LOG_DIR", None)
    log_dir = Path(raw_log_dir).resolve() if raw_log_dir else None

    return Settings(
        backend=backend,
        api_key=api_key,
        model=model,
        base_url=base_url,
        timeout_s=timeout_s,
        log_level=log_level,
        log_dir=log_dir,
    )
