from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RunLogPaths:
    run_id: str
    jsonl_path: Path


def make_run_id() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def init_run_log(log_dir: Path, run_id: str) -> RunLogPaths:
    log_dir.mkdir(parents=True, exist_ok=True)
    return RunLogPaths(run_id=run_id, jsonl_path=log_dir / f"run_{run_id}.jsonl")


def append_exchange(
    paths: RunLogPaths,
    *,
    endpoint: str,
    request_body: dict[str, Any],
    status_code: int | None = None,
    response: Any = None,
    error: BaseException | None = None,
) -> None:
    """
    Append one request/response round trip as a JSONL record.

    - Only the request body goes in; headers (and so the API key) never do.
    - On failure `error` replaces `response`.
    """
    messages = request_body.get("messages") or []
    payload: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "run_id": paths.run_id,
        "endpoint": endpoint,
        "model": request_body.get("model"),
        "message_count": len(messages),
        "request": request_body,
        "status_code": status_code,
    }
    if error is not None:
        payload["error"] = f"{type(error).__name__}: {error}"
    else:
        payload["response"] = response
    line = json.dumps(payload, ensure_ascii=False) + "\n"
    with paths.jsonl_path.open("a", encoding="utf-8", newline="\n") as f:
        f.write(line)
