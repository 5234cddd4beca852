from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence, Union

import httpx
from pydantic import SecretStr

from openai_chat.utils.run_log import RunLogPaths, append_exchange

from .base import JSONValue, MessageLike, Model, message_to_dict
from .errors import ApiError, DecodeError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"


def build_request_body(model: Model, messages: Sequence[MessageLike]) -> dict[str, Any]:
    return {
        "model": model.format(),
        "messages": [message_to_dict(m) for m in messages],
    }


def encode_request_body(body: dict[str, Any]) -> bytes:
    return json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


@dataclass(frozen=True)
class ChatClient:
    """
    Minimal OpenAI ChatCompletions client via raw HTTP.

    One call = one POST to {base_url}/chat/completions. Whatever JSON comes back
    is returned as-is, including API error bodies (unless raise_on_status=True).
    No retries, no streaming, no internal timeout unless timeout_s is given.
    """

    api_key: SecretStr
    model: Model
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float | None = None
    raise_on_status: bool = False
    transport: Union[httpx.BaseTransport, httpx.AsyncBaseTransport, None] = field(
        default=None, repr=False, compare=False
    )
    run_log: RunLogPaths | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, SecretStr):
            object.__setattr__(self, "api_key", SecretStr(self.api_key))
        if not isinstance(self.model, Model):
            if not isinstance(self.model, str):
                raise TypeError(f"model must be a Model or its wire string, got {type(self.model).__name__}")
            object.__setattr__(self, "model", Model.parse(self.model))

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key.get_secret_value()}",
        }

    def get_chat_completion(self, messages: Sequence[MessageLike]) -> JSONValue:
        body = build_request_body(self.model, messages)
        url = self.endpoint
        logger.debug("POST %s model=%s messages=%d", url, body["model"], len(body["messages"]))
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                req = client.build_request("POST", url, content=encode_request_body(body), headers=self._headers())
                r = client.send(req, stream=True)
                try:
                    r.read()
                except httpx.DecodingError as exc:
                    raise self._undecodable(body, r, exc) from exc
                finally:
                    r.close()
        except httpx.TransportError as exc:
            raise self._transport_failed(body, exc) from exc
        return self._finish(body, r)

    async def aget_chat_completion(self, messages: Sequence[MessageLike]) -> JSONValue:
        body = build_request_body(self.model, messages)
        url = self.endpoint
        logger.debug("POST %s model=%s messages=%d", url, body["model"], len(body["messages"]))
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                req = client.build_request("POST", url, content=encode_request_body(body), headers=self._headers())
                r = await client.send(req, stream=True)
                try:
                    await r.aread()
                except httpx.DecodingError as exc:
                    raise self._undecodable(body, r, exc) from exc
                finally:
                    await r.aclose()
        except httpx.TransportError as exc:
            raise self._transport_failed(body, exc) from exc
        return self._finish(body, r)

    def _transport_failed(self, body: dict[str, Any], exc: httpx.TransportError) -> TransportError:
        err = TransportError(self.endpoint, f"{type(exc).__name__}: {exc}")
        logger.warning("%s", err)
        self._record(body, error=err)
        return err

    def _undecodable(self, body: dict[str, Any], r: httpx.Response, exc: httpx.DecodingError) -> DecodeError:
        # Content-Encoding did not match the bytes; no text body to keep.
        encoding = r.headers.get("content-encoding", "identity")
        err = DecodeError(self.endpoint, r.status_code, "", detail=f"undecodable {encoding} content: {exc}")
        logger.warning("%s", err)
        self._record(body, status_code=r.status_code, error=err)
        return err

    def _finish(self, body: dict[str, Any], r: httpx.Response) -> JSONValue:
        logger.debug("POST %s -> HTTP %d (%d bytes)", self.endpoint, r.status_code, len(r.content))
        try:
            data = r.json()
        except ValueError as exc:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            err: Exception
            if self.raise_on_status and r.is_error:
                err = ApiError(self.endpoint, r.status_code, r.text)
            else:
                err = DecodeError(self.endpoint, r.status_code, r.text)
            logger.warning("%s", err)
            self._record(body, status_code=r.status_code, error=err)
            raise err from exc

        if self.raise_on_status and r.is_error:
            api_err = ApiError(self.endpoint, r.status_code, data)
            self._record(body, status_code=r.status_code, error=api_err)
            raise api_err

        self._record(body, status_code=r.status_code, response=data)
        return data

    def _record(self, body: dict[str, Any], **kwargs: Any) -> None:
        if self.run_log is None:
            return
        try:
            append_exchange(self.run_log, endpoint=self.endpoint, request_body=body, **kwargs)
        except OSError:
            logger.warning("could not append to run log %s", self.run_log.jsonl_path, exc_info=True)
