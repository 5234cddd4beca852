from pathlib import Path

import pytest
from pydantic import SecretStr

from openai_chat.config import Settings
from openai_chat.llm import ChatClient, MockChatClient, Model, build_client


def _settings(**overrides) -> Settings:
    values = dict(
        backend="openai",
        api_key=SecretStr("sk-test"),
        model=Model.GPT_4,
        base_url="https://api.openai.com/v1",
        timeout_s=None,
        log_level="WARNING",
        log_dir=None,
    )
    values.update(overrides)
    return Settings(**values)


def test_openai_backend_builds_chat_client():
    client = build_client(_settings(timeout_s=30.0))
    assert isinstance(client, ChatClient)
    assert client.model is Model.GPT_4
    assert client.api_key.get_secret_value() == "sk-test"
    assert client.timeout_s == 30.0
    assert client.run_log is None


def test_openai_backend_requires_key():
    with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
        build_client(_settings(api_key=None))


def test_log_dir_enables_exchange_log(tmp_path: Path):
    client = build_client(_settings(log_dir=tmp_path / "runs"))
    assert client.run_log is not None
    assert client.run_log.jsonl_path.parent == tmp_path / "runs"
    assert (tmp_path / "runs").is_dir()


def test_mock_backend_needs_no_key():
    client = build_client(_settings(backend="mock", api_key=None, model=Model.GPT_4_32K))
    assert isinstance(client, MockChatClient)
    assert client.model is Model.GPT_4_32K


def test_unknown_backend():
    with pytest.raises(ValueError, match="mock\\|openai"):
        build_client(_settings(backend="anthropic"))


def test_built_clients_share_the_chat_surface():
    for settings in (_settings(), _settings(backend="mock", api_key=None)):
        client = build_client(settings)
        assert client.model is Model.GPT_4
        assert callable(client.get_chat_completion)
        assert callable(client.aget_chat_completion)
