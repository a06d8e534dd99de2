"""test_llm_client.py
Test LLMClient class.
"""
import pytest
from unittest.mock import MagicMock, patch

from langchain_core.messages import AIMessage

from resume_tailor.parse_classes.llm.llm_client import LLMClient
from resume_tailor.exceptions import (
    LLMConfigError,
    LLMInitializationError,
    LLMQueryError,
    LLMEmptyResponse
)
from resume_tailor.config import TAILOR_DEFAULTS

# -----------------------------
# Fake API key (no live calls are made in this file)
# -----------------------------
@pytest.fixture
def fake_api_key(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test-key")
    return "sk-test-key"


def make_test_client(response_type="success", **kwargs):
    """LLMClient in test mode with a dummy LangChain client already attached."""
    client = LLMClient(
        provider="anthropic",
        model="test-model",
        test_mode=True,
        function_name="tailor_resume",
        test_response_type=response_type,
        **kwargs,
    )
    client.client = MagicMock()
    return client

# -----------------------------
# Initialization tests
# -----------------------------
def test_invalid_provider_raises():
    """Ensure initializing LLMClient with unsupported provider raises LLMConfigError."""
    with pytest.raises(LLMConfigError):
        LLMClient(provider="unsupported")


def test_model_resolution_defaults(fake_api_key, monkeypatch):
    """Check that model defaults to TAILOR_DEFAULTS if not provided."""
    monkeypatch.delenv("ANTHROPIC_MODEL", raising=False)
    client = LLMClient(provider="anthropic", model=None)
    assert client.model == TAILOR_DEFAULTS.ANTHROPIC_MODEL_ID


def test_model_resolution_from_env(fake_api_key, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-env-model")
    client = LLMClient(provider="anthropic")
    assert client.model == "claude-env-model"


def test_missing_api_key_raises(monkeypatch):
    """Check that missing API key raises LLMConfigError."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(LLMConfigError):
        LLMClient(provider="anthropic")


def test_placeholder_api_key_raises(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "<REPLACE_ME>")
    with pytest.raises(LLMConfigError):
        LLMClient(provider="anthropic")


def test_test_mode_does_not_need_api_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    client = LLMClient(provider="anthropic", test_mode=True, function_name="tailor_resume")
    assert client.api_key is None


# -----------------------------
# Client initialization
# -----------------------------
@patch("langchain_anthropic.ChatAnthropic")
def test_initialize_client_anthropic(mock_chatanthropic, fake_api_key):
    """Verify Anthropic client initializes correctly with API key and model."""
    client = LLMClient(provider="anthropic", model="test-model")
    client.initialize_client()
    mock_chatanthropic.assert_called_once()
    assert mock_chatanthropic.call_args.kwargs["model"] == "test-model"
    assert mock_chatanthropic.call_args.kwargs["anthropic_api_key"] == fake_api_key
    assert client.client is not None


@patch("langchain_anthropic.ChatAnthropic", side_effect=ValueError("bad config"))
def test_initialize_client_failure_wrapped(mock_chatanthropic, fake_api_key):
    client = LLMClient(provider="anthropic", model="test-model")
    with pytest.raises(LLMInitializationError) as e:
        client.initialize_client()
    assert "bad config" in str(e.value)


# -----------------------------
# Query tests
# -----------------------------
def test_query_without_client_raises(fake_api_key):
    """Query without initializing client should raise LLMInitializationError."""
    client = LLMClient(provider="anthropic", model="test-model")
    with pytest.raises(LLMInitializationError):
        client.query(system_prompt="Hi", user_prompt="Hello")


def test_query_live_path_uses_client(fake_api_key):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.return_value = AIMessage(content="  tailored  ")

    result = client.query(system_prompt="sys", user_prompt="user", temperature=0.1)

    assert result == "tailored"
    messages = client.client.invoke.call_args.args[0]
    assert [m.content for m in messages] == ["sys", "user"]
    assert client.client.invoke.call_args.kwargs["temperature"] == 0.1


def test_query_without_system_prompt_sends_only_user_message(fake_api_key):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.return_value = AIMessage(content="ok")

    client.query(system_prompt=None, user_prompt="user")

    messages = client.client.invoke.call_args.args[0]
    assert len(messages) == 1


def test_query_provider_failure_wrapped(fake_api_key):
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = MagicMock()
    client.client.invoke.side_effect = RuntimeError("overloaded")
    with pytest.raises(LLMQueryError) as e:
        client.query(system_prompt="sys", user_prompt="user")
    assert "overloaded" in str(e.value)


def test_query_test_mode_returns_mock():
    """Verify test_mode returns deterministic mock response using create_mock_llm_response."""
    result = make_test_client().query(system_prompt="sys", user_prompt="user")
    assert isinstance(result, str)
    assert "John Doe" in result


def test_query_test_mode_expect_json_parses_fenced_output():
    result = make_test_client("fenced").query(
        system_prompt="sys", user_prompt="user", expect_json=True
    )
    assert isinstance(result, dict)
    assert result["resume"]["header"]["name"] == "John Doe"


def test_query_expect_json_warns_and_returns_text():
    client = make_test_client("not_json")
    with pytest.warns(UserWarning):
        result = client.query(system_prompt="sys", user_prompt="user", expect_json=True)
    assert result == "I'm sorry, I can't tailor this resume."


def test_query_test_mode_without_function_name_raises(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    client = LLMClient(provider="anthropic", model="test-model", test_mode=True)
    client.client = MagicMock()
    with pytest.raises(LLMQueryError):
        client.query(system_prompt="sys", user_prompt="user")


def test_query_fallback_message():
    """Test that fallback_message is returned if LLM response is empty."""
    client = make_test_client("empty", fallback_message="fallback")
    assert client.query(system_prompt="sys", user_prompt="user") == "fallback"


def test_query_empty_response_raises():
    with pytest.raises(LLMEmptyResponse):
        make_test_client("empty").query(system_prompt="sys", user_prompt="user")


# -----------------------------
# _get_response_text tests
# -----------------------------
@pytest.mark.parametrize("content,expected", [
    ("plain text", "plain text"),
    ([{"type": "text", "text": "Hello "}, {"type": "text", "text": "world"}], "Hello world"),
    ("", ""),
])
def test_get_response_text(content, expected):
    assert LLMClient._get_response_text(AIMessage(content=content)) == expected


def test_get_response_text_none():
    assert LLMClient._get_response_text(None) == ""


# -----------------------------
# Connection tests
# -----------------------------
def test_test_connection_without_client(fake_api_key):
    """Calling _test_connection_generic without client raises LLMInitializationError."""
    client = LLMClient(provider="anthropic", model="test-model")
    client.client = None
    with pytest.raises(LLMInitializationError):
        client._test_connection_generic("Anthropic")


def test_test_connection_success(fake_api_key):
    """Verify _test_connection_generic returns True for successful mock client ping."""
    client = LLMClient(provider="anthropic", model="test-model")
    mock_client = MagicMock()
    mock_client.invoke.return_value = MagicMock(content="pong")
    client.client = mock_client
    assert client._test_connection_generic("Anthropic") is True


def test_test_connection_failure_quota(fake_api_key):
    """Verify LLMInitializationError raised if client ping fails with quota error."""
    client = LLMClient(provider="anthropic", model="test-model")
    mock_client = MagicMock()
    mock_client.invoke.side_effect = Exception("insufficient_quota")
    client.client = mock_client
    with pytest.raises(LLMInitializationError) as e:
        client._test_connection_generic("Anthropic")
    assert "Out of tokens" in str(e.value)


def test_test_connection_failure_rate_limit(fake_api_key):
    """Verify LLMInitializationError raised if client ping fails due to rate limit."""
    client = LLMClient(provider="anthropic", model="test-model")
    mock_client = MagicMock()
    mock_client.invoke.side_effect = Exception("Rate limit reached")
    client.client = mock_client
    with pytest.raises(LLMInitializationError) as e:
        client._test_connection_generic("Anthropic")
    assert "Rate limit" in str(e.value)
