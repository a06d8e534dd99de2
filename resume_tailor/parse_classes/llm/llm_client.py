"""
llm_client.py

LangChain chat-model client used to tailor resumes.
Supports Anthropic (Claude) and a deterministic test mode that never leaves
the process.
"""
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional
import warnings

from dotenv import load_dotenv

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from resume_tailor.config import TAILOR_DEFAULTS
from resume_tailor.exceptions import (
    LLMConfigError,
    LLMError,
    LLMInitializationError,
    LLMQueryError,
    LLMEmptyResponse
)
from resume_tailor.parse_classes.llm.json_coercion import parse_json_response
from resume_tailor.test_helpers import llm_client_test_helpers

load_dotenv()

PLACEHOLDER_API_KEY = "<REPLACE_ME>"

MockResponseType = Literal[
    "success", "fenced", "not_json", "unbalanced", "missing_cover_letter", "empty"
]


@dataclass(frozen=True)
class ProviderSettings:
    """Environment variables and defaults for one LLM provider."""
    api_key_env: str
    model_env: str
    default_model: str


PROVIDER_SETTINGS: Dict[str, ProviderSettings] = {
    "anthropic": ProviderSettings(
        api_key_env="ANTHROPIC_API_KEY",
        model_env="ANTHROPIC_MODEL",
        default_model=TAILOR_DEFAULTS.ANTHROPIC_MODEL_ID,
    ),
}
SUPPORTED_PROVIDERS = list(PROVIDER_SETTINGS)


class LLMClient:
    """
    Thin wrapper around a LangChain chat model. Call ``initialize_client()``
    before ``query()``.

    Configuration is resolved when the client is constructed:
        - provider: argument, else ``TAILOR_DEFAULTS.LLM_PROVIDER``;
        - model: argument, else the provider's model env var (``ANTHROPIC_MODEL``),
          else ``TAILOR_DEFAULTS``;
        - API key: the provider's key env var (``ANTHROPIC_API_KEY``, .env is loaded).
          Not required in test mode.

    In test mode ``query()`` answers with canned ``AIMessage`` objects from
    ``llm_client_test_helpers``, selected by ``function_name`` and
    ``test_response_type``.

    Attributes:
        provider (str): LLM provider name.
        model (str): Model identifier.
        api_key (Optional[str]): Provider API key (None in test mode without a key).
        function_name (Optional[str]): Feature invoking the LLM; picks the canned
            response set in test mode.
        fallback_message (Optional[str]): Returned instead of raising when the
            model answers with empty content.
        test_mode (bool): Answer with canned responses instead of calling the API.
        test_response_type (str): Which canned response to use.
        client (Any): LangChain chat model, set by ``initialize_client()``.

    Raises:
        LLMConfigError: Unsupported provider, no model, or missing API key.

    Example:
        >>> client = LLMClient(model="claude-haiku-4-5")
        >>> client.initialize_client()
        >>> raw_text = client.query(
        ...     system_prompt="You write ATS-optimized resumes.",
        ...     user_prompt="JOB DESCRIPTION: ...",
        ... )
    """

    def __init__(
        self,
        provider: Optional[str] = TAILOR_DEFAULTS.LLM_PROVIDER,
        model: Optional[str] = None,
        function_name: Optional[str] = None,
        fallback_message: Optional[str] = None,
        test_mode: Optional[bool] = False,
        test_response_type: MockResponseType = "success",
    ):
        self.function_name = function_name
        self.fallback_message = fallback_message
        self.test_mode = test_mode
        self.test_response_type = test_response_type

        self.provider = provider
        settings = self._provider_settings()
        self.model = self._resolve_model(model, settings)
        self.api_key = self._resolve_api_key(settings)

        self.client = None

    # --- Configuration ---
    def _provider_settings(self) -> ProviderSettings:
        settings = PROVIDER_SETTINGS.get(self.provider)
        if settings is None:
            raise LLMConfigError(
                variable_name="LLM_PROVIDER",
                extra_info=f"Choices are: {SUPPORTED_PROVIDERS}"
            )
        return settings

    def _resolve_model(self, model: Optional[str], settings: ProviderSettings) -> str:
        resolved = model or os.getenv(settings.model_env) or settings.default_model
        if not resolved:
            raise LLMConfigError(
                variable_name=settings.model_env,
                message=f"No model configured for `{self.provider}`. Pass `model` or set {settings.model_env}."
            )
        return resolved

    def _resolve_api_key(self, settings: ProviderSettings) -> Optional[str]:
        """Read the API key from the environment. The key itself is not validated."""
        api_key = os.getenv(settings.api_key_env)
        if api_key and api_key != PLACEHOLDER_API_KEY:
            return api_key
        if self.test_mode:
            return None
        raise LLMConfigError(
            variable_name=settings.api_key_env,
            message=f"Set {settings.api_key_env} in your environment (or .env) to tailor resumes."
        )

    def initialize_client(self) -> None:
        """
        Create the LangChain chat model. Makes no API call.

        Raises:
            LLMInitializationError: If the chat model cannot be constructed.
        """
        try:
            if self.provider == "anthropic":
                from langchain_anthropic import ChatAnthropic
                self.client = ChatAnthropic(
                    model=self.model,
                    # Test mode never reaches the API, so any non-empty key will do
                    anthropic_api_key=self.api_key or "test-mode-no-key",
                    temperature=TAILOR_DEFAULTS.LLM_TEMPERATURE
                )
            else:
                raise LLMConfigError(
                    variable_name="LLM_PROVIDER",
                    extra_info=f"Unsupported provider: {self.provider}"
                )
        except Exception as e:
            raise LLMInitializationError(
                provider=self.provider,
                model=self.model,
                original_exception=e
            )

    # --- Querying ---
    def query(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        temperature: float = TAILOR_DEFAULTS.LLM_TEMPERATURE,
        expect_json: bool = False,
    ) -> str | Any:
        """
        Send one system + user prompt pair to the model.

        Args:
            system_prompt (Optional[str]): Instruction message, skipped when empty.
            user_prompt (str): Main prompt.
            temperature (float): Sampling temperature.
            expect_json (bool): Try to parse the answer as JSON. On failure a
                ``UserWarning`` is emitted and the raw text is returned.

        Returns:
            str | Any: Response text, or parsed JSON when ``expect_json`` succeeds.

        Raises:
            LLMInitializationError: If ``initialize_client()`` was not run.
            LLMQueryError: If the provider call fails or test mode is misconfigured.
            LLMEmptyResponse: If the answer is empty and there is no fallback message.
        """
        if not self.client:
            raise LLMInitializationError(provider=self.provider, model=self.model)

        messages = self._build_messages(system_prompt, user_prompt)
        try:
            response = self._invoke(messages, temperature)
        except LLMError:
            raise
        except Exception as e:
            raise LLMQueryError(provider=self.provider, model=self.model, original_exception=e)

        response_content = self._get_response_text(response)
        if not response_content:
            if self.fallback_message:
                return self.fallback_message
            raise LLMEmptyResponse(provider=self.provider, model=self.model)

        if expect_json:
            try:
                return parse_json_response(response_content)
            except json.JSONDecodeError as e:
                warnings.warn(
                    (
                        f"Expected JSON from `{self.provider}` model `{self.model}` "
                        f"(function `{self.function_name}`) but could not parse it: {e}. "
                        "Returning the raw response text."
                    ),
                    category=UserWarning,
                )

        return response_content

    @staticmethod
    def _build_messages(system_prompt: Optional[str], user_prompt: str) -> List[BaseMessage]:
        messages: List[BaseMessage] = []
        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))
        messages.append(HumanMessage(content=user_prompt))
        return messages

    def _invoke(self, messages: List[BaseMessage], temperature: float) -> AIMessage:
        if not self.test_mode:
            return self.client.invoke(messages, temperature=temperature)

        if not (self.function_name and self.test_response_type):
            raise LLMQueryError(
                provider=self.provider,
                model=self.model,
                additional_message=(
                    "test_mode needs both function_name and test_response_type "
                    f"(got function_name={self.function_name!r}, "
                    f"test_response_type={self.test_response_type!r})"
                ),
            )
        return llm_client_test_helpers.create_mock_llm_response(
            function_name=self.function_name,
            response_type=self.test_response_type,
            provider=self.provider
        )

    @staticmethod
    def _get_response_text(response: Optional[AIMessage]) -> str:
        """
        Pull the text out of an AIMessage. Anthropic may return a list of content
        blocks instead of a plain string.
        """
        if response is None:
            return ""
        content = getattr(response, "content", "")
        if isinstance(content, list):
            content = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block)
                for block in content
            )
        return (content or "").strip()

    # --- Connectivity ---
    def test_connection(self) -> bool:
        """
        Ping the provider with a one-word prompt. This does cost a (tiny) API call.

        Returns:
            bool: True when the provider answered.

        Raises:
            LLMInitializationError: On bad credentials, exhausted quota or rate limits.
        """
        if not self.client:
            self.initialize_client()
        return self._test_connection_generic(self.provider.capitalize())

    def _test_connection_generic(self, provider_name: str) -> bool:
        if not self.client:
            raise LLMInitializationError(
                provider=provider_name,
                model=self.model,
                additional_message="No client initialized"
            )
        try:
            response = self.client.invoke("ping")
        except Exception as e:
            error_text = str(e).lower()
            hints = []
            if "insufficient_quota" in error_text:
                hints.append(f"Out of tokens for `{provider_name}`")
            if "rate limit" in error_text:
                hints.append(f"Rate limit reached for `{provider_name}`")
            raise LLMInitializationError(
                provider=provider_name,
                model=self.model,
                original_exception=e,
                additional_message="; ".join(hints) or None
            )
        return bool(response is not None and hasattr(response, "content"))
