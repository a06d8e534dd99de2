"""llm_helpers.py
Functions to help with initiating a LLMClient class
"""

from typing import Optional

from resume_tailor.parse_classes.llm.llm_client import LLMClient

def initialize_llm_if_needed(
    llm_client: Optional[LLMClient] = None,
) -> LLMClient:
    """
    Return a ready-to-use LLMClient.

    Logic flow:
        1. If an existing `llm_client` is provided validates that it is an instance of
           `LLMClient` and returns it (initializing it if that was not done yet).
        2. Otherwise creates a new `LLMClient` from TAILOR_DEFAULTS / .env and
           initializes it.

    No API call is made, so this never incurs costs.

    Args:
        llm_client (Optional[LLMClient]): Existing LLM client instance to use or validate.

    Returns:
        LLMClient: An initialized client.

    Raises:
        TypeError: If `llm_client` is provided but not an instance of `LLMClient`.
        LLMConfigError: If a new client is needed but its configuration is missing.
        LLMInitializationError: If the LangChain client cannot be created.
    """
    if llm_client is not None:
        if not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
        if llm_client.client is None:
            llm_client.initialize_client()
        return llm_client

    llm_client = LLMClient()
    llm_client.initialize_client()

    return llm_client
