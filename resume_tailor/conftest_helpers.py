"""conftest_helpers.py
Helper functions for `tests/conftest.py`
"""

from resume_tailor.parse_classes.llm.llm_client import LLMClient


# --------------------------------------------------------------
# SETUP MONKEYPATCH FIXTURES
# --------------------------------------------------------------
def apply_mock_llm_patch(monkeypatch, response_type: str = "success"):
    """
    Core patching logic for LLMClient.

    Forces every LLMClient created while the patch is active to return canned
    responses instead of calling the provider:
      - `test_mode=True`
      - `function_name="tailor_resume"`
      - `test_response_type=response_type` (default "success")

    Explicit keyword arguments still win, so a test can request e.g.
    `LLMClient(test_response_type="not_json")`.

    Notes:
      - Intended to be called from a fixture to control scope.
      - Does not yield; directly applies the monkeypatch.
    """
    original_init = LLMClient.__init__

    def patched_init(self, *args, **kwargs):
        kwargs.setdefault("test_mode", True)
        kwargs.setdefault("function_name", "tailor_resume")
        kwargs.setdefault("test_response_type", response_type)
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(LLMClient, "__init__", patched_init)
