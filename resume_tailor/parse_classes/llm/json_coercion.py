"""json_coercion.py
Recovers the JSON object an LLM was asked to return from its raw text output.

Model output regularly arrives wrapped in markdown code fences, surrounded by
commentary, or truncated. Recovery order:
    1. parse the raw output directly;
    2. strip code fences, locate the first balanced ``{...}`` object with a
       character-scan state machine and parse that.
"""
import json
import re
from typing import Any, Optional

from resume_tailor.config import TAILOR_DEFAULTS
from resume_tailor.exceptions import UnparseableAIResponseError
from resume_tailor.models import TailorResponse

CODE_FENCE_OPEN_RE = re.compile(r"```json\s*", re.IGNORECASE)
CODE_FENCE_RE = re.compile(r"```")

# Scanner states
_OUTSIDE_STRING = "outside_string"
_IN_STRING = "in_string"
_ESCAPE = "escape"


def strip_code_fences(text: Optional[str]) -> str:
    """Remove ```json / ``` markers anywhere in the text and trim it."""
    text = CODE_FENCE_OPEN_RE.sub("", text or "")
    return CODE_FENCE_RE.sub("", text).strip()


def extract_first_json_object(text: Optional[str]) -> Optional[str]:
    """
    Return the first balanced ``{...}`` object in ``text``.

    Scans from the first ``{`` tracking brace depth. Braces inside JSON
    strings (including escaped quotes) do not count towards the depth.

    Args:
        text (str | None): Raw model output.

    Returns:
        Optional[str]: The object text from the first ``{`` to its matching
        ``}``, or None when there is no ``{`` or the braces never balance.
    """
    cleaned = strip_code_fences(text)
    start = cleaned.find("{")
    if start == -1:
        return None

    depth = 0
    state = _OUTSIDE_STRING
    for index in range(start, len(cleaned)):
        char = cleaned[index]

        if state == _ESCAPE:
            state = _IN_STRING
        elif state == _IN_STRING:
            if char == "\\":
                state = _ESCAPE
            elif char == '"':
                state = _OUTSIDE_STRING
        elif char == '"':
            state = _IN_STRING
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return cleaned[start:index + 1]

    return None


def parse_json_response(response_text: str) -> Any:
    """
    Parse JSON out of an LLM response.

    Tries ``json.loads`` on the raw text first and falls back to parsing the
    first balanced object found by ``extract_first_json_object``.

    Raises:
        json.JSONDecodeError: If no valid JSON structure can be extracted.
    """
    try:
        return json.loads(response_text)
    except (json.JSONDecodeError, TypeError):
        pass

    extracted = extract_first_json_object(response_text)
    if extracted is None:
        raise json.JSONDecodeError("No balanced JSON object found", response_text or "", 0)
    return json.loads(extracted)


def _is_missing(value: Any) -> bool:
    """None, empty strings, False and 0 count as missing; objects (even empty) do not."""
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value
    return False


def coerce_tailor_response(
    raw_response: Optional[str],
    snippet_chars: int = TAILOR_DEFAULTS.RAW_RESPONSE_SNIPPET_CHARS,
) -> TailorResponse:
    """
    Coerce raw model output into ``{"resume": ..., "cover_letter": ...}``.

    Args:
        raw_response (str | None): Raw model text.
        snippet_chars (int): How much of the raw text to keep on failure.

    Returns:
        TailorResponse: The un-normalized resume object and cover letter.

    Raises:
        UnparseableAIResponseError: If no JSON object can be recovered or it
            lacks a ``resume`` or a ``cover_letter``. Carries the truncated raw text.
    """
    raw_response = raw_response or ""
    snippet = raw_response[:snippet_chars]

    try:
        parsed = parse_json_response(raw_response)
    except json.JSONDecodeError:
        raise UnparseableAIResponseError(raw_response=snippet)

    if not isinstance(parsed, dict):
        raise UnparseableAIResponseError(
            raw_response=snippet,
            reason="AI response could not be parsed: expected a JSON object.",
        )

    if _is_missing(parsed.get("resume")) or _is_missing(parsed.get("cover_letter")):
        raise UnparseableAIResponseError(
            raw_response=snippet,
            reason="AI response could not be parsed: `resume` or `cover_letter` is missing.",
        )

    return TailorResponse(resume=parsed["resume"], cover_letter=parsed["cover_letter"])
