"""coerce.py
Per-field coercion rules used by the resume normalizer.

Every function here is total: it accepts any value and returns a value of the
target type without raising.
"""
import json
import math
from typing import Any, List, Mapping, Optional


def get_field(obj: Any, key: str) -> Any:
    """Return ``obj[key]`` when ``obj`` is a mapping, otherwise None."""
    if isinstance(obj, Mapping):
        return obj.get(key)
    return None


def to_text(value: Any) -> str:
    """
    Coerce any value to its string representation.

    - None -> ""
    - bool -> "true" / "false"
    - integral floats drop their ".0" (5.0 -> "5")
    - lists / dicts are JSON encoded
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple, dict)):
        try:
            return json.dumps(value, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def to_trimmed_text(value: Any) -> str:
    """Coerce to string and trim surrounding whitespace."""
    return to_text(value).strip()


def to_optional_text(value: Any) -> Optional[str]:
    """Coerce and trim; an empty result is treated as absent (None)."""
    text = to_trimmed_text(value)
    return text or None


def to_text_list(value: Any) -> List[str]:
    """
    Coerce a list field: non-lists become ``[]``, elements are coerced to
    strings and empty strings are dropped. Elements are not trimmed.
    """
    if not isinstance(value, (list, tuple)):
        return []
    return [text for text in (to_text(item) for item in value) if text]
