"""history_store.py
Bounded local history of completed tailor runs, persisted as a JSON file.
"""
import json
import math
import os
import re
import secrets
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from resume_tailor.config import TAILOR_DEFAULTS
from resume_tailor.exceptions import HistoryStorageError
from resume_tailor.logging import LoggerFactory
from resume_tailor.models import TailorResult

logger = LoggerFactory().get_logger(name="history_store", logger_type="default", console=False)

DEFAULT_LABEL = "Tailor Run"
FILES_DROPPED_NOTICE = (
    "Saved to history without PDF/DOCX files (storage limit). "
    "Re-run Tailor to regenerate files."
)
NOT_SAVED_NOTICE = "Could not save to history (storage limit)."

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class HistorySaveOutcome:
    """
    Result of ``HistoryStore.add``.

    Attributes:
        saved (bool): Whether the entry was written.
        has_files (bool): Whether binary documents were kept.
        entry_id (str | None): Id of the stored entry.
        notice (str | None): User-facing message when the save was degraded.
    """
    saved: bool
    has_files: bool = False
    entry_id: Optional[str] = None
    notice: Optional[str] = None


@dataclass
class HistoryEntry:
    id: str
    created_at: int
    label: str
    job_preview: str
    result: Dict[str, Any] = field(default_factory=dict)
    has_files: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "created_at": self.created_at,
            "label": self.label,
            "job_preview": self.job_preview,
            "result": self.result,
            "has_files": self.has_files,
        }


def make_label(job_text: str, max_chars: int = TAILOR_DEFAULTS.HISTORY_LABEL_CHARS) -> str:
    """Whitespace-collapsed job text cut to ``max_chars`` (with "…" when cut)."""
    one_line = _WHITESPACE_RE.sub(" ", job_text or "").strip()
    if not one_line:
        return DEFAULT_LABEL
    return one_line[:max_chars] + ("…" if len(one_line) > max_chars else "")


def make_entry_id() -> str:
    return f"{int(time.time() * 1000)}_{secrets.token_hex(6)}"


class HistoryStore:
    """
    Keeps the last ``max_entries`` tailor results in a JSON file.

    When the serialized history would exceed ``max_bytes``, the new entry is
    stored without its binary documents instead; if even that does not fit,
    nothing is written. Both cases are reported through
    ``HistorySaveOutcome.notice``.

    Example
    -------
    >>> store = HistoryStore("history.json")
    >>> outcome = store.add(result, job_text)
    >>> [entry.label for entry in store.load()]
    """

    def __init__(
        self,
        path: str,
        max_entries: int = TAILOR_DEFAULTS.HISTORY_MAX_ENTRIES,
        max_bytes: int = TAILOR_DEFAULTS.HISTORY_MAX_BYTES,
    ):
        self.path = path
        self.max_entries = max_entries
        self.max_bytes = max_bytes

    def load(self) -> List[HistoryEntry]:
        """
        Read history, newest first. Never raises: a missing, unreadable or
        corrupt file yields ``[]`` and malformed entries are skipped.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw_entries = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable history file '{self.path}': {e}")
            return []

        if not isinstance(raw_entries, list):
            return []

        entries = []
        for raw in raw_entries:
            if not isinstance(raw, dict):
                continue
            entry_id = raw.get("id")
            created_at = raw.get("created_at")
            if not isinstance(entry_id, str):
                continue
            if isinstance(created_at, bool) or not isinstance(created_at, (int, float)):
                continue
            if isinstance(created_at, float) and not math.isfinite(created_at):
                continue
            entries.append(HistoryEntry(
                id=entry_id,
                created_at=int(created_at),
                label=str(raw.get("label") or DEFAULT_LABEL),
                job_preview=str(raw.get("job_preview") or ""),
                result=raw.get("result") if isinstance(raw.get("result"), dict) else {},
                has_files=bool(raw.get("has_files", False)),
            ))

        entries.sort(key=lambda e: e.created_at, reverse=True)
        return entries[:self.max_entries]

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        return next((e for e in self.load() if e.id == entry_id), None)

    def add(self, result: TailorResult, job_text: str) -> HistorySaveOutcome:
        """
        Record a completed tailor run.

        Args:
            result (TailorResult): The result to store.
            job_text (str): Job description used for the run (label and preview).

        Returns:
            HistorySaveOutcome: What was stored, with a notice when degraded.
        """
        existing = self.load()
        entry = HistoryEntry(
            id=make_entry_id(),
            created_at=int(time.time() * 1000),
            label=make_label(job_text),
            job_preview=(job_text or "")[:TAILOR_DEFAULTS.HISTORY_PREVIEW_CHARS],
            result=result.to_dict(),
            has_files=True,
        )

        try:
            self._save([entry, *existing])
            return HistorySaveOutcome(saved=True, has_files=True, entry_id=entry.id)
        except HistoryStorageError as e:
            logger.info(f"History entry too large ({e.required_bytes} bytes), retrying without files.")

        entry.result = result.strip_documents().to_dict()
        entry.has_files = False
        try:
            self._save([entry, *existing])
            return HistorySaveOutcome(
                saved=True, has_files=False, entry_id=entry.id, notice=FILES_DROPPED_NOTICE
            )
        except HistoryStorageError:
            return HistorySaveOutcome(saved=False, notice=NOT_SAVED_NOTICE)

    def delete(self, entry_id: str) -> bool:
        """Remove one entry. Returns False when no entry had that id."""
        entries = self.load()
        remaining = [e for e in entries if e.id != entry_id]
        if len(remaining) == len(entries):
            return False
        self._save(remaining)
        return True

    def clear(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)

    def _save(self, entries: List[HistoryEntry]) -> None:
        """
        Write the newest ``max_entries`` entries.

        Raises:
            HistoryStorageError: If the serialized history exceeds ``max_bytes``.
        """
        payload = json.dumps(
            [e.to_dict() for e in entries[:self.max_entries]], ensure_ascii=False
        ).encode("utf-8")
        if len(payload) > self.max_bytes:
            raise HistoryStorageError(max_bytes=self.max_bytes, required_bytes=len(payload))

        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        with open(self.path, "wb") as f:
            f.write(payload)
