"""config.py
Holds various defaults for different resume tailor settings.
"""

from dataclasses import dataclass, field

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class TailorDefaults:
    """
    Default settings for parameters used across the resume_tailor repo.
    """
    # ---- FileParser settings ----
    MAX_FILE_SIZE_MB: float = field(
        default = 5.0,
        metadata = {
            "description": "Maximum allowed upload size in MB"
    })

    # ---- Input validation settings ----
    MAX_INPUT_CHARS: int = field(
        default = 35_000,
        metadata = {
            "description": "Maximum characters kept from any free-text input or output"
    })
    MIN_JOB_TEXT_CHARS: int = field(
        default = 50,
        metadata = {
            "description": "Minimum trimmed length of a job description"
    })
    MIN_RESUME_TEXT_CHARS: int = field(
        default = 50,
        metadata = {
            "description": "Minimum trimmed length of the extracted or pasted resume text"
    })
    MIN_COVER_LETTER_CHARS: int = field(
        default = 10,
        metadata = {
            "description": "Minimum trimmed length of a cover letter sent for regeneration"
    })

    # ---- Keyword matching settings ----
    MAX_KEYWORDS: int = field(
        default = 35,
        metadata = {
            "description": "Maximum number of job keywords kept in the keyword index"
    })

    # ---- LLM output settings ----
    RAW_RESPONSE_SNIPPET_CHARS: int = field(
        default = 4_000,
        metadata = {
            "description": "Characters of raw model output surfaced when it cannot be parsed"
    })

    # ---- Render settings ----
    MAX_RENDER_THREADS: int = field(
        default = 2,
        metadata = {
            "description": "Maximum number of threads used to render PDF/DOCX documents"
    })

    # ---- LLMClient settings ----
    LLM_PROVIDER: str = field(
        default = "anthropic",
        metadata = {
            "description": 'LLM provider: "anthropic"'
    })
    ANTHROPIC_MODEL_ID: str = field(
        default = "claude-haiku-4-5",
        metadata = {
            "description": "Anthropic model ID"
    })
    LLM_TEMPERATURE: float = field(
        default = 0.25,
        metadata = {
            "description": "Sampling temperature used when tailoring"
    })

    # ---- HistoryStore settings ----
    HISTORY_MAX_ENTRIES: int = field(
        default = 5,
        metadata = {
            "description": "Number of completed tailor runs kept in local history"
    })
    HISTORY_MAX_BYTES: int = field(
        default = 5 * 1024 * 1024,
        metadata = {
            "description": "Storage capacity of the local history file in bytes"
    })
    HISTORY_LABEL_CHARS: int = field(
        default = 60,
        metadata = {
            "description": "Length of the history label derived from the job text"
    })
    HISTORY_PREVIEW_CHARS: int = field(
        default = 240,
        metadata = {
            "description": "Length of the job text preview stored with a history entry"
    })


# Import this where needed
TAILOR_DEFAULTS = TailorDefaults()
