"""resume_tailor_framework.py
Holds framework to orchestrate FileParser, LLMClient, ResumeNormalizer, the ATS
formatter and the document renderers, returning a TailorResult.
"""
import sys
from typing import Any, Mapping, Optional, Union

from resume_tailor.config import TAILOR_DEFAULTS
from resume_tailor.exceptions import FileParserError, InputValidationError, UnparseableAIResponseError
from resume_tailor.logging import LoggerFactory
from resume_tailor.models import MatchResult, Resume, TailorResult

from resume_tailor.parse_classes.file_parser.helpers.check_file_extension import check_file_extension
from resume_tailor.parse_classes.file_parser.file_parser import FileParser
from resume_tailor.parse_classes.file_parser.pdf_parser import PDFParser
from resume_tailor.parse_classes.file_parser.word_document_parser import WordDocumentParser

from resume_tailor.parse_classes.llm.llm_client import LLMClient
from resume_tailor.parse_classes.llm.llm_helpers import initialize_llm_if_needed
from resume_tailor.parse_classes.llm.json_coercion import coerce_tailor_response
from resume_tailor.parse_classes.llm.prompts import TAILOR_SYSTEM_PROMPT, build_tailor_prompt
from resume_tailor.parse_classes.resume_normalizer.resume_normalizer import normalize_resume
from resume_tailor.parse_classes.resume_normalizer.helpers.coerce import get_field, to_text

from resume_tailor.ats_classes.ats_formatter import format_resume_ats
from resume_tailor.ats_classes.keyword_matcher import analyze_ats
from resume_tailor.render_classes.document_bundle import render_document_bundle

logger_factory = LoggerFactory()
tailor_logger = logger_factory.get_logger(name="tailor_runs", logger_type="tailor")


def clamp_text(value: Any, max_chars: int = TAILOR_DEFAULTS.MAX_INPUT_CHARS) -> str:
    """Coerce to text, drop NUL characters, trim and cut to ``max_chars``."""
    return to_text(value).replace("\x00", "").strip()[:max_chars]


def require_min_length(field_name: str, text: str, min_length: int, label: str) -> None:
    if len(text) < min_length:
        raise InputValidationError(
            field_name=field_name,
            message=f"{label} is too short (minimum {min_length} characters).",
            min_length=min_length,
            actual_length=len(text),
        )


class ResumeTailorFramework:
    """
    Orchestrates the complete tailoring process, from raw resume + job text to
    a normalized resume, ATS text, cover letter and rendered documents.

    Pipeline (``tailor``):
        clamp inputs → extract resume text (upload wins over pasted text) →
        LLM call → JSON coercion → normalization → ATS text → document bundle.

    ``regenerate`` runs only the last three steps on an edited resume and never
    calls the LLM. The LLM client is created lazily, on the first ``tailor``.

    Parameters
    ----------
    llm_client : LLMClient, optional
        A pre-initialized client. When omitted, one is built from
        ``TAILOR_DEFAULTS`` and the environment on first use.
    max_file_size_mb : float, optional
        Maximum accepted upload size. Defaults to ``TAILOR_DEFAULTS.MAX_FILE_SIZE_MB``.
    max_render_threads : int, optional
        Threads used to render the four documents.

    Example
    -------
    >>> framework = ResumeTailorFramework()
    >>> result = framework.tailor(job_text, resume_file_bytes=data, resume_file_name="cv.pdf")
    >>> result.tailored_resume
    """

    FILETYPE_PARSER_MAP = {
        ".pdf": PDFParser,
        ".docx": WordDocumentParser,
    }

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        max_file_size_mb: float = TAILOR_DEFAULTS.MAX_FILE_SIZE_MB,
        max_render_threads: int = TAILOR_DEFAULTS.MAX_RENDER_THREADS,
    ):
        if llm_client is not None and not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
        self.llm_client = llm_client
        self.max_file_size_mb = max_file_size_mb
        self.max_render_threads = max_render_threads

    # ------------------------------------------------------------------
    # Text extraction
    # ------------------------------------------------------------------
    def extract_resume_text(self, file_bytes: bytes, file_name: str) -> str:
        """
        Extract plain text from an uploaded resume.

        Pages are joined with newlines in page order; fragments within a page
        are joined with single spaces.

        Raises:
            FileNotSupportedError: Unsupported extension.
            FileTooLargeError: Upload exceeds ``max_file_size_mb``.
            FileOpenError: Corrupt or encrypted document.
            FileEmptyError: No text could be extracted.
            ExtractionEngineUnavailableError: Parsing library missing.
        """
        return self._build_parser(file_bytes, file_name).extract_text()

    def _build_parser(self, file_bytes: bytes, file_name: str) -> FileParser:
        """Select and initialize the FileParser subclass matching the file extension."""
        ext = check_file_extension(
            file_name=file_name,
            supported_extensions=self.FILETYPE_PARSER_MAP.keys()
        )
        parser_class = self.FILETYPE_PARSER_MAP[ext]
        return parser_class(
            file_bytes=file_bytes,
            file_name=file_name,
            max_file_size_mb=self.max_file_size_mb,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def tailor(
        self,
        job_text: str,
        resume_file_bytes: Optional[bytes] = None,
        resume_file_name: Optional[str] = None,
        resume_text: str = "",
    ) -> TailorResult:
        """
        Tailor a resume to a job description.

        Args:
            job_text (str): Job description (at least ``MIN_JOB_TEXT_CHARS`` after trimming).
            resume_file_bytes (bytes | None): Uploaded .pdf/.docx content. Takes
                precedence over ``resume_text`` when non-empty.
            resume_file_name (str | None): Uploaded file name (used for the extension).
            resume_text (str): Pasted resume text fallback.

        Returns:
            TailorResult: Original text, ATS text, normalized resume, cover letter
            and rendered documents.

        Raises:
            InputValidationError: Job or resume text too short.
            FileParserError: Upload could not be read.
            LLMConfigError / LLMError: Model unavailable or failing.
            UnparseableAIResponseError: Model output has no usable JSON.
            RenderError: A document failed to render.
        """
        job_text = clamp_text(job_text)
        require_min_length("job_text", job_text, TAILOR_DEFAULTS.MIN_JOB_TEXT_CHARS, "Job description")

        if resume_file_bytes:
            try:
                extracted = self.extract_resume_text(resume_file_bytes, resume_file_name or "")
            except FileParserError as e:
                if not any("pytest" in arg for arg in sys.argv):
                    tailor_logger.warning(f"Text extraction failed for '{resume_file_name}': {e}")
                raise
            original_resume = clamp_text(extracted)
        else:
            original_resume = clamp_text(resume_text)
        require_min_length(
            "resume_text",
            original_resume,
            TAILOR_DEFAULTS.MIN_RESUME_TEXT_CHARS,
            "Resume text (upload a PDF/DOCX or paste the text)",
        )

        self.llm_client = initialize_llm_if_needed(llm_client=self.llm_client)
        raw_response = self.llm_client.query(
            system_prompt=TAILOR_SYSTEM_PROMPT,
            user_prompt=build_tailor_prompt(job_text, original_resume),
        )

        try:
            tailor_response = coerce_tailor_response(raw_response)
        except UnparseableAIResponseError as e:
            if not any("pytest" in arg for arg in sys.argv):
                tailor_logger.warning(f"{e.reason} Raw output starts with: {e.raw_response[:200]!r}")
            raise
        resume = normalize_resume(tailor_response.resume)
        cover_letter = clamp_text(tailor_response.cover_letter)

        if not any("pytest" in arg for arg in sys.argv):
            tailor_logger.info(
                f"Tailored resume for '{resume.header.name}' "
                f"({len(resume.experience)} experience, {len(resume.projects)} projects)"
            )

        return self._build_result(original_resume, resume, cover_letter)

    def regenerate(self, resume: Union[Resume, Mapping, None], cover_letter: str) -> TailorResult:
        """
        Rebuild ATS text and documents from an edited resume. No LLM call.

        Raises:
            InputValidationError: Resume has no header name, or the cover letter
                is shorter than ``MIN_COVER_LETTER_CHARS``.
            RenderError: A document failed to render.
        """
        if isinstance(resume, Resume):
            name = resume.header.name
        else:
            name = get_field(get_field(resume, "header"), "name")
        if not to_text(name).strip():
            raise InputValidationError(field_name="resume", message="Missing resume payload.")

        cover_letter = clamp_text(cover_letter)
        require_min_length(
            "cover_letter", cover_letter, TAILOR_DEFAULTS.MIN_COVER_LETTER_CHARS, "Cover letter"
        )

        resume = normalize_resume(resume)
        if not any("pytest" in arg for arg in sys.argv):
            tailor_logger.info(f"Regenerating documents for '{resume.header.name}'")

        return self._build_result("", resume, cover_letter)

    def score(self, job_text: str, resume_text: str) -> MatchResult:
        """Keyword score of ``resume_text`` against ``job_text``."""
        return analyze_ats(job_text, resume_text)

    def _build_result(self, original_resume: str, resume: Resume, cover_letter: str) -> TailorResult:
        documents = render_document_bundle(
            resume=resume,
            cover_letter=cover_letter,
            max_threads=self.max_render_threads,
        )
        return TailorResult(
            original_resume=original_resume,
            tailored_resume=format_resume_ats(resume),
            resume=resume,
            cover_letter=cover_letter,
            documents=documents,
        )
