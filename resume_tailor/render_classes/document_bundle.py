"""document_bundle.py
Renders the four downloadable documents (resume / cover letter as PDF and DOCX)
for a single tailoring result.
"""
import sys
import warnings
from typing import Callable, Dict, Tuple
from concurrent.futures import ThreadPoolExecutor, as_completed

from resume_tailor.config import TAILOR_DEFAULTS
from resume_tailor.exceptions import RenderError
from resume_tailor.logging import LoggerFactory
from resume_tailor.models import DocumentBundle, Resume

from resume_tailor.render_classes.pdf_renderer import render_cover_letter_pdf, render_resume_pdf
from resume_tailor.render_classes.docx_renderer import render_cover_letter_docx, render_resume_docx

logger_factory = LoggerFactory()
render_failure_logger = logger_factory.get_logger(
    name="render_failures",
    logger_type="render_error"
)


def _build_render_jobs(resume: Resume, cover_letter: str) -> Dict[str, Tuple[Callable, object]]:
    """Map each DocumentBundle field to its renderer and input."""
    return {
        "resume_pdf": (render_resume_pdf, resume),
        "cover_letter_pdf": (render_cover_letter_pdf, cover_letter),
        "resume_docx": (render_resume_docx, resume),
        "cover_letter_docx": (render_cover_letter_docx, cover_letter),
    }


def _render_one(document_name: str, renderer: Callable, payload: object) -> bytes:
    try:
        return renderer(payload)
    except Exception as e:
        if not any("pytest" in arg for arg in sys.argv):
            render_failure_logger.error(f"Rendering '{document_name}' failed: {e}")
        raise RenderError(document_name=document_name, original_exception=e) from e


def render_document_bundle(
    resume: Resume,
    cover_letter: str,
    max_threads: int = TAILOR_DEFAULTS.MAX_RENDER_THREADS,
) -> DocumentBundle:
    """
    Render resume and cover letter to PDF and DOCX.

    Documents are rendered sequentially (max_threads=1) or in parallel
    (max_threads>1) using ThreadPoolExecutor. Any failure aborts the bundle.

    Args:
        resume (Resume): Normalized resume.
        cover_letter (str): Cover letter text.
        max_threads (int): Maximum concurrent render threads (clamped to 1..4).

    Returns:
        DocumentBundle: The four rendered documents.

    Raises:
        RenderError: If any document fails to render.
    """
    jobs = _build_render_jobs(resume, cover_letter)

    if max_threads <= 0:
        warnings.warn(f"Requested max_threads={max_threads} is invalid. Defaulting to 1 thread.")
        max_threads = 1
    max_threads = min(max_threads, len(jobs))

    rendered: Dict[str, bytes] = {}
    if max_threads == 1:
        for document_name, (renderer, payload) in jobs.items():
            rendered[document_name] = _render_one(document_name, renderer, payload)
    else:
        with ThreadPoolExecutor(max_workers=max_threads) as executor:
            future_to_document = {
                executor.submit(_render_one, document_name, renderer, payload): document_name
                for document_name, (renderer, payload) in jobs.items()
            }
            for future in as_completed(future_to_document):
                rendered[future_to_document[future]] = future.result()

    return DocumentBundle(**rendered)
