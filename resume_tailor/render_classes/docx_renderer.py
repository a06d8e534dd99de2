"""docx_renderer.py
Renders a normalized Resume and a cover letter as single-column DOCX documents.
"""
from io import BytesIO
from typing import List

from docx import Document
from docx.shared import Pt

from resume_tailor.models import Resume
from resume_tailor.ats_classes.ats_formatter import (
    EMPTY_PLACEHOLDER,
    NAME_PLACEHOLDER,
    clean,
    format_contact_line,
    format_education_heading,
    format_experience_heading,
    format_project_heading,
    format_skill_lines,
    strip_control_chars,
)
from resume_tailor.render_classes.pdf_renderer import split_cover_letter

BODY_FONT = "Calibri"
BODY_SIZE = Pt(10.5)


def _new_document():
    doc = Document()
    normal = doc.styles["Normal"]
    normal.font.name = BODY_FONT
    normal.font.size = BODY_SIZE
    return doc


def _add_text(doc, text: str, bold: bool = False, size=None):
    paragraph = doc.add_paragraph()
    run = paragraph.add_run(strip_control_chars(text))
    run.bold = bold
    if size is not None:
        run.font.size = size
    return paragraph


def _add_section(doc, title: str) -> None:
    paragraph = _add_text(doc, title, bold=True, size=Pt(11))
    paragraph.paragraph_format.space_before = Pt(10)


def _add_bullets(doc, bullets: List[str]) -> None:
    for bullet in bullets:
        bullet = clean(strip_control_chars(bullet))
        if bullet:
            doc.add_paragraph(bullet, style="List Bullet")


def _to_bytes(doc) -> bytes:
    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def render_resume_docx(resume: Resume) -> bytes:
    """
    Render a resume DOCX with the same sections and order as the PDF.

    Args:
        resume (Resume): Normalized resume.

    Returns:
        bytes: DOCX document.
    """
    doc = _new_document()

    _add_text(doc, clean(resume.header.name) or NAME_PLACEHOLDER, bold=True, size=Pt(16))
    contact_line = format_contact_line(resume)
    if contact_line:
        _add_text(doc, contact_line, size=Pt(10))

    _add_section(doc, "SUMMARY")
    _add_text(doc, clean(resume.summary) or EMPTY_PLACEHOLDER)

    _add_section(doc, "SKILLS")
    for line in format_skill_lines(resume.skills) or [EMPTY_PLACEHOLDER]:
        _add_text(doc, line)

    _add_section(doc, "EXPERIENCE")
    for entry in resume.experience:
        _add_text(doc, format_experience_heading(entry), bold=True)
        _add_bullets(doc, entry.bullets)
    if not resume.experience:
        _add_text(doc, EMPTY_PLACEHOLDER)

    _add_section(doc, "PROJECTS")
    for project in resume.projects:
        _add_text(doc, format_project_heading(project), bold=True)
        _add_bullets(doc, project.bullets)
    if not resume.projects:
        _add_text(doc, EMPTY_PLACEHOLDER)

    _add_section(doc, "EDUCATION")
    for entry in resume.education:
        _add_text(doc, format_education_heading(entry), bold=True)
        _add_bullets(doc, entry.details)
    if not resume.education:
        _add_text(doc, EMPTY_PLACEHOLDER)

    return _to_bytes(doc)


def render_cover_letter_docx(text: str) -> bytes:
    doc = _new_document()
    _add_text(doc, "Cover Letter", bold=True, size=Pt(13.5))
    for paragraph in split_cover_letter(text) or [EMPTY_PLACEHOLDER]:
        _add_text(doc, paragraph)
    return _to_bytes(doc)
