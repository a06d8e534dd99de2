"""pdf_renderer.py
Renders a normalized Resume and a cover letter as ATS-safe, single-column PDFs.
"""
from io import BytesIO
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer

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

PAGE_MARGIN = 36


def _safe_paragraph(text: str, style) -> Paragraph:
    return Paragraph(escape(strip_control_chars(text)).replace("\n", "<br/>"), style)


def _build_styles():
    styles = getSampleStyleSheet()
    body = ParagraphStyle(
        "ResumeBody",
        parent=styles["BodyText"],
        fontName="Helvetica",
        fontSize=10.5,
        leading=13,
        spaceAfter=2,
    )
    return {
        "name": ParagraphStyle("ResumeName", parent=body, fontName="Helvetica-Bold", fontSize=16, leading=19),
        "meta": ParagraphStyle("ResumeMeta", parent=body, fontSize=10, spaceAfter=10),
        "title": ParagraphStyle("DocTitle", parent=body, fontName="Helvetica-Bold", fontSize=13.5, spaceAfter=10),
        "section": ParagraphStyle(
            "ResumeSection", parent=body, fontName="Helvetica-Bold", fontSize=11, spaceBefore=10, spaceAfter=4
        ),
        "entry": ParagraphStyle("ResumeEntry", parent=body, fontName="Helvetica-Bold"),
        "body": body,
        "bullet": ParagraphStyle("ResumeBullet", parent=body, leftIndent=14, bulletIndent=4),
        "letter": ParagraphStyle("LetterBody", parent=body, spaceAfter=8),
    }


def _section(story: List, title: str, styles) -> None:
    story.append(_safe_paragraph(title, styles["section"]))
    story.append(HRFlowable(width="100%", thickness=1, color=colors.HexColor("#DDDDDD"), spaceAfter=6))


def _bullets(story: List, bullets: List[str], styles) -> None:
    for bullet in bullets:
        bullet = clean(strip_control_chars(bullet))
        if bullet:
            story.append(Paragraph(f"<bullet>•</bullet>{escape(bullet)}", styles["bullet"]))


def _build_pdf(story: List) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
    )
    doc.build(story)
    return buffer.getvalue()


def render_resume_pdf(resume: Resume) -> bytes:
    """
    Render a resume PDF following the ATS section order.

    Args:
        resume (Resume): Normalized resume.

    Returns:
        bytes: PDF document.
    """
    styles = _build_styles()
    story: List = []

    story.append(_safe_paragraph(clean(resume.header.name) or NAME_PLACEHOLDER, styles["name"]))
    contact_line = format_contact_line(resume)
    if contact_line:
        story.append(_safe_paragraph(contact_line, styles["meta"]))

    _section(story, "SUMMARY", styles)
    story.append(_safe_paragraph(clean(resume.summary) or EMPTY_PLACEHOLDER, styles["body"]))

    _section(story, "SKILLS", styles)
    for line in format_skill_lines(resume.skills) or [EMPTY_PLACEHOLDER]:
        story.append(_safe_paragraph(line, styles["body"]))

    _section(story, "EXPERIENCE", styles)
    for entry in resume.experience:
        story.append(_safe_paragraph(format_experience_heading(entry), styles["entry"]))
        _bullets(story, entry.bullets, styles)
        story.append(Spacer(1, 6))
    if not resume.experience:
        story.append(_safe_paragraph(EMPTY_PLACEHOLDER, styles["body"]))

    _section(story, "PROJECTS", styles)
    for project in resume.projects:
        story.append(_safe_paragraph(format_project_heading(project), styles["entry"]))
        _bullets(story, project.bullets, styles)
        story.append(Spacer(1, 6))
    if not resume.projects:
        story.append(_safe_paragraph(EMPTY_PLACEHOLDER, styles["body"]))

    _section(story, "EDUCATION", styles)
    for entry in resume.education:
        story.append(_safe_paragraph(format_education_heading(entry), styles["entry"]))
        _bullets(story, entry.details, styles)
    if not resume.education:
        story.append(_safe_paragraph(EMPTY_PLACEHOLDER, styles["body"]))

    return _build_pdf(story)


def split_cover_letter(text: str) -> List[str]:
    """One paragraph per non-empty, trimmed line."""
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def render_cover_letter_pdf(text: str) -> bytes:
    """
    Render a plain-paragraph cover letter PDF.

    Args:
        text (str): Cover letter text.

    Returns:
        bytes: PDF document.
    """
    styles = _build_styles()
    story: List = [_safe_paragraph("Cover Letter", styles["title"])]
    paragraphs = split_cover_letter(text) or [EMPTY_PLACEHOLDER]
    story.extend(_safe_paragraph(p, styles["letter"]) for p in paragraphs)
    return _build_pdf(story)
