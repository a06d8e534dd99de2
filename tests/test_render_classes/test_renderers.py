"""test_renderers.py
Test the PDF and DOCX renderers for resumes and cover letters.
"""
from io import BytesIO

import pymupdf
import pytest
from docx import Document

from resume_tailor.models import ExperienceEntry, Resume, ResumeHeader
from resume_tailor.parse_classes.resume_normalizer.resume_normalizer import normalize_resume
from resume_tailor.render_classes.pdf_renderer import (
    render_cover_letter_pdf,
    render_resume_pdf,
    split_cover_letter,
)
from resume_tailor.render_classes.docx_renderer import (
    render_cover_letter_docx,
    render_resume_docx,
)
from resume_tailor.test_helpers.llm_client_test_helpers import MOCK_COVER_LETTER


def pdf_text(pdf_bytes: bytes) -> str:
    with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:
        return "\n".join(page.get_text() for page in doc)


def docx_paragraphs(docx_bytes: bytes):
    return [p.text for p in Document(BytesIO(docx_bytes)).paragraphs]



class TestSplitCoverLetter:

    def test_one_paragraph_per_non_empty_line(self):
        assert split_cover_letter("Dear team,\n\n  I apply.  \nThanks") == [
            "Dear team,", "I apply.", "Thanks"
        ]

    @pytest.mark.parametrize("text", ["", "  \n \n", None])
    def test_empty(self, text):
        assert split_cover_letter(text) == []


class TestPdfRenderer:

    def test_resume_pdf_sections_in_order(self, normalized_mock_resume):
        pdf_bytes = render_resume_pdf(normalized_mock_resume)
        assert pdf_bytes.startswith(b"%PDF")

        text = pdf_text(pdf_bytes)
        positions = [text.index(title) for title in ["SUMMARY", "SKILLS", "EXPERIENCE", "PROJECTS", "EDUCATION"]]
        assert positions == sorted(positions)
        assert "John Doe" in text
        assert "Languages: Python, SQL, TypeScript" in text
        assert "Built SQL pipelines feeding React dashboards" in text

    def test_markup_characters_are_escaped(self):
        resume = normalize_resume({"header": {"name": "A&B <Consulting>"}, "summary": "R&D > sales"})
        text = pdf_text(render_resume_pdf(resume))
        assert "A&B <Consulting>" in text
        assert "R&D > sales" in text

    def test_empty_resume_uses_placeholders(self):
        text = pdf_text(render_resume_pdf(normalize_resume(None)))
        assert "NAME" in text
        assert "EDUCATION" in text

    def test_cover_letter_pdf(self):
        pdf_bytes = render_cover_letter_pdf(MOCK_COVER_LETTER)
        assert pdf_bytes.startswith(b"%PDF")
        text = pdf_text(pdf_bytes)
        assert "Cover Letter" in text
        assert "Dear Hiring Manager," in text
        assert "Data Engineer role" in text

    def test_empty_cover_letter_still_renders(self):
        assert render_cover_letter_pdf("").startswith(b"%PDF")


class TestDocxRenderer:

    def test_resume_docx_content(self, normalized_mock_resume):
        docx_bytes = render_resume_docx(normalized_mock_resume)
        assert docx_bytes.startswith(b"PK")

        paragraphs = docx_paragraphs(docx_bytes)
        assert paragraphs[0] == "John Doe"
        assert paragraphs[1] == (
            "Greater New York | john.doe@example.com | 123-456-7890 | linkedin.com/in/john_doe23"
        )
        assert "Comcast — Data Engineer | Colorado Springs, CO | May 2018–Present" in paragraphs
        assert "h2oFiltration | Tech: Python, Arduino" in paragraphs

    def test_section_order_matches_pdf(self, normalized_mock_resume):
        paragraphs = docx_paragraphs(render_resume_docx(normalized_mock_resume))
        titles = [p for p in paragraphs if p in {"SUMMARY", "SKILLS", "EXPERIENCE", "PROJECTS", "EDUCATION"}]
        assert titles == ["SUMMARY", "SKILLS", "EXPERIENCE", "PROJECTS", "EDUCATION"]

    def test_blank_bullets_skipped(self):
        resume = Resume(
            header=ResumeHeader(name="Jane"),
            experience=[ExperienceEntry(company="Acme", title="Lead", bullets=["Shipped it", "   "])],
        )
        paragraphs = docx_paragraphs(render_resume_docx(resume))
        index = paragraphs.index("Acme — Lead")
        assert paragraphs[index + 1] == "Shipped it"
        assert paragraphs[index + 2] == "PROJECTS"

    def test_control_characters_removed(self):
        resume = normalize_resume({
            "header": {"name": "Jane\x01 Doe"},
            "summary": "Built\x0b things",
            "experience": [{"company": "Acme", "title": "Lead", "bullets": ["Shipped\x01 it", "\x02"]}],
        })
        paragraphs = docx_paragraphs(render_resume_docx(resume))
        assert paragraphs[0] == "Jane Doe"
        assert "Built things" in paragraphs
        index = paragraphs.index("Acme — Lead")
        assert paragraphs[index + 1] == "Shipped it"
        assert paragraphs[index + 2] == "PROJECTS"

        text = pdf_text(render_resume_pdf(resume))
        assert "Jane Doe" in text
        assert "Shipped it" in text

    def test_cover_letter_control_characters_removed(self):
        text = "Dear team,\x01\nI apply\x1f today."
        assert docx_paragraphs(render_cover_letter_docx(text)) == [
            "Cover Letter", "Dear team,", "I apply today."
        ]
        assert "I apply today." in pdf_text(render_cover_letter_pdf(text))

    def test_cover_letter_docx(self):
        paragraphs = docx_paragraphs(render_cover_letter_docx(MOCK_COVER_LETTER))
        assert paragraphs == [
            "Cover Letter",
            "Dear Hiring Manager,",
            "I am excited to apply for the Data Engineer role.",
            "Sincerely,",
            "John Doe",
        ]

    def test_empty_cover_letter_placeholder(self):
        assert docx_paragraphs(render_cover_letter_docx("")) == ["Cover Letter", "—"]
