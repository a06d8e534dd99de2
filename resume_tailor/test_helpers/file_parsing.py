"""file_parsing.py
Helper functions to build resume documents in memory and test loading them in.
"""

from io import BytesIO
from typing import List

from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from resume_tailor.parse_classes.file_parser.file_parser import FileParser

SAMPLE_RESUME_LINES = [
    "John Doe",
    "john.doe@example.com | 123-456-7890",
    "Data Engineer at Comcast building SQL pipelines and React dashboards.",
    "Skills: Python, SQL, React, Docker",
]


# DummyTxtParser to test with
class DummyTxtParser(FileParser):
    """Simple subclass of FileParser to test _validate_file logic."""
    SUPPORTED_EXTENSIONS = [".txt"]
    def parse(self):
        return []


def build_pdf_bytes(pages: List[List[str]]) -> bytes:
    """
    Build a PDF with one page per entry of `pages`, drawing each line with reportlab.

    Args:
        pages (List[List[str]]): Lines of text per page. An empty inner list
            produces a blank page.

    Returns:
        bytes: PDF document content.
    """
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    for lines in pages:
        y = 750
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buffer.getvalue()


def build_docx_bytes(paragraphs: List[str]) -> bytes:
    """Build a DOCX document with one paragraph per entry using python-docx."""
    doc = Document()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


# Function to check readability of final text
def assert_text_is_readable(
    text: str,
    min_letter_ratio: float = 0.5,
    extra_allowed: str = "–—•◦·"  # add extra symbols commonly found in resumes
):
    """
    Assert that extracted text is readable.

    Checks performed:
        1. All characters are printable or whitespace (includes common resume symbols).
        2. At least a certain proportion of characters are alphabetic.

    Raises:
        AssertionError: If any of the checks fail, including a snippet of the offending text.
    """
    non_printable = [
        c for c in text
        if not (c.isprintable() or c.isspace() or c in extra_allowed)
    ]
    if non_printable:
        snippet = "".join(non_printable[:50])
        raise AssertionError(f"Parsed text contains unreadable characters: {snippet!r}")

    letters = sum(c.isalpha() for c in text)
    ratio = letters / (len(text) or 1)
    if ratio < min_letter_ratio:
        raise AssertionError(
            f"Parsed text seems gibberish (letter ratio {ratio:.2f} < {min_letter_ratio}): {text[:100]!r}"
        )
