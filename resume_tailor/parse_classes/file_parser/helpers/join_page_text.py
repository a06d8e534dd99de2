"""join_page_text.py
Used to turn per-page text fragments into one continuous string of text.
"""

from typing import List

from resume_tailor.models import ExtractedPage


def join_page_text(pages: List[ExtractedPage]) -> str:
    """
    Join extracted pages into plain text.

    Fragments on a page are joined by a single space (in extraction order),
    pages are joined by a newline (in page order) and the final text is
    trimmed of leading/trailing whitespace.

    Args:
        pages (List[ExtractedPage]): Pages returned by a ``FileParser``.

    Returns:
        str: The combined text. Empty if no page holds any text.
    """
    pages_sorted = sorted(pages, key=lambda p: p.page_number)
    return "\n".join(page.text for page in pages_sorted).strip()
