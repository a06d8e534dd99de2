"""test_join_page_text.py
Test join_page_text function.
"""
from resume_tailor.models import ExtractedPage
from resume_tailor.parse_classes.file_parser.helpers.join_page_text import join_page_text


class TestJoinPageText:

    def test_fragments_joined_with_single_space(self):
        pages = [ExtractedPage(page_number=1, fragments=["Jane", "Roe", "Engineer"])]
        assert join_page_text(pages) == "Jane Roe Engineer"

    def test_pages_joined_with_newline_in_page_order(self):
        pages = [
            ExtractedPage(page_number=2, fragments=["second"]),
            ExtractedPage(page_number=1, fragments=["first"]),
        ]
        assert join_page_text(pages) == "first\nsecond"

    def test_result_is_trimmed(self):
        pages = [
            ExtractedPage(page_number=1, fragments=[]),
            ExtractedPage(page_number=2, fragments=["only text"]),
            ExtractedPage(page_number=3, fragments=[]),
        ]
        assert join_page_text(pages) == "only text"

    def test_no_pages_gives_empty_string(self):
        assert join_page_text([]) == ""
