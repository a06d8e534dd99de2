"""pdf_parser.py

Holds PDFParser class.
"""
from typing import List

from resume_tailor.exceptions import FileOpenError, ExtractionEngineUnavailableError
from resume_tailor.models import ExtractedPage

from resume_tailor.parse_classes.file_parser.file_parser import FileParser

class PDFParser(FileParser):
    """
    Concrete parser for PDF documents (.pdf).

    This class extends the abstract ``FileParser`` and uses PyMuPDF to extract
    the text spans of every page, in page order and extraction order.

    Args:
        file_bytes (bytes): Raw content of the PDF.
        file_name (str): Name of the uploaded PDF.
        max_file_size_mb (float | None, optional): Maximum allowed file size in
            megabytes. If None, no file size limit is enforced.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): List of file extensions supported by
            this parser (only ``.pdf``).
    """
    SUPPORTED_EXTENSIONS = ['.pdf']

    def parse(self) -> List[ExtractedPage]:
        """
        Parses the PDF document and returns one ``ExtractedPage`` per page.

        Returns:
            List[ExtractedPage]: Pages in order, each holding its text spans.

        Raises:
            ExtractionEngineUnavailableError: If PyMuPDF cannot be imported.
            FileOpenError: If the file cannot be opened by PyMuPDF or is encrypted.
        """
        pymupdf = self._load_engine()

        try:
            doc = pymupdf.open(stream=bytes(self.file_bytes), filetype="pdf")
        except Exception as e:
            raise FileOpenError(self.file_name, str(e))

        try:
            if doc.needs_pass:
                raise FileOpenError(self.file_name, "Document is password protected")

            pages = []
            for page_number in range(doc.page_count):
                page = doc.load_page(page_number)
                pages.append(
                    ExtractedPage(
                        page_number=page_number + 1,
                        fragments=self._get_page_fragments(page),
                    )
                )
        except FileOpenError:
            raise
        except Exception as e:
            raise FileOpenError(self.file_name, str(e))
        finally:
            doc.close()

        return pages

    @staticmethod
    def _get_page_fragments(page) -> List[str]:
        """
        Collect the non-empty text spans of a page in extraction order.

        Args:
            page (pymupdf.Page): Loaded page.

        Returns:
            List[str]: Stripped span texts.
        """
        fragments = []
        page_dict = page.get_text("dict")
        for block in page_dict.get("blocks", []):
            # Image blocks carry no "lines"
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    text = span.get("text", "").strip()
                    if text:
                        fragments.append(text)
        return fragments

    @staticmethod
    def _load_engine():
        """Import PyMuPDF on first use so a missing install is reported distinctly."""
        try:
            import pymupdf
        except ImportError as e:
            raise ExtractionEngineUnavailableError(engine_name="pymupdf", original_error=str(e))
        return pymupdf
