"""word_document_parser.py

Holds WordDocumentParser class using docx2txt for text extraction.
"""
from io import BytesIO
from typing import List

from resume_tailor.models import ExtractedPage
from resume_tailor.exceptions import FileOpenError, ExtractionEngineUnavailableError
from resume_tailor.parse_classes.file_parser.file_parser import FileParser


class WordDocumentParser(FileParser):
    """
    Concrete parser for Microsoft Word documents (.docx).

    This class extends the abstract ``FileParser`` and uses ``docx2txt`` to
    extract textual content (including from textboxes). DOCX files have no
    fixed pagination, so the whole document is returned as a single page whose
    fragments are its non-empty lines.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): File extensions supported by this parser
            (only ``.docx``).
    """

    SUPPORTED_EXTENSIONS = ['.docx']

    def parse(self) -> List[ExtractedPage]:
        """
        Parses the Word document and returns a single ``ExtractedPage``.

        Returns:
            List[ExtractedPage]: One page holding the document's non-empty lines.

        Raises:
            ExtractionEngineUnavailableError: If docx2txt cannot be imported.
            FileOpenError: If the file cannot be opened or read.
        """
        full_text = self._get_docx_contents()
        fragments = [line.strip() for line in full_text.splitlines() if line.strip()]
        return [ExtractedPage(page_number=1, fragments=fragments)]

    def _get_docx_contents(self) -> str:
        """
        Opens the Word document using docx2txt and extracts all text content (including
        textboxes).

        Returns:
            str: The raw extracted text from the document.

        Raises:
            FileOpenError: If the Word document cannot be opened or read.
        """
        try:
            import docx2txt
        except ImportError as e:
            raise ExtractionEngineUnavailableError(engine_name="docx2txt", original_error=str(e))

        try:
            full_text = docx2txt.process(BytesIO(bytes(self.file_bytes)))
        except Exception as e:
            raise FileOpenError(self.file_name, str(e))

        return (full_text or "").strip()
