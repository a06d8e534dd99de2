"""file_parser.py

Holds abstract FileParser class inherited by filetype-specific parsers.
"""

from typing import List
from abc import ABC, abstractmethod

from resume_tailor.config import TAILOR_DEFAULTS
from resume_tailor.models import ExtractedPage
from resume_tailor.exceptions import FileTooLargeError, FileEmptyError

from resume_tailor.parse_classes.file_parser.helpers.join_page_text import join_page_text
from resume_tailor.parse_classes.file_parser.helpers.check_file_extension import check_file_extension

class FileParser(ABC):
    """
    Abstract base class representing a generic file parser working on the raw
    bytes of an uploaded document.

    All concrete parsers must implement the `parse` method.

    Args:
        file_bytes (bytes): Raw content of the uploaded document.
        file_name (str): Original name of the upload, used for the extension check
            and error messages.
        max_file_size_mb (float | None, optional): Maximum allowed file size in megabytes.
            If None, no size limit is enforced.

    Attributes:
        file_bytes (bytes): Raw document content.
        file_name (str): Name of the upload.
        max_file_size_mb (float | None): Maximum allowed file size.
    """
    # Parent level allowance of file extensions supported in at least one concrete class
    ALLOWED_EXTENSIONS = [".pdf", ".docx"]

    # Extensions supported by a specific concreted class (to be overwritten by children)
    SUPPORTED_EXTENSIONS = []

    def __init__(
        self,
        file_bytes: bytes,
        file_name: str,
        max_file_size_mb: float | None = TAILOR_DEFAULTS.MAX_FILE_SIZE_MB
    ):
        self.file_bytes = file_bytes
        self.file_name = file_name
        self.max_file_size_mb = max_file_size_mb
        self._validate_file()
        check_file_extension(self.file_name, self.SUPPORTED_EXTENSIONS)

    def _validate_file(self):
        """Validate whether the file can be parsed by this parser.

        Raises:
            TypeError: Raised if file_bytes is not a bytes-like object
            FileTooLargeError: Raised if the file exceeds the max_file_size_mb
        """
        if not isinstance(self.file_bytes, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"file_bytes must be bytes, got {type(self.file_bytes).__name__}"
            )

        if self.max_file_size_mb is not None:
            # Convert MB to bytes (1 MB = 1024 * 1024 bytes)
            max_size_bytes = self.max_file_size_mb * 1024 * 1024
            actual_size_bytes = len(self.file_bytes)

            if actual_size_bytes > max_size_bytes:
                raise FileTooLargeError(
                    max_size=max_size_bytes,
                    actual_size=actual_size_bytes
                )

    def extract_text(self) -> str:
        """
        Parse the document and return its plain text.

        Fragments within a page are joined by a single space, pages are joined
        by a newline and the result is trimmed.

        Returns:
            str: Extracted plain text.

        Raises:
            FileOpenError: If the document cannot be opened or read.
            FileEmptyError: If the document contains no readable text.
            ExtractionEngineUnavailableError: If the parsing library cannot be loaded.
        """
        full_text = join_page_text(self.parse())
        if not full_text:
            raise FileEmptyError(self.file_name)
        return full_text

    @abstractmethod
    def parse(self) -> List[ExtractedPage]:
        """
        Parses `self.file_bytes` and returns its content as an ordered list of pages.

        Returns:
            List[ExtractedPage]: Each ExtractedPage contains:
                - page_number: int
                - fragments: List[str]
        """
        pass
