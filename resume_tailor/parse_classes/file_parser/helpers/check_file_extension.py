"""check_file_extension.py
Checks file extension and confirms that it's supported by the text extractor.
"""

import os
from typing import Iterable

from resume_tailor.exceptions import FileNotSupportedError

def check_file_extension(file_name: str, supported_extensions: Iterable[str]) -> str:
    """
    Validate and return the lowercase file extension for a given file name.
    Supports multi-dot extensions like '.tar.gz'.
    """
    supported_extensions = list(supported_extensions)
    base_name = os.path.basename(str(file_name)).lower()

    # Try to match the longest supported extension
    for ext in sorted(supported_extensions, key=len, reverse=True):
        if base_name.endswith(ext.lower()):
            return ext.lower()

    ext = os.path.splitext(base_name)[1]
    raise FileNotSupportedError(
        extension=ext,
        supported_extensions=supported_extensions,
        context="Failed in check_file_extension() call."
    )
