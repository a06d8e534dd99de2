"""exceptions.py
Defines custom exceptions for this project.

Every exception family carries an ``error_code`` so callers (e.g. the HTTP
layer) can tell failure categories apart without string matching.
"""
from typing import Optional, List

# ------------------------ Input Validation Errors ------------------------
class InputValidationError(Exception):
    """
    Raised when caller-provided input is missing or too short to work with.

    Attributes:
        field_name (str): Name of the offending input.
        message (str): Human-readable description of the error.
        min_length (int | None): Minimum accepted length, if a length rule failed.
        actual_length (int | None): Length that was received.
    """
    error_code = "invalid_input"

    def __init__(
        self,
        field_name: str,
        message: str,
        min_length: Optional[int] = None,
        actual_length: Optional[int] = None,
    ):
        self.field_name = field_name
        self.message = message
        self.min_length = min_length
        self.actual_length = actual_length
        if min_length is not None:
            self.error_code = "input_too_short"
        super().__init__(message)


# ------------------------ File Parser Errors ------------------------
class FileParserError(Exception):
    """Base exception for file parser errors."""
    error_code = "extraction_failed"


class FileNotSupportedError(FileParserError):
    """Raised when the uploaded file has an unsupported extension."""
    def __init__(
        self,
        extension: str,
        supported_extensions: List[str],
        context: Optional[str] = None
    ):
        self.extension = extension
        self.supported_extensions = supported_extensions
        message = (
            f"File with extension '{extension}' is not supported. "
            f"Supported extensions: {supported_extensions}"
        )
        if context:
            message += f" Context: {context}"
        super().__init__(message)


class FileTooLargeError(FileParserError):
    """Raised when a file exceeds the allowed file size."""
    error_code = "file_too_large"

    def __init__(self, max_size: int, actual_size: int):
        super().__init__(
            f"File size is {actual_size} bytes, which exceeds the max allowed {max_size} bytes."
        )
        self.max_size = max_size
        self.actual_size = actual_size


class FileOpenError(FileParserError):
    """Raised when a file cannot be opened or read (corrupt, encrypted, wrong format)."""
    def __init__(self, file_name: str, original_error: str):
        super().__init__(
            f"Failed to open or read file: {file_name}. Original error: {original_error}"
        )
        self.file_name = file_name
        self.original_error = original_error


class FileEmptyError(FileParserError):
    """Raised when a file contains no parsable text."""
    def __init__(self, file_name: str, message: str | None = None):
        self.file_name = file_name
        if message is None:
            message = f"File `{file_name}` contains no parsable text."
        super().__init__(message)


class ExtractionEngineUnavailableError(FileParserError):
    """Raised when the library needed to parse a file type cannot be loaded."""
    error_code = "extraction_engine_unavailable"

    def __init__(self, engine_name: str, original_error: str):
        super().__init__(
            f"Text extraction engine `{engine_name}` is unavailable. Original error: {original_error}"
        )
        self.engine_name = engine_name
        self.original_error = original_error


# ------------------------ LLM Querying Errors ------------------------
class LLMConfigError(Exception):
    """Raised when a required configuration (in .env by default) for LLMClient to function
    is missing or invalid."""
    error_code = "llm_config_error"

    def __init__(
        self,
        variable_name: str,
        message: str = None,
        extra_info: str = None
    ):
        """
        Args:
            variable_name: Name of the config variable.
            message: Optional custom message for the error.
            extra_info: Additional information to append to the error message.
        """
        if message is None:
            message = f"Missing or invalid configuration: {variable_name}. Please set it in your .env file."
        if extra_info:
            message += f" | {extra_info}"
        super().__init__(message)
        self.variable_name = variable_name
        self.extra_info = extra_info

    def __str__(self):
        return f"[CONFIG ERROR] {super().__str__()} | Variable: {self.variable_name}"


class LLMError(Exception):
    """Base exception for all LLM-related errors."""
    error_code = "upstream_inference_failed"

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.provider = provider
        self.model = model
        self.original_exception = original_exception

        base_msg = message
        if provider:
            base_msg += f" | Provider: {provider}"
        if model:
            base_msg += f" | Model: {model}"
        if original_exception:
            base_msg += f" | Original Exception: {original_exception}"

        super().__init__(base_msg)


class LLMInitializationError(LLMError):
    """Raised when the LLM client fails to initialize."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        additional_message: Optional[str] = None
    ):
        message = "Failed to initialize LLM client"
        if additional_message:
            message += f": {additional_message}"
        super().__init__(
            message=message,
            provider=provider,
            model=model,
            original_exception=original_exception,
        )


class LLMQueryError(LLMError):
    """Raised when a query to the LLM fails."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        additional_message: Optional[str] = None,
        original_exception: Exception = None,
    ):
        message = "LLM query failed"
        if additional_message:
            message += f": {additional_message}"

        super().__init__(
            message=message,
            provider=provider,
            model=model,
            original_exception=original_exception,
        )


class LLMEmptyResponse(LLMError):
    """Raised when the LLM returns an empty response."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None
    ):
        super().__init__(
            message="LLM returned an empty response",
            provider=provider,
            model=model,
        )


class UnparseableAIResponseError(Exception):
    """
    Raised when the model output cannot be coerced into the expected
    ``{"resume": ..., "cover_letter": ...}`` object.

    Attributes:
        raw_response (str): The (truncated) raw model output, kept for diagnosis.
        reason (str): Short description of why coercion failed.
    """
    error_code = "unparseable_ai_response"

    def __init__(self, raw_response: str, reason: str = "AI response could not be parsed."):
        self.raw_response = raw_response
        self.reason = reason
        super().__init__(reason)


# ------------------------ Render Errors ------------------------
class RenderError(Exception):
    """Raised when a PDF or DOCX document cannot be generated."""
    error_code = "render_failed"

    def __init__(self, document_name: str, original_exception: Optional[Exception] = None):
        self.document_name = document_name
        self.original_exception = original_exception
        message = f"Failed to render `{document_name}`"
        if original_exception:
            message += f" | Original Exception: {original_exception}"
        super().__init__(message)


# ------------------------ History Errors ------------------------
class HistoryStorageError(Exception):
    """Raised when a history entry does not fit in the configured storage capacity."""
    error_code = "history_storage_full"

    def __init__(self, max_bytes: int, required_bytes: int):
        self.max_bytes = max_bytes
        self.required_bytes = required_bytes
        super().__init__(
            f"History needs {required_bytes} bytes, which exceeds the storage capacity of {max_bytes} bytes."
        )
