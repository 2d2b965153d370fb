"""Custom exceptions for markdown IME operations."""

from typing import Any


class MarkdownIMEError(Exception):
    """Base exception for markdown IME operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class MarkdownIMESettingsError(MarkdownIMEError):
    """Raised when settings contain invalid values."""


class MarkdownIMEContainerError(MarkdownIMEError):
    """Raised when an unknown block container is requested."""
