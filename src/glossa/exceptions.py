"""
Glossa Exception Hierarchy.

Defines the errors raised while configuring and building
the translation system. Lookup misses are never errors.
"""

from enum import Enum


class TranslationErrorCode(str, Enum):
    """Error codes for translation system operations."""

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"

    # Source errors
    SOURCE_READ_FAILED = "SOURCE_READ_FAILED"
    INVALID_DICTIONARY = "INVALID_DICTIONARY"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TranslationError(Exception):
    """Base exception for all translation-related errors."""

    def __init__(
        self,
        message: str,
        code: TranslationErrorCode = TranslationErrorCode.INTERNAL_ERROR,
        details: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(TranslationError):
    """Raised when the site configuration is invalid."""

    def __init__(
        self,
        message: str,
        code: TranslationErrorCode = TranslationErrorCode.INVALID_CONFIG,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, code, details)


class SourceReadError(TranslationError):
    """Raised when an existing dictionary source cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        code: TranslationErrorCode = TranslationErrorCode.SOURCE_READ_FAILED,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, code, details)
