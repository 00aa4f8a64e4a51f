"""
Custom exceptions for the lazylog analyzer.

This module defines all custom exceptions used throughout the application
so callers can tell fatal configuration and file errors apart from the
per-line extraction errors that only affect a single log line.
"""

from typing import Any, Optional

from lazylog.models import ExtractionErrorKind


class LazyLogException(Exception):
    """Base exception for all lazylog-specific errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(LazyLogException):
    """Configuration error."""

    pass


class EmptySearchPatternError(ConfigurationError):
    """A search pattern was given but it is empty."""

    def __init__(self) -> None:
        super().__init__("Search text is empty")


class InvalidPatternError(ConfigurationError):
    """A search or filter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, error: str) -> None:
        """Initialize with the offending pattern."""
        message = f"Invalid pattern '{pattern}': {error}"
        super().__init__(message, {"pattern": pattern})


# =============================================================================
# Log File Exceptions
# =============================================================================


class LogFileError(LazyLogException):
    """Base exception for log file access."""

    pass


class LogFileNotFoundError(LogFileError):
    """Log file does not exist."""

    def __init__(self, filepath: str) -> None:
        super().__init__("Log file doesn't exist", {"filepath": filepath})


class LogFileReadError(LogFileError):
    """Log file exists but cannot be opened or read."""

    pass


# =============================================================================
# JSON Extraction Exceptions
# =============================================================================


class JsonExtractionError(LazyLogException):
    """Base exception for embedded JSON extraction, local to one line."""

    kind: ExtractionErrorKind = ExtractionErrorKind.NOT_FOUND


class UnbalancedBracketError(JsonExtractionError):
    """A closing bracket does not match the most recent opening bracket."""

    kind = ExtractionErrorKind.UNBALANCED

    def __init__(self, opener: str, position: Optional[int] = None) -> None:
        """Initialize with the opener that was left unclosed."""
        self.opener = opener
        self.position = position
        super().__init__(f"Invalid JSON input, opening {opener} is not closed")


class IncompleteJsonError(JsonExtractionError):
    """Input ended while brackets were still open."""

    kind = ExtractionErrorKind.INCOMPLETE

    def __init__(self, depth: int = 1) -> None:
        self.depth = depth
        super().__init__("String is not JSON, not completed")


class JsonNotFoundError(JsonExtractionError):
    """No opening bracket was found."""

    kind = ExtractionErrorKind.NOT_FOUND

    def __init__(self) -> None:
        super().__init__("No JSON object found in string")


class JsonFormatError(JsonExtractionError):
    """Balanced region is not valid JSON text."""

    kind = ExtractionErrorKind.FORMAT

    def __init__(self, error: str, position: Optional[int] = None) -> None:
        """Initialize with the decoder message."""
        message = f"Invalid JSON text: {error}"
        details = {"position": position} if position is not None else None
        super().__init__(message, details)
