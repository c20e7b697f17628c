"""
Custom exceptions for the social graph system.

The graph itself never fails: inserting nodes and edges and querying separation
always produce a value. Failures only exist at the boundaries where data enters
or leaves the graph (tabular import, fixture loading, configuration, DOT export).
Each exception type below corresponds to one of those failure categories.
"""

from typing import Optional


class SocialGraphError(Exception):
    """Base class for all errors raised by the social graph system."""


class SourceReadError(SocialGraphError, OSError):
    """
    Raised when an import source cannot be read.

    This is the I/O-kind failure of the tabular import and fixture loaders, so
    it is also an OSError.

    Examples:
        * Missing CSV file
        * Permission denied on the source
        * Source is not valid text in the expected encoding
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RowFormatError(SocialGraphError):
    """
    Raised when a data row is missing its expected column.

    This is the format-kind failure of the tabular import. The offending source
    and line number are kept on the exception so callers can report them.

    Examples:
        * Empty line in the middle of the data
        * Row whose first column is blank
    """

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.line = line

    def __str__(self) -> str:
        """Format row error message with its location when known."""
        message = super().__str__()
        if self.path is not None and self.line is not None:
            return f"{self.path}:{self.line}: {message}"
        return message


class ExportError(SocialGraphError):
    """
    Raised when the rendered graph cannot be written to its destination.

    Examples:
        * Destination directory does not exist
        * Destination is not writable
    """


class ValidationError(SocialGraphError):
    """
    Raised when fixture data validation fails.

    Examples:
        * Malformed JSON
        * Fixture not matching the expected schema
        * Empty node identifiers
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(SocialGraphError):
    """
    Raised when run configuration is invalid.

    Examples:
        * Unreadable configuration file
        * Unknown configuration keys
        * Values of the wrong type
    """
