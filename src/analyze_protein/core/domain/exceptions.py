"""Errors raised while reading atom records and computing statistics."""

from typing import Optional


class AnalysisError(Exception):
    """Base class for all analysis errors."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = path
        self.line_number = line_number

    def describe(self) -> str:
        """Message with file and line context when known."""
        if self.path is not None and self.line_number is not None:
            return f"{self.message} ({self.path}, line {self.line_number})"
        if self.path is not None and self.path not in self.message:
            return f"{self.message} ({self.path})"
        return self.message


class MissingArgumentsError(AnalysisError):
    """No input paths were supplied."""


class FileOpenError(AnalysisError, OSError):
    """An input path cannot be opened for reading."""


class MalformedRecordError(AnalysisError, ValueError):
    """An atom record is too short, or a file exceeds the atom limit."""


class CoordinateParseError(AnalysisError, ValueError):
    """A coordinate field is not a finite decimal number."""


class EmptyFileError(AnalysisError, ValueError):
    """A file yielded no atom records, or reading stopped before end of file."""
