# core/exceptions.py
from __future__ import annotations


class TableError(Exception):
    """Base error for all DataTable / TableBuilder structural violations."""


# ---- Construction / shape errors ----
class InvalidColumnCount(TableError):
    """Raised when a row or a name list does not match the column count."""


class InconsistentBuilderData(TableError):
    """Raised when builder columns differ in length, or there are none."""


class InconsistentContainerSize(TableError):
    """Raised when a column and its base column differ in length."""


class DuplicateName(TableError):
    """Raised when a column name is declared twice."""


# ---- Lookup errors (also behave like KeyError / IndexError) ----
class InvalidColumnName(TableError, KeyError):
    """Raised when a requested column name is not present."""


class InvalidColumnIndex(TableError, IndexError):
    """Raised when a column index is out of range."""


class InvalidRowIndex(InvalidColumnIndex):
    """Raised when a row index is out of range."""


class InvalidBaseIndex(TableError, IndexError):
    """Raised when the base column index is out of range."""


class InvalidBaseName(TableError, KeyError):
    """Raised when the base column name is not present."""


# ---- Pipeline errors ----
class ExtractionError(Exception):
    """Base error for the extraction pipeline."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"{type(self).__name__}: {type(self.error).__name__}: {self.error}"


class TableFailure(ExtractionError):
    """A TableError aborted the extraction."""


class ReadFailure(ExtractionError):
    """The input could not be read (I/O or decoding failure)."""
