# core/__init__.py
"""
Core domain objects for regextractor.

This module defines the stream-independent data model:
- NamedRegex: data-expression (column name + regex)
- FilterConfig: include / exclude line predicates
- DataTable: named numeric columns plus a base column (x-axis)
- TableBuilder: per-name accumulation, emits a consistent DataTable

The core layer is independent from I/O.
"""

from .regex import NamedRegex, FilterConfig, compile_pattern, compile_patterns
from .datatable import DataTable
from .builder import TableBuilder
from .exceptions import (
    TableError,
    InvalidColumnName,
    InvalidColumnCount,
    InvalidColumnIndex,
    InvalidRowIndex,
    InvalidBaseIndex,
    InvalidBaseName,
    InconsistentBuilderData,
    InconsistentContainerSize,
    DuplicateName,
    ExtractionError,
    TableFailure,
    ReadFailure,
)


__all__ = [
    # regexes
    "NamedRegex",
    "FilterConfig",
    "compile_pattern",
    "compile_patterns",

    # tables
    "DataTable",
    "TableBuilder",

    # table errors
    "TableError",
    "InvalidColumnName",
    "InvalidColumnCount",
    "InvalidColumnIndex",
    "InvalidRowIndex",
    "InvalidBaseIndex",
    "InvalidBaseName",
    "InconsistentBuilderData",
    "InconsistentContainerSize",
    "DuplicateName",

    # pipeline errors
    "ExtractionError",
    "TableFailure",
    "ReadFailure",
]
