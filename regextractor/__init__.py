# regextractor/__init__.py
r"""
regextractor: extract numeric columns from line-oriented text with regexes.

Examples
--------
>>> import io
>>> from regextractor import NamedRegex, extract_data
>>> table = extract_data(io.BytesIO(b"T=12.5\nT=13.0\n"), [NamedRegex("t", r"T=(\d+\.\d+)")], group=True)
>>> table["t"].tolist()
[12.5, 13.0]
"""

from .core import (
    NamedRegex,
    FilterConfig,
    DataTable,
    TableBuilder,
    TableError,
    ExtractionError,
    TableFailure,
    ReadFailure,
)
from .io import FilterIterator, extract_data, filter_lines, extract_file, filter_file
from .io.extract import filter

__version__ = "0.1.0"

__all__ = [
    "NamedRegex",
    "FilterConfig",
    "DataTable",
    "TableBuilder",
    "TableError",
    "ExtractionError",
    "TableFailure",
    "ReadFailure",
    "FilterIterator",
    "extract_data",
    "filter_lines",
    "extract_file",
    "filter_file",
]
