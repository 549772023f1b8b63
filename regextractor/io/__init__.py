# io/__init__.py
"""
Stream layer: line filtering, field extraction and the extraction pipeline.
"""

from .filter_iter import FilterIterator
from .fields import parse_number, get_number, extract_fields
from .extract import extract_data, filter_lines, extract_file, filter_file


__all__ = [
    "FilterIterator",
    "parse_number",
    "get_number",
    "extract_fields",
    "extract_data",
    "filter_lines",
    "extract_file",
    "filter_file",
]
