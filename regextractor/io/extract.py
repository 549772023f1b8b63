# io/extract.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Iterable, Sequence

import numpy as np

from regextractor.core import DataTable, NamedRegex, TableBuilder
from regextractor.core.exceptions import ReadFailure, TableError, TableFailure
from regextractor.core.regex import PatternLike
from regextractor.io.fields import extract_fields
from regextractor.io.filter_iter import FilterIterator

logger = logging.getLogger(__name__)


def extract_data(
    reader: IO[Any] | Iterable[Any],
    data_regexes: Sequence[NamedRegex],
    includes: Iterable[PatternLike] | None = None,
    excludes: Iterable[PatternLike] | None = None,
    base_name: str | None = None,
    group: bool = False,
    *,
    dtype: Any = np.float64,
    encoding: str = "utf-8",
) -> DataTable:
    """Extract one numeric column per data-expression from the kept lines of `reader`.

    Parameters
    ----------
    reader:
        Binary or text stream (or any iterable of lines).
    data_regexes:
        Named data-expressions; their names become the table's columns, in
        this order. Names must be unique.
    includes, excludes:
        Line filter, see FilterIterator.
    base_name:
        Optional column to use as the table's base (x-axis). Without it the
        base is 0, 1, 2, ...
    group:
        Parse the first capture group instead of the whole match.

    Every kept line adds one row; fields that do not match or do not parse
    are NaN. Lines that cannot be read are skipped.

    Raises
    ------
    TableFailure
        Wrapping the TableError (duplicate names, unknown base name, ...).
    """
    data_regexes = list(data_regexes)
    try:
        builder = TableBuilder([r.name for r in data_regexes], dtype=dtype)

        kept = 0
        for item in FilterIterator(reader, includes, excludes, encoding=encoding):
            if isinstance(item, ReadFailure):
                logger.warning("Skipping unreadable line: %s", item.error)
                continue
            kept += 1
            for name, value in extract_fields(item, data_regexes, group, dtype):
                builder.add_value(name, value)

        table = builder.build(base_name)
    except TableError as e:
        raise TableFailure(e) from e

    logger.debug("Extracted %d row(s) x %d column(s)", kept, table.column_count)
    return table


def filter_lines(
    reader: IO[Any] | Iterable[Any],
    includes: Iterable[PatternLike] | None = None,
    excludes: Iterable[PatternLike] | None = None,
    *,
    encoding: str = "utf-8",
) -> list[str]:
    """Return the kept lines of `reader`, in order. Unreadable lines are skipped."""
    output: list[str] = []
    for item in FilterIterator(reader, includes, excludes, encoding=encoding):
        if isinstance(item, ReadFailure):
            logger.warning("Skipping unreadable line: %s", item.error)
            continue
        output.append(item)

    logger.debug("Kept %d line(s)", len(output))
    return output


# Name of the operation in the command-line tool's vocabulary.
filter = filter_lines


def _open(path: str | Path) -> IO[bytes]:
    try:
        return open(path, "rb")
    except OSError as e:
        raise ReadFailure(e) from e


def extract_file(path: str | Path, data_regexes: Sequence[NamedRegex], **kwargs: Any) -> DataTable:
    """extract_data() over the file at `path`; ReadFailure if it cannot be opened."""
    with _open(path) as fh:
        return extract_data(fh, data_regexes, **kwargs)


def filter_file(path: str | Path, **kwargs: Any) -> list[str]:
    """filter_lines() over the file at `path`; ReadFailure if it cannot be opened."""
    with _open(path) as fh:
        return filter_lines(fh, **kwargs)
