# io/fields.py
from __future__ import annotations

import re
from typing import Any, Sequence

import numpy as np

from regextractor.core.regex import NamedRegex


def parse_number(token: str | None, dtype: Any = np.float64) -> Any:
    """
    Parse `token` verbatim as a float of `dtype`; NaN if it is not a number.

    Python's float() is more lenient than a plain numeric literal (it strips
    whitespace, accepts "_" separators and non-ASCII digits), so those tokens
    are rejected here.
    """
    scalar = np.dtype(dtype).type
    if not token or not token.isascii() or token != token.strip() or "_" in token:
        return scalar(np.nan)
    try:
        return scalar(float(token))
    except ValueError:
        return scalar(np.nan)


def get_number(line: str, regex: re.Pattern[str], group: bool, dtype: Any = np.float64) -> Any:
    """
    Search `line` with `regex` and parse the whole match (group=False) or the
    first capture group (group=True). NaN when there is nothing to parse.
    """
    m = regex.search(line)
    if m is None:
        return parse_number(None, dtype)

    index = 1 if group else 0
    if index > regex.groups:
        return parse_number(None, dtype)
    return parse_number(m.group(index), dtype)


def extract_fields(
    line: str,
    data_regexes: Sequence[NamedRegex],
    group: bool,
    dtype: Any = np.float64,
) -> list[tuple[str, Any]]:
    """One (name, value) pair per data-expression, in the given order."""
    return [(r.name, get_number(line, r.regex, group, dtype)) for r in data_regexes]
