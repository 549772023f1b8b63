# core/regex.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Union

PatternLike = Union[str, "re.Pattern[str]"]


def compile_pattern(pattern: PatternLike) -> re.Pattern[str]:
    """Return `pattern` compiled; already compiled patterns pass through."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise TypeError(f"expected a regex string or compiled pattern, got {type(pattern).__name__}")
    return re.compile(pattern)


def compile_patterns(patterns: Iterable[PatternLike] | None) -> tuple[re.Pattern[str], ...]:
    if patterns is None:
        return ()
    if isinstance(patterns, (str, re.Pattern)):
        patterns = [patterns]
    return tuple(compile_pattern(p) for p in patterns)


def first_group_name(regex: re.Pattern[str]) -> str | None:
    """Name of capture group 1; None when it is unnamed or absent."""
    return next((name for name, index in regex.groupindex.items() if index == 1), None)


def finds_match(regex: re.Pattern[str], line: str) -> bool:
    """Search (not full-match) semantics."""
    return regex.search(line) is not None


@dataclass(frozen=True, slots=True)
class NamedRegex:
    """
    A data-expression: the column `name` filled by matches of `regex`.

    Two NamedRegex are equal when both the name and the pattern (text and
    flags) are equal.
    """
    name: str
    regex: re.Pattern[str]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("NamedRegex.name must be a non-empty string.")
        object.__setattr__(self, "regex", compile_pattern(self.regex))

    @property
    def pattern(self) -> str:
        return self.regex.pattern

    def first_group_name(self) -> str | None:
        return first_group_name(self.regex)


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """
    Include / exclude predicates of the line filter.

    - includes empty: every line is included
    - includes non-empty: a line is included iff at least one include matches
    - any matching exclude drops the line, regardless of includes
    """
    includes: tuple[re.Pattern[str], ...] = field(default=())
    excludes: tuple[re.Pattern[str], ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "includes", compile_patterns(self.includes))
        object.__setattr__(self, "excludes", compile_patterns(self.excludes))

    def is_included(self, line: str) -> bool:
        if not self.includes:
            return True
        return any(finds_match(rgx, line) for rgx in self.includes)

    def is_excluded(self, line: str) -> bool:
        return any(finds_match(rgx, line) for rgx in self.excludes)

    def is_kept(self, line: str) -> bool:
        return self.is_included(line) and not self.is_excluded(line)
