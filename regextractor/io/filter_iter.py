# io/filter_iter.py
from __future__ import annotations

import io
import logging
from typing import IO, Any, Iterable, Iterator, Union

from regextractor.core.exceptions import ReadFailure
from regextractor.core.regex import FilterConfig, PatternLike

logger = logging.getLogger(__name__)

LineResult = Union[str, ReadFailure]


def _strip_newline(line: str) -> str:
    """Drop a trailing "\\n" or "\\r\\n", as a line reader does."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _raw_lines(reader: IO[Any] | Iterable[Any]) -> Iterator[Any]:
    """Pull raw lines one at a time; prefer readline() over iteration."""
    readline = getattr(reader, "readline", None)
    if readline is not None:
        while True:
            raw = readline()
            if not raw:
                return
            yield raw
    else:
        yield from reader


class FilterIterator:
    """
    Lazy, single-pass iterator over the kept lines of a stream.

    Each item is either a decoded line (newline stripped) or a ReadFailure:
    - a line that cannot be decoded yields ReadFailure; iteration goes on
      with the next line
    - an OSError from the stream yields ReadFailure and ends the iteration
    - a UnicodeDecodeError raised by a text source yields ReadFailure and
      ends the iteration
    Consumers decide what to do with failures.

    `reader` may be a binary stream (lines are decoded with `encoding`), a
    text stream, or any iterable of bytes / str lines. A text stream over a
    binary buffer (io.TextIOWrapper, open(..., "r")) is read through that
    buffer and decoded line by line with the stream's own encoding, so
    it should not have been read from before.
    """

    def __init__(
        self,
        reader: IO[Any] | Iterable[Any],
        includes: Iterable[PatternLike] | None = None,
        excludes: Iterable[PatternLike] | None = None,
        *,
        encoding: str = "utf-8",
    ) -> None:
        self.config = FilterConfig(includes=includes, excludes=excludes)
        self.encoding = encoding
        self.errors = "strict"

        buffer = getattr(reader, "buffer", None)
        if isinstance(reader, io.TextIOBase) and buffer is not None:
            self.encoding = reader.encoding or encoding
            self.errors = reader.errors or "strict"
            reader = buffer

        self._lines = _raw_lines(reader)
        self._done = False

    @classmethod
    def from_config(
        cls,
        reader: IO[Any] | Iterable[Any],
        config: FilterConfig,
        *,
        encoding: str = "utf-8",
    ) -> "FilterIterator":
        return cls(reader, config.includes, config.excludes, encoding=encoding)

    def __iter__(self) -> "FilterIterator":
        return self

    def __next__(self) -> LineResult:
        while not self._done:
            try:
                raw = next(self._lines)
            except StopIteration:
                self._done = True
                break
            except (OSError, UnicodeDecodeError) as e:
                self._done = True
                logger.debug("Read error, stopping iteration: %s", e)
                return ReadFailure(e)

            if isinstance(raw, (bytes, bytearray)):
                try:
                    line = bytes(raw).decode(self.encoding, self.errors)
                except UnicodeDecodeError as e:
                    return ReadFailure(e)
            else:
                line = raw

            line = _strip_newline(line)
            if self.config.is_kept(line):
                return line
        raise StopIteration
