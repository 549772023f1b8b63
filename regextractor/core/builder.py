# core/builder.py
from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from .datatable import DataTable, as_float_dtype
from .exceptions import DuplicateName, InconsistentBuilderData, InvalidColumnName


class TableBuilder:
    """
    Accumulates values per column name, then emits a consistent DataTable.

    Buffers are kept in declaration order, and the built table lists its
    columns in that same order.
    """

    def __init__(self, names: Iterable[str], *, dtype: Any = np.float64) -> None:
        self._dtype = as_float_dtype(dtype)
        self._data: dict[str, list[Any]] = {}
        for name in names:
            if name in self._data:
                raise DuplicateName(f"Column '{name}' declared more than once.")
            self._data[name] = []

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._data)

    def lengths(self) -> dict[str, int]:
        return {name: len(buf) for name, buf in self._data.items()}

    def add_value(self, name: str, value: Any) -> None:
        try:
            buf = self._data[name]
        except KeyError as e:
            raise InvalidColumnName(name) from e
        buf.append(value)

    def build(self, base_name: str | None = None) -> DataTable:
        length = self._common_length()

        names = self.names
        if base_name is not None:
            table = DataTable.new_with_base_name(
                len(names), names, base_name, dtype=self._dtype
            )
        else:
            table = DataTable(len(names), names, dtype=self._dtype)

        buffers = list(self._data.values())
        for i in range(length):
            table.add_row([buf[i] for buf in buffers])
        return table

    def _common_length(self) -> int:
        lens = set(self.lengths().values())
        if not lens:
            raise InconsistentBuilderData("Cannot build a table without columns.")
        if len(lens) > 1:
            raise InconsistentBuilderData(
                f"Columns have different lengths: {self.lengths()}"
            )
        return lens.pop()
