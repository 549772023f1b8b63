# core/datatable.py
from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence

import numpy as np

from .exceptions import (
    InconsistentContainerSize,
    InvalidBaseIndex,
    InvalidBaseName,
    InvalidColumnCount,
    InvalidColumnIndex,
    InvalidColumnName,
    InvalidRowIndex,
    TableError,
)


def as_float_dtype(dtype: Any) -> np.dtype:
    """Validate `dtype` as a numpy floating type (it must be able to hold NaN)."""
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise TableError(f"Invalid dtype: {dtype!r}") from e
    if not np.issubdtype(dt, np.floating):
        raise TableError(f"dtype must be a floating-point type, got {dt}")
    return dt


class DataTable:
    """
    Column-oriented table of floating-point values plus a base column.

    The base column is the x-axis of the table. It is either one of the value
    columns (selected by `base_index`) or, when no base index is set, an
    auto-generated 0, 1, 2, ... sequence with one entry per row.

    Design goals:
    - every column always has `row_count` values
    - index and name based access; accessors validate eagerly and
      return lazy iterators
    - read-only once handed out by the builder (only `add_row` mutates)
    """

    __slots__ = ("_dtype", "_names", "_columns", "_base_index", "_base_data", "_row_count")

    def __init__(
        self,
        columns: int,
        names: Sequence[str] | None = None,
        base_index: int | None = None,
        *,
        dtype: Any = np.float64,
    ) -> None:
        if not isinstance(columns, (int, np.integer)) or isinstance(columns, bool) or columns < 0:
            raise InvalidColumnCount(f"columns must be a non-negative int, got {columns!r}")
        columns = int(columns)

        if names is None:
            names = [str(i) for i in range(columns)]
        names = tuple(names)
        if len(names) != columns:
            raise InvalidColumnCount(
                f"Expected {columns} column names, got {len(names)}."
            )

        self._dtype = as_float_dtype(dtype)
        self._names: tuple[str, ...] = names
        self._columns: list[list[Any]] = [[] for _ in range(columns)]
        # Unchecked here: use new_with_base_index() for a validated index.
        self._base_index = None if base_index is None else int(base_index)
        self._base_data: list[Any] = []
        self._row_count = 0

    @classmethod
    def new_with_base_index(
        cls,
        columns: int,
        base_index: int,
        names: Sequence[str] | None = None,
        *,
        dtype: Any = np.float64,
    ) -> "DataTable":
        if not 0 <= base_index < columns:
            raise InvalidBaseIndex(
                f"Base index {base_index} out of range for {columns} column(s)."
            )
        return cls(columns, names, base_index, dtype=dtype)

    @classmethod
    def new_with_base_name(
        cls,
        columns: int,
        names: Sequence[str],
        base_name: str,
        *,
        dtype: Any = np.float64,
    ) -> "DataTable":
        names = tuple(names)
        try:
            index = names.index(base_name)
        except ValueError as e:
            raise InvalidBaseName(base_name) from e
        return cls.new_with_base_index(columns, index, names, dtype=dtype)

    def __repr__(self) -> str:
        return (
            f"DataTable(names={list(self._names)!r}, rows={self._row_count}, "
            f"base_index={self._base_index!r}, dtype={self._dtype})"
        )

    # ---- shape ----
    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def base_index(self) -> int | None:
        return self._base_index

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def base(self) -> np.ndarray:
        return np.asarray(self._base_column(), dtype=self._dtype)

    # ---- dict-like API ----
    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __getitem__(self, name: str) -> np.ndarray:
        return np.asarray(self._columns[self._index_of(name)], dtype=self._dtype)

    # ---- accessors ----
    def get_name(self, index: int) -> str:
        self._check_column_index(index)
        return self._names[index]

    def get_names(self) -> Iterator[str]:
        return iter(self._names)

    def get_col(self, index: int) -> Iterator[Any]:
        self._check_column_index(index)
        return iter(list(self._columns[index]))

    def get_col_by_name(self, name: str) -> Iterator[Any]:
        return self.get_col(self._index_of(name))

    def get_col_with_base(self, index: int) -> Iterator[tuple[Any, Any]]:
        self._check_column_index(index)
        base = self._base_column()
        column = self._columns[index]
        if len(base) != len(column):
            raise InconsistentContainerSize(
                f"Base has {len(base)} values but column {index} has {len(column)}."
            )
        return zip(list(base), list(column))

    def get_col_by_name_with_base(self, name: str) -> Iterator[tuple[Any, Any]]:
        return self.get_col_with_base(self._index_of(name))

    def get_row(self, index: int) -> Iterator[Any]:
        """Base value at row `index`, followed by every column's value."""
        if not isinstance(index, (int, np.integer)) or not 0 <= index < self._row_count:
            raise InvalidRowIndex(f"Row index {index!r} out of range ({self._row_count} rows).")
        row = [self._base_column()[index]]
        row.extend(col[index] for col in self._columns)
        return iter(row)

    def get_rows(self) -> Iterator[Iterator[Any]]:
        """One iterator per row over the value columns (the base is not included)."""
        columns = self._columns
        return (iter([col[i] for col in columns]) for i in range(self._row_count))

    def to_numpy(self) -> tuple[np.ndarray, dict[str, np.ndarray]]:
        """Return `(base, {name: values})` as freshly built numpy arrays."""
        base = np.array(self._base_column(), dtype=self._dtype)
        columns = {
            name: np.array(col, dtype=self._dtype)
            for name, col in zip(self._names, self._columns)
        }
        return base, columns

    # ---- mutation ----
    def add_row(self, values: Iterable[Any]) -> None:
        """Append one value per column and extend the base column."""
        row = [self._dtype.type(v) for v in values]
        if len(row) != self.column_count:
            raise InvalidColumnCount(
                f"Row has {len(row)} value(s), table has {self.column_count} column(s)."
            )
        if self._base_index is not None and not 0 <= self._base_index < self.column_count:
            raise InvalidBaseIndex(
                f"Base index {self._base_index} out of range for {self.column_count} column(s)."
            )

        for col, value in zip(self._columns, row):
            col.append(value)

        if self._base_index is not None:
            self._base_data.append(row[self._base_index])
        elif self._base_data:
            self._base_data.append(self._base_data[-1] + self._dtype.type(1))
        else:
            self._base_data.append(self._dtype.type(0))
        self._row_count += 1

    # ---- internals ----
    def _base_column(self) -> list[Any]:
        if self._base_index is None:
            return self._base_data
        if not 0 <= self._base_index < self.column_count:
            raise InvalidBaseIndex(
                f"Base index {self._base_index} out of range for {self.column_count} column(s)."
            )
        return self._columns[self._base_index]

    def _index_of(self, name: str) -> int:
        try:
            return self._names.index(name)
        except ValueError as e:
            raise InvalidColumnName(name) from e

    def _check_column_index(self, index: int) -> None:
        if not isinstance(index, (int, np.integer)) or not 0 <= index < self.column_count:
            raise InvalidColumnIndex(
                f"Column index {index!r} out of range ({self.column_count} columns)."
            )
