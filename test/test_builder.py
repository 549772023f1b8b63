# test/test_builder.py
import numpy as np
import pytest

from regextractor.core import (
    TableBuilder,
    DuplicateName,
    InvalidColumnName,
    InconsistentBuilderData,
    InvalidBaseName,
)


def test_builder_rejects_duplicate_names():
    with pytest.raises(DuplicateName):
        TableBuilder(["a", "b", "a"])


def test_builder_add_value_unknown_name():
    b = TableBuilder(["a"])
    with pytest.raises(InvalidColumnName):
        b.add_value("z", 1.0)


def test_build_preserves_declared_order():
    names = ["zeta", "alpha", "mid", "beta"]
    b = TableBuilder(names)
    for i, n in enumerate(names):
        b.add_value(n, float(i))

    dt = b.build()
    assert dt.names == tuple(names)
    assert [list(r) for r in dt.get_rows()] == [[0.0, 1.0, 2.0, 3.0]]


def test_build_rejects_uneven_columns():
    b = TableBuilder(["a", "b"])
    b.add_value("a", 1.0)
    b.add_value("a", 2.0)
    b.add_value("b", 3.0)
    assert b.lengths() == {"a": 2, "b": 1}
    with pytest.raises(InconsistentBuilderData):
        b.build()


def test_build_rejects_no_columns():
    with pytest.raises(InconsistentBuilderData):
        TableBuilder([]).build()


def test_build_empty_columns_gives_zero_rows():
    dt = TableBuilder(["a", "b"]).build()
    assert dt.row_count == 0
    assert dt.names == ("a", "b")


def test_build_with_base_name():
    b = TableBuilder(["time", "temp"])
    for t, v in [(0.0, 20.0), (0.5, 21.0)]:
        b.add_value("time", t)
        b.add_value("temp", v)

    dt = b.build("time")
    assert dt.base_index == 0
    assert list(dt.get_col_by_name_with_base("temp")) == [(0.0, 20.0), (0.5, 21.0)]

    with pytest.raises(InvalidBaseName):
        b.build("pressure")


def test_build_uses_dtype():
    b = TableBuilder(["a"], dtype=np.float32)
    b.add_value("a", 0.1)
    dt = b.build()
    assert dt.dtype == np.float32
    assert dt["a"].dtype == np.float32
