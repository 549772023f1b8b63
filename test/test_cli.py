# test/test_cli.py
import pytest

from regextractor import cli


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "print.gcode"
    path.write_text(
        "; start\n"
        "T=12.5 P=1\n"
        "T=13.0\n"
        "; error T=99\n"
    )
    return path


def _run(capsys, *argv):
    code = cli.main([str(a) for a in argv])
    out, err = capsys.readouterr()
    return code, out.splitlines(), err


def test_extract_data_csv_output(capsys, log_file):
    code, out, _ = _run(
        capsys,
        "extract-data", "-f", log_file,
        "-d", r"T=(\d+\.\d+)", "-n", "temp",
        "-d", r"P=(\d+)", "-n", "p",
        "-i", "T=", "-s", "error",
        "-g",
    )
    assert code == 0
    assert out == ["temp;p", "12.5;1", "13;NaN"]


def test_extract_data_auto_names(capsys, log_file):
    code, out, _ = _run(
        capsys,
        "extract-data", "--file", log_file,
        "--data-expr", r"T=(\d+\.\d+)",
        "--data-expr", r"P=(?P<power>\d+)",
        "--data-expr", r"Q=(\d+)",
        "--include-expr", r"^T",
        "--group",
    )
    assert code == 0
    assert out[0] == "1;power;2"
    assert out[1] == "12.5;1;NaN"


def test_extract_data_named_group_must_be_group_one(capsys, log_file):
    code, out, _ = _run(
        capsys,
        "extract-data", "-f", log_file,
        "-d", r"(T)=(?P<temp>\d+\.\d+)",
        "-i", r"^T",
    )
    assert code == 0
    assert out[0] == "1"


def test_extract_data_positional_names_then_fallback(capsys, log_file):
    code, out, _ = _run(
        capsys,
        "extract-data", "-f", log_file,
        "-d", r"T=(\d+\.\d+)", "-d", r"P=(\d+)",
        "-n", "temp",
        "-i", r"^T", "-g",
    )
    assert code == 0
    assert out[0] == "temp;1"


def test_extract_data_base_name(capsys, log_file):
    code, out, _ = _run(
        capsys,
        "extract-data", "-f", log_file,
        "-d", r"T=(\d+\.\d+)", "-n", "temp",
        "-b", "temp", "-i", r"^T", "-g",
        "--dtype", "float64",
    )
    assert code == 0
    assert out == ["temp", "12.5", "13"]


def test_filter_data(capsys, log_file):
    code, out, _ = _run(capsys, "filter-data", "-f", log_file, "-i", "T=", "-s", "error")
    assert code == 0
    assert out == ["T=12.5 P=1", "T=13.0"]


def test_filter_data_no_filters_is_identity(capsys, log_file):
    code, out, _ = _run(capsys, "filter-data", "-f", log_file)
    assert code == 0
    assert out == log_file.read_text().splitlines()


def test_invalid_regex(capsys, log_file):
    code, out, err = _run(capsys, "filter-data", "-f", log_file, "-i", "(unclosed")
    assert code == 2
    assert out == []
    assert "Invalid regular expression: '(unclosed'" in err


def test_missing_file(capsys, tmp_path):
    missing = tmp_path / "nope.log"
    code, out, err = _run(capsys, "extract-data", "-f", missing, "-d", r"\d")
    assert code == 1
    assert out == []
    assert str(missing) in err


def test_extraction_failure(capsys, log_file):
    code, out, err = _run(
        capsys,
        "extract-data", "-f", log_file,
        "-d", r"\d", "-n", "a", "-d", r"\d", "-n", "a",
    )
    assert code == 1
    assert out == []
    assert "Could not extract data" in err


def test_missing_subcommand_exits():
    with pytest.raises(SystemExit):
        cli.main([])


def test_format_value():
    import numpy as np

    assert cli.format_value(np.float32(13.0)) == "13"
    assert cli.format_value(np.float32(0.1)) == "0.1"
    assert cli.format_value(np.float64(np.nan)) == "NaN"
    assert cli.format_value(np.float64(np.inf)) == "inf"
    assert cli.format_value(np.float64(-2.5)) == "-2.5"
