# regextractor/cli.py
from __future__ import annotations

import argparse
import logging
import re
import sys
from itertools import count
from typing import Any, Iterable, List, Optional

import numpy as np

from regextractor.core import DataTable, NamedRegex
from regextractor.core.regex import first_group_name
from regextractor.core.exceptions import ExtractionError, ReadFailure
from regextractor.io.extract import extract_file, filter_file

SEPARATOR = ";"


class InvalidExpression(Exception):
    """A command-line regex does not compile."""

    def __init__(self, expr: str, error: re.error) -> None:
        super().__init__(f"Invalid regular expression: '{expr}' ({error})")
        self.expr = expr


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        "regextractor",
        description="Extract data from line based text files like logs or gcode.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug).",
    )
    sub = p.add_subparsers(dest="command", required=True)

    ex = sub.add_parser("extract-data", help="Extracts data into a csv format.")
    ex.add_argument("-f", "--file", required=True, help="Input text file.")
    ex.add_argument(
        "-d",
        "--data-expr",
        action="append",
        default=[],
        help="Regex to extract data from a line. Can be specified several times "
        "to extract multiple values from a line.",
    )
    ex.add_argument(
        "-n",
        "--names",
        action="append",
        default=[],
        help="Name of the extracted data. Has to be the same order as --data-expr.",
    )
    _add_filter_args(ex)
    ex.add_argument(
        "-g",
        "--group",
        action="store_true",
        help="Use the first group of the match as data instead of the full match.",
    )
    ex.add_argument(
        "-b",
        "--base-name",
        default=None,
        help="Column used as the base (x-axis) of the extracted table.",
    )
    ex.add_argument(
        "--dtype",
        default="float32",
        choices=["float32", "float64"],
        help="Floating-point precision of the extracted values.",
    )

    fl = sub.add_parser("filter-data", help="Filter input based on regular expressions.")
    fl.add_argument("-f", "--file", required=True, help="Input text file.")
    _add_filter_args(fl)
    return p


def _add_filter_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-i",
        "--include-expr",
        action="append",
        default=[],
        help="Only lines matching one of these expressions are used. Can be "
        "specified several times. All lines are included if none is given.",
    )
    p.add_argument(
        "-s",
        "--skip-expr",
        action="append",
        default=[],
        help="Lines matching one of these expressions are skipped. Can be "
        "specified several times.",
    )


def _compile(expr: str) -> re.Pattern[str]:
    try:
        return re.compile(expr)
    except re.error as e:
        raise InvalidExpression(expr, e) from e


def resolve_names(exprs: Iterable[str], names: Iterable[str]) -> list[NamedRegex]:
    """
    Pair data-expressions with column names.

    Explicit names are used positionally; an expression without one is named
    after its capture group 1 when that group is named, otherwise after a
    running counter starting at 1.
    """
    names = list(names)
    counter = count(1)
    regexes: list[NamedRegex] = []
    for i, expr in enumerate(exprs):
        regex = _compile(expr)
        if i < len(names):
            name = names[i]
        else:
            name = first_group_name(regex) or str(next(counter))
        regexes.append(NamedRegex(name=name, regex=regex))
    return regexes


def format_value(value: Any) -> str:
    """Shortest positional form: 13, 12.5, NaN, inf."""
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def format_table(table: DataTable) -> list[str]:
    out = [SEPARATOR.join(table.get_names())]
    for row in table.get_rows():
        out.append(SEPARATOR.join(format_value(v) for v in row))
    return out


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _extract(args: argparse.Namespace) -> list[str]:
    regexes = resolve_names(args.data_expr, args.names)
    includes = [_compile(e) for e in args.include_expr]
    excludes = [_compile(e) for e in args.skip_expr]
    table = extract_file(
        args.file,
        regexes,
        includes=includes,
        excludes=excludes,
        base_name=args.base_name,
        group=args.group,
        dtype=np.dtype(args.dtype),
    )
    return format_table(table)


def _filter(args: argparse.Namespace) -> list[str]:
    includes = [_compile(e) for e in args.include_expr]
    excludes = [_compile(e) for e in args.skip_expr]
    return filter_file(args.file, includes=includes, excludes=excludes)


def main(argv: Optional[List[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "extract-data":
            output = _extract(args)
        else:
            output = _filter(args)
    except InvalidExpression as exc:
        print(exc, file=sys.stderr)
        return 2
    except ReadFailure as exc:
        print(f"Could not open specified file: '{args.file}' ({exc.error})", file=sys.stderr)
        return 1
    except ExtractionError as exc:
        print(f"Could not extract data from file '{args.file}': {exc}", file=sys.stderr)
        return 1

    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
