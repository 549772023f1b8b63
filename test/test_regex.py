# test/test_regex.py
import re

import pytest

from regextractor.core import NamedRegex, FilterConfig


def test_named_regex_compiles_string_pattern():
    r = NamedRegex("t", r"T=(\d+)")
    assert isinstance(r.regex, re.Pattern)
    assert r.pattern == r"T=(\d+)"


def test_named_regex_equality_by_name_and_pattern():
    assert NamedRegex("t", r"\d+") == NamedRegex("t", re.compile(r"\d+"))
    assert NamedRegex("t", r"\d+") != NamedRegex("u", r"\d+")
    assert NamedRegex("t", r"\d+") != NamedRegex("t", r"\d*")


def test_named_regex_rejects_empty_name():
    with pytest.raises(ValueError):
        NamedRegex("", r"\d+")


def test_named_regex_invalid_pattern_raises():
    with pytest.raises(re.error):
        NamedRegex("x", r"(unclosed")


def test_first_group_name_is_group_one_only():
    assert NamedRegex("x", r"\d+").first_group_name() is None
    assert NamedRegex("x", r"(\d+)").first_group_name() is None
    assert NamedRegex("x", r"(?P<b>\d+) (?P<a>\d+)").first_group_name() == "b"
    assert NamedRegex("x", r"(\d+) (?P<later>\d+)").first_group_name() is None


def test_filter_config_empty_keeps_everything():
    cfg = FilterConfig()
    assert cfg.includes == () and cfg.excludes == ()
    assert cfg.is_kept("anything")
    assert cfg.is_kept("")


def test_filter_config_include_any():
    cfg = FilterConfig(includes=[r"^A", r"^C"])
    assert cfg.is_kept("A 1")
    assert cfg.is_kept("C 3")
    assert not cfg.is_kept("B 2")


def test_filter_config_search_semantics():
    cfg = FilterConfig(includes=[r"\d"])
    assert cfg.is_kept("abc 1 def")


def test_filter_config_exclude_overrides_include():
    cfg = FilterConfig(includes=[r"\d"], excludes=[r"error"])
    assert cfg.is_kept("ok 2")
    assert not cfg.is_kept("error 1")


def test_filter_config_lookaround():
    cfg = FilterConfig(includes=[r"(?<=T=)\d+"], excludes=[r"G1(?! X)"])
    assert cfg.is_kept("T=12")
    assert not cfg.is_kept("X=12")
    assert not cfg.is_kept("T=12 G1 Y")
    assert cfg.is_kept("T=12 G1 X")
