"""Tests for map colon spacing."""

import pytest

from msfmt.formatting.colons import format_colons


@pytest.mark.parametrize("code,expected", [
    ("{a:1}", "{a: 1}"),
    ("{a :1}", "{a: 1}"),
    ("{a:\t 1}", "{a: 1}"),
    ("{a: {b:2}}", "{a: {b: 2}}"),
    ("{a: [1:2]}", "{a: [1:2]}"),
    ("{f(x):1}", "{f(x): 1}"),
])
def test_map_colons(code, expected):
    assert format_colons(code) == expected


@pytest.mark.parametrize("code", ["a[1:2]", "a : b", "x = 1", "[{}:1]"])
def test_other_colons_untouched(code):
    assert format_colons(code) == code


def test_colon_at_line_end_gets_no_trailing_space():
    assert format_colons("{a:\n  1}") == "{a:\n  1}"


def test_colon_at_line_start_keeps_indentation():
    assert format_colons("{a\n  :1}") == "{a\n  : 1}"


def test_lines_are_never_joined():
    code = "m = {\n  a:1,\n  b:2\n}"
    assert format_colons(code) == "m = {\n  a: 1,\n  b: 2\n}"


def test_unbalanced_closers():
    assert format_colons("]]{a:1}") == "]]{a: 1}"
