"""Tests for the lexical predicates."""

import pytest

from msfmt.formatting.syntax import (
    BracketBalance,
    bracket_balance,
    ends_with_keyword,
    ends_with_operation,
    is_identifier_char,
    is_incomplete,
    starts_with_closer,
    starts_with_keyword,
)


class TestIdentifierChars:

    @pytest.mark.parametrize("char", ["a", "Z", "_", "0", "\u00e9", "\u4e2d"])
    def test_identifier(self, char):
        assert is_identifier_char(char)

    @pytest.mark.parametrize("char", [" ", ".", "(", "-", "\u0085", "", None])
    def test_not_identifier(self, char):
        assert not is_identifier_char(char)


class TestKeywords:

    def test_starts_with(self):
        assert starts_with_keyword("for x in y", "for")
        assert starts_with_keyword("end", "end")
        assert not starts_with_keyword("forest", "for")
        assert not starts_with_keyword("fo", "for")

    def test_ends_with(self):
        assert ends_with_keyword("if a then", "then")
        assert ends_with_keyword("then", "then")
        assert not ends_with_keyword("if a athen", "then")


class TestIncomplete:

    @pytest.mark.parametrize("code", ["a +", "a -", "a *", "a ==", "a !=", "a <=", "a =", "a ^"])
    def test_operation(self, code):
        assert ends_with_operation(code)
        assert is_incomplete(code)

    @pytest.mark.parametrize("code", ["f(", "x = [", "m = {", "a,", "{a:"])
    def test_open_constructs(self, code):
        assert is_incomplete(code)
        assert not ends_with_operation(code)

    @pytest.mark.parametrize("code", ["a", "f(x)", "end if", ""])
    def test_complete(self, code):
        assert not is_incomplete(code)


class TestBrackets:

    @pytest.mark.parametrize("code,expected", [
        ("[[]]", (0, 0)),
        ("]][[", (2, 2)),
        ("f(a, [", (2, 0)),
        ("])", (0, 2)),
        ("[(})", (0, 0)),
        ("", (0, 0)),
    ])
    def test_balance(self, code, expected):
        assert bracket_balance(code) == BracketBalance(*expected)

    def test_starts_with_closer(self):
        assert starts_with_closer("])")
        assert starts_with_closer("}")
        assert not starts_with_closer("a]")
