"""Lexical predicates shared by the normalizer and the indentation engine.

None of these helpers validate syntax.  Brackets in particular are counted
without checking that an opener and a closer are of the same kind: any
closer cancels any opener.  Input is assumed to be valid MiniScript, and for
valid input kind checking never changes the answer.
"""

from __future__ import annotations

import re
from typing import Dict, NamedTuple, Optional

# Every code point above this one is a valid identifier character.
UNICODE_IDENTIFIER_THRESHOLD = 0x9F

# Character class body matching identifier characters, for use inside regexes.
IDENTIFIER_CLASS = "_0-9A-Za-z\u00a0-\U0010ffff"

CLOSING_FOR_OPENING: Dict[str, str] = {
    "{": "}",
    "[": "]",
    "(": ")",
}
OPENING_FOR_CLOSING: Dict[str, str] = {
    closer: opener for opener, closer in CLOSING_FOR_OPENING.items()
}

_ENDS_WITH_OPERATION = re.compile(r"(?:[<>=!]=|[+\-*/%^<>=])$")
_ENDS_INCOMPLETE = re.compile(r"[:,\[({]$")
_STARTS_WITH_CLOSER = re.compile(r"^[\]})]")


def is_identifier_char(char: Optional[str]) -> bool:
    """Return ``True`` when ``char`` may appear inside a MiniScript identifier."""
    if not char:
        return False
    if char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9"):
        return True
    return ord(char) > UNICODE_IDENTIFIER_THRESHOLD


def starts_with_keyword(code: str, keyword: str) -> bool:
    """Check that ``code`` starts with ``keyword`` as a whole word.

    ``forest`` does not start with the ``for`` keyword.
    """
    if not code.startswith(keyword):
        return False
    following = code[len(keyword)] if len(code) > len(keyword) else None
    return not is_identifier_char(following)


def ends_with_keyword(code: str, keyword: str) -> bool:
    """Check that ``code`` ends with ``keyword`` as a whole word."""
    if not code.endswith(keyword):
        return False
    boundary = len(code) - len(keyword) - 1
    preceding = code[boundary] if boundary >= 0 else None
    return not is_identifier_char(preceding)


def ends_with_operation(code: str) -> bool:
    """A line ending in a binary operator continues on the next line."""
    return _ENDS_WITH_OPERATION.search(code) is not None


def is_incomplete_non_operation(code: str) -> bool:
    """A line ending in ``:``, ``,`` or an opening bracket."""
    return _ENDS_INCOMPLETE.search(code) is not None


def is_incomplete(code: str) -> bool:
    """Check whether the statement on this line continues on the next one."""
    return ends_with_operation(code) or is_incomplete_non_operation(code)


def starts_with_closer(code: str) -> bool:
    return _STARTS_WITH_CLOSER.match(code) is not None


class BracketBalance(NamedTuple):
    """Unmatched brackets left over on a single line."""

    open: int
    closed: int


def bracket_balance(code: str) -> BracketBalance:
    """Count the openers and closers of ``code`` that are not paired up.

    ``[[]]`` balances to ``(0, 0)``, ``]][[`` to ``(2, 2)`` since the closers
    come first, and ``[(})`` to ``(0, 0)`` because kinds are not compared.
    """
    opened = 0
    closed = 0
    for char in code:
        if char in OPENING_FOR_CLOSING:
            if opened > 0:
                opened -= 1
            else:
                closed += 1
        elif char in CLOSING_FOR_OPENING:
            opened += 1
    return BracketBalance(opened, closed)


__all__ = [
    "BracketBalance",
    "CLOSING_FOR_OPENING",
    "IDENTIFIER_CLASS",
    "OPENING_FOR_CLOSING",
    "bracket_balance",
    "ends_with_keyword",
    "ends_with_operation",
    "is_identifier_char",
    "is_incomplete",
    "is_incomplete_non_operation",
    "starts_with_closer",
    "starts_with_keyword",
]
