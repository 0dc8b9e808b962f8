"""Line level normalization rules.

Each rule rewrites the code of a single line.  They run in a fixed order and
later rules rely on the output of earlier ones: the scientific notation rule
repairs what operator spacing did to ``1e-5``, the trailing comma rule relies
on commas being spaced already, and so on.
"""

from __future__ import annotations

import re
from typing import Callable, List, Tuple, Union

from .syntax import IDENTIFIER_CLASS, OPENING_FOR_CLOSING, is_identifier_char, starts_with_keyword

Replacement = Union[str, Callable[["re.Match[str]"], str]]

# (pattern, replacement) pairs applied in order by ``normalize_code``.
LINE_RULES: List[Tuple["re.Pattern[str]", Replacement]] = [
    # Collapse tabs and runs of spaces
    (re.compile(r"\s+"), " "),
    # No space around dots
    (re.compile(r"\s*(\.)\s*"), r"\1"),
    # No space after opening brackets
    (re.compile(r"([\[({])\s*"), r"\1"),
    # No space before closing brackets
    (re.compile(r"\s*([\])}])"), r"\1"),
    # One space between a closing bracket and a following token
    (re.compile(r"([)}\]])\s*([^\s.()\[\]{}-])"), r"\1 \2"),
    # Comma followed by one space
    (re.compile(r"\s*,\s*"), ", "),
    # Spaces around operators, except minus
    (re.compile(r"\s*([<>=!]=|[-+*/%^]=|[+*/%^<>=])\s*"), r" \1 "),
    # Minus followed by unary minus
    (re.compile(r"--"), "- -"),
    # Unary minus stays attached to its operand
    (re.compile(r"\s+-(\S)"), r" -\1"),
    # Binary minus, spaced on the right or at the end of the line
    (re.compile(r"\s*-(?:\s+|$)"), " - "),
    # Binary minus between two tokens
    (re.compile(r"(?<=[^\s\[({:])-(?=\S)"), " - "),
    # No spaces inside scientific notation
    (
        re.compile(rf"(?<![{IDENTIFIER_CLASS}])(\.?[0-9]+\.?[0-9]*)\s*e\s*([+-]?)\s*([0-9]+)"),
        r"\1e\2\3",
    ),
    # No trailing commas
    (re.compile(r"([^,\s]),\s*([\]}])"), r"\1\2"),
    # No empty parameter list after function
    (re.compile(rf"(?<![{IDENTIFIER_CLASS}])function\s*\(\s*\)"), "function"),
]


def normalize_code(code: str) -> str:
    """Apply every spacing rule to the code of one line."""
    for pattern, replacement in LINE_RULES:
        code = pattern.sub(replacement, code)
    return code


def strip_call_parentheses(line: str) -> str:
    """Turn a call statement ``f(a, b)`` into ``f a, b``.

    Only applies when everything in front of the final argument list is a
    plain call chain: identifiers, dots and balanced bracket groups such as
    ``items[0].run(x)``.  The chain may be empty, so ``(a + b)`` loses its
    parentheses too.  Anything else, like ``a = f(x)``, is left alone.
    """
    line = line.rstrip()
    if not line.endswith(")"):
        return line

    level = 1
    call_start = -1
    for index in range(len(line) - 2, -1, -1):
        char = line[index]
        if char == ")":
            level += 1
        elif char == "(":
            level -= 1
        if level == 0:
            call_start = index
            break
    if call_start < 0:
        return line

    level = 0
    opener = closer = ""
    for index in range(call_start - 1, -1, -1):
        char = line[index]
        if level > 0:
            if char == closer:
                level += 1
            elif char == opener:
                level -= 1
            continue
        if char == "." or is_identifier_char(char):
            continue
        if char not in OPENING_FOR_CLOSING:
            return line
        opener, closer = OPENING_FOR_CLOSING[char], char
        level += 1
    if level != 0:
        return line

    chain = line[:call_start]
    arguments = line[call_start + 1:-1]
    return f"{chain} {arguments}"


def strip_if_parentheses(line: str) -> str:
    """Turn ``if(cond) then ...`` into ``if cond then ...``.

    Redundant layers are all removed, so ``if ((cond)) then`` also becomes
    ``if cond then``.
    """
    if not starts_with_keyword(line, "if"):
        return line
    rest = line[2:].lstrip()
    if not rest.startswith("("):
        return line
    depth = 1
    for index in range(1, len(rest)):
        char = rest[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth == 0:
            after_closing = rest[index + 1:].lstrip()
            if not starts_with_keyword(after_closing, "then"):
                return line
            # if ((a)) then
            return strip_if_parentheses(f"if {rest[1:index]} {after_closing}")
    return line


__all__ = [
    "LINE_RULES",
    "normalize_code",
    "strip_call_parentheses",
    "strip_if_parentheses",
]
