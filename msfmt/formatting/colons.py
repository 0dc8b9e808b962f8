"""Spacing around colons inside map literals."""

from __future__ import annotations

from typing import List

from .syntax import CLOSING_FOR_OPENING, OPENING_FOR_CLOSING

_HORIZONTAL_SPACE = " \t"


def format_colons(code: str) -> str:
    """Write ``key: value`` for every colon whose innermost bracket is ``{``.

    Colons anywhere else (slices, or no bracket at all) keep their spacing.
    Any closer pops the innermost bracket regardless of its kind.
    """
    if ":" not in code:
        return code
    output: List[str] = []
    stack: List[str] = []
    index = 0
    length = len(code)
    while index < length:
        char = code[index]
        index += 1
        if char == ":" and stack and stack[-1] == "{":
            end = len(output)
            while end > 0 and output[end - 1] in _HORIZONTAL_SPACE:
                end -= 1
            if end > 0 and output[end - 1] != "\n":
                del output[end:]
            output.append(char)
            while index < length and code[index] in _HORIZONTAL_SPACE:
                index += 1
            if index < length and code[index] != "\n":
                output.append(" ")
            continue
        if char in CLOSING_FOR_OPENING:
            stack.append(char)
        elif char in OPENING_FOR_CLOSING and stack:
            stack.pop()
        output.append(char)
    return "".join(output)


__all__ = ["format_colons"]
