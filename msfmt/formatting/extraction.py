"""Literal and comment extraction.

String literals and comment bodies are lifted out of the text before any
rewriting happens and replaced by markers, so the normalization rules never
see quotes, operators inside strings or free-form comment prose.  Each call
owns its own side tables; they are only appended to and are restored by index
at the very end of the pipeline.

Markers:

* a string literal becomes ``"$<n>"``.  Quotes never survive outside a
  marker, so the quoted form cannot collide with code.
* a comment body becomes ``//$<n>``; the ``//`` stays in the text so the line
  splitter still recognises the comment.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

QUOTE = '"'

_LITERAL_MARKER = re.compile(r'"\$(\d+)"')
_COMMENT_MARKER = re.compile(r"//\$(\d+)")
_COMMENT_SPLIT = re.compile(r"^(.*?//)(.*)$")


def literal_marker(index: int) -> str:
    return f'"${index}"'


def comment_marker(index: int) -> str:
    return f"//${index}"


def extract_literals(code: str) -> Tuple[str, List[str]]:
    """Replace every string literal of ``code`` with a marker.

    A doubled quote inside a string is an escaped quote and does not close
    it.  An unterminated string runs to the end of the input.

    Returns:
        The stripped text and the literals in order of appearance, each
        including its delimiters.
    """
    literals: List[str] = []
    parts: List[str] = []
    section_start = 0
    in_string = False
    index = 0
    length = len(code)
    while index < length:
        if code[index] == QUOTE:
            if not in_string:
                parts.append(code[section_start:index])
                section_start = index
                in_string = True
            elif index + 1 < length and code[index + 1] == QUOTE:
                index += 1
            else:
                parts.append(literal_marker(len(literals)))
                literals.append(code[section_start:index + 1])
                section_start = index + 1
                in_string = False
        index += 1

    if in_string:
        parts.append(literal_marker(len(literals)))
        literals.append(code[section_start:])
    else:
        parts.append(code[section_start:])
    return "".join(parts), literals


def extract_comments(code: str) -> Tuple[str, List[str]]:
    """Replace the body of every ``//`` comment with a marker.

    Expects literals to be extracted already, so the first ``//`` of a line
    always opens a comment.  Bodies are stored right-trimmed.  A line whose
    body is blank and whose ``//`` follows code is left alone; the line
    splitter drops such an empty trailing comment later.  A blank comment on
    a line of its own is kept.
    """
    lines = code.replace("\r\n", "\n").split("\n")
    comments: List[str] = []
    for position, line in enumerate(lines):
        match = _COMMENT_SPLIT.match(line)
        if match is None:
            continue
        prefix, body = match.group(1), match.group(2).rstrip()
        if not body and not prefix.lstrip().startswith("//"):
            continue
        lines[position] = prefix[:-2] + comment_marker(len(comments))
        comments.append(body)
    return "\n".join(lines), comments


def render_comment(body: str) -> str:
    """Render a stored comment body behind its ``//``.

    A body gets exactly one leading space unless it already starts with
    whitespace.  A body starting with ``/`` keeps the slash attached, so
    ``///note`` becomes ``/// note``.
    """
    if not body:
        return "//"
    if body[0] == "/":
        if len(body) > 1 and not body[1].isspace():
            body = "/ " + body[1:]
    elif not body[0].isspace():
        body = " " + body
    return "//" + body


def restore_comments(code: str, comments: Sequence[str]) -> str:
    return _COMMENT_MARKER.sub(lambda match: render_comment(comments[int(match.group(1))]), code)


def restore_literals(code: str, literals: Sequence[str]) -> str:
    return _LITERAL_MARKER.sub(lambda match: literals[int(match.group(1))], code)


__all__ = [
    "comment_marker",
    "extract_comments",
    "extract_literals",
    "literal_marker",
    "render_comment",
    "restore_comments",
    "restore_literals",
]
