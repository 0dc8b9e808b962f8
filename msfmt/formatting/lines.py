"""Logical line model."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

_BREAK_LINE = re.compile(r"^(\s*)(.*?)\s*(?://(.*?))?\s*$")
_SEPARATOR_BEFORE_COMMENT = re.compile(r";[^\S\n]*?//")
_SEPARATOR = re.compile(r";[^\S\n]*\n?")


@dataclass
class CodeLine:
    """One output row.

    ``indentation`` starts empty and is built up by the indentation engine;
    ``code`` is normalized and free of comments; ``comment`` holds what
    followed ``//`` (a comment marker while the pipeline runs).
    """

    code: str
    comment: str = ""
    indentation: str = ""

    def render(self) -> str:
        body = self.indentation + self.code
        if self.comment:
            if self.code:
                body += " "
            body += "//" + self.comment
        return body.rstrip()


def break_line(line: str) -> Tuple[str, str]:
    """Split a physical line into its code and trailing comment.

    The original indentation is discarded.
    """
    match = _BREAK_LINE.match(line)
    if match is None:  # pragma: no cover - the pattern matches any single line
        return line, ""
    return match.group(2), match.group(3) or ""


def split_statements(code: str) -> List[str]:
    """Split text into physical lines, turning ``;`` separators into line breaks.

    A separator right before a comment becomes the space in front of the
    ``//``.  Leading and trailing blank lines are removed.
    """
    code = code.replace("\r\n", "\n")
    code = _SEPARATOR_BEFORE_COMMENT.sub(" //", code)
    code = _SEPARATOR.sub("\n", code).strip()
    return code.split("\n")


def join_lines(lines: Iterable[CodeLine]) -> str:
    return "\n".join(line.render() for line in lines)


__all__ = ["CodeLine", "break_line", "join_lines", "split_statements"]
