"""Document level state tracking for the msfmt language server."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from lsprotocol.types import Position
from pygls.uris import to_fs_path

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def utf16_length(text: str) -> int:
    """Number of UTF-16 code units in ``text``."""
    return len(text.encode("utf-16-le")) // 2


def _column_to_index(line: str, character: int) -> int:
    """Map a UTF-16 column within ``line`` to a string index."""
    units = 0
    for index, char in enumerate(line):
        if units >= character:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(line)


@dataclass
class DocumentState:
    """Tracks the text of an open document and maps LSP positions into it."""

    uri: str
    text: str
    version: int
    path: Path = field(init=False)
    lines: List[str] = field(init=False)
    _line_offsets: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = self._resolve_path()
        self._set_text(self.text)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def update(self, text: str, version: int) -> None:
        self._set_text(text)
        self.version = version

    def apply_change(self, text: str, start: Position, end: Position) -> None:
        """Replace the text between two positions."""
        start_offset = self.offset_at(start)
        end_offset = max(self.offset_at(end), start_offset)
        self._set_text(self.text[:start_offset] + text + self.text[end_offset:])

    def offset_at(self, position: Position) -> int:
        line_index = min(max(position.line, 0), len(self.lines) - 1)
        if position.line >= len(self.lines):
            return len(self.text)
        line = self.lines[line_index]
        column = _column_to_index(line, max(position.character, 0))
        return self._line_offsets[line_index] + column

    def end_position(self) -> Position:
        """Position just past the last character, in UTF-16 units."""
        return Position(line=len(self.lines) - 1, character=utf16_length(self.lines[-1]))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _resolve_path(self) -> Path:
        try:
            return Path(to_fs_path(self.uri))
        except (TypeError, ValueError):
            return Path(self.uri)

    def _set_text(self, text: str) -> None:
        self.text = text
        offsets = [0]
        lines = []
        start = 0
        for match in _LINE_BREAK.finditer(text):
            lines.append(text[start:match.start()])
            start = match.end()
            offsets.append(start)
        lines.append(text[start:])
        self.lines = lines
        self._line_offsets = offsets


__all__ = ["DocumentState", "utf16_length"]
