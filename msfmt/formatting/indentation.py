"""Indentation engine.

Indentation is computed in a single top-down walk over the line list by a
few mutually recursive procedures, each of which takes the index of the
first line it owns and returns the index of the first line it did not
consume:

* ``_process_body`` walks a plain sequence of statements (a function body
  or the top level) until it meets a line starting with one of its breaker
  keywords.
* ``_process_if_block`` handles ``if ... then`` with its ``else``/``else if``
  branches up to the closing ``end``.
* ``_process_simple_block`` handles ``while``, ``for`` and ``function``.
* ``_process_multiline`` handles continuation lines: unclosed brackets,
  trailing commas and colons, and binary operators at the end of a line.

Block bodies get one block unit prepended to their indentation.
Continuations get one multiline unit appended per nesting level; a line
following a binary operator gets an extra unit on top of that.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from msfmt.observability.logging import get_logger

from .lines import CodeLine
from .syntax import (
    bracket_balance,
    ends_with_keyword,
    ends_with_operation,
    is_incomplete,
    is_incomplete_non_operation,
    starts_with_closer,
    starts_with_keyword,
)

logger = get_logger("msfmt.formatting.indentation")

# ``if`` and ``function`` are detected separately.
SIMPLE_BLOCK_KEYWORDS = ("while", "for")

# ``function`` is usually the right-hand side of an assignment.
_FUNCTION_KEYWORD = re.compile(r"(?:\s|^)function(?:[(\s]|$)")


@dataclass(frozen=True)
class IndentConfig:
    """Indentation units used by the engine."""

    # Prepended once per enclosing if/while/for/function block.
    block_indent: str = "    "
    # Appended once per continuation level.
    multiline_indent: str = "  "


class MultilineResult(NamedTuple):
    index: int
    excess_closers: int


class Indenter:
    """Assigns indentation to an ordered list of :class:`CodeLine`."""

    def __init__(self, lines: Sequence[CodeLine], config: IndentConfig | None = None) -> None:
        self.lines = lines
        self.config = config or IndentConfig()
        self.unmatched_closers = 0

    def run(self) -> None:
        self._process_body(0)
        if self.unmatched_closers:
            logger.debug("Found %d unmatched closing bracket(s)", self.unmatched_closers)

    # ------------------------------------------------------------------
    # Indentation primitives
    # ------------------------------------------------------------------
    def _indent_block(self, start: int, end: int) -> None:
        for index in range(start, min(end, len(self.lines))):
            line = self.lines[index]
            line.indentation = self.config.block_indent + line.indentation

    def _indent_multiline(self, start: int, end: int) -> None:
        for index in range(start, min(end, len(self.lines))):
            self.lines[index].indentation += self.config.multiline_indent

    def _previous_ends_with_operation(self, index: int) -> bool:
        return index > 0 and ends_with_operation(self.lines[index - 1].code)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------
    def _process_body(self, index: int, *breakers: str) -> int:
        lines = self.lines
        while index < len(lines):
            code = lines[index].code

            if any(starts_with_keyword(code, breaker) for breaker in breakers):
                return index

            # Single line ifs have a statement after ``then``
            if starts_with_keyword(code, "if") and ends_with_keyword(code, "then"):
                index = self._process_if_block(index)
                continue

            if any(starts_with_keyword(code, keyword) for keyword in SIMPLE_BLOCK_KEYWORDS):
                index = self._process_simple_block(index)
                continue

            if _FUNCTION_KEYWORD.search(code):
                index = self._process_simple_block(index)
                continue

            if is_incomplete_non_operation(code):
                balance = bracket_balance(code)
                next_index, excess = self._process_multiline(balance.open, index)
                self.unmatched_closers += excess
                if self._previous_ends_with_operation(index):
                    self._indent_multiline(index, next_index)
                index = next_index
                continue

            if self._previous_ends_with_operation(index):
                self._indent_multiline(index, index + 1)
            index += 1
        return index

    def _process_if_block(self, index: int) -> int:
        """Indent an ``if ... then`` block and each of its ``else`` branches."""
        index += 1
        while True:
            next_index = self._process_body(index, "else", "end")
            self._indent_block(index, next_index)
            index = next_index
            if index >= len(self.lines):
                return index
            closing = self.lines[index].code
            index += 1
            if not starts_with_keyword(closing, "else"):
                return index

    def _process_simple_block(self, index: int) -> int:
        """Indent a ``while``/``for``/``function`` body; the ``end`` line is consumed as is."""
        index += 1
        next_index = self._process_body(index, "end")
        self._indent_block(index, next_index)
        return min(next_index + 1, len(self.lines))

    # ------------------------------------------------------------------
    # Continuations
    # ------------------------------------------------------------------
    def _process_multiline(self, openers: int, index: int) -> MultilineResult:
        """Indent the continuation lines following the line at ``index``.

        Args:
            openers: Brackets left open by the first line.
            index: Index of the line that starts the continuation.

        Returns:
            The index of the first line outside the continuation, and the
            number of closing brackets seen in excess of ``openers``.
        """
        lines = self.lines
        index += 1
        excess_closers = 0
        while index < len(lines):
            code = lines[index].code
            balance = bracket_balance(code)
            openers -= balance.closed

            if not is_incomplete(code):
                if openers < 0:
                    excess_closers = -openers
                if not starts_with_closer(code):
                    self._indent_multiline(index, index + 1)
                if self._previous_ends_with_operation(index):
                    self._indent_multiline(index, index + 1)
                return MultilineResult(index + 1, excess_closers)

            nested = False
            if balance.open > 0:
                nested = True
                next_index, excess = self._process_multiline(balance.open, index)
                self._indent_multiline(index, next_index)
                if self._previous_ends_with_operation(index):
                    self._indent_multiline(index, next_index)
                index = next_index
                openers = max(openers, 0) - excess

            if openers <= 0:
                excess_closers = -openers
                # a = [1,
                # ]
                if not nested and not starts_with_closer(code):
                    self._indent_multiline(index, index + 1)
                return MultilineResult(index, excess_closers)

            if nested:
                continue
            self._indent_multiline(index, index + 1)
            if self._previous_ends_with_operation(index):
                self._indent_multiline(index, index + 1)
            index += 1

        return MultilineResult(index, excess_closers)


def process_indentation(lines: Sequence[CodeLine], config: IndentConfig | None = None) -> None:
    """Assign indentation to ``lines`` in place."""
    Indenter(lines, config).run()


__all__ = ["IndentConfig", "Indenter", "MultilineResult", "process_indentation"]
