"""Core formatting pipeline for MiniScript source text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from msfmt.observability.logging import get_logger

from .colons import format_colons
from .extraction import extract_comments, extract_literals, restore_comments, restore_literals
from .indentation import IndentConfig, process_indentation
from .lines import CodeLine, break_line, join_lines, split_statements
from .normalize import normalize_code, strip_call_parentheses, strip_if_parentheses
from .syntax import is_incomplete

logger = get_logger("msfmt.formatting")


class IndentStyle(Enum):
    """Supported indentation styles."""
    SPACES = "spaces"
    TABS = "tabs"


@dataclass
class FormattingOptions:
    """Configuration options for MiniScript formatting."""

    indent_style: IndentStyle = IndentStyle.SPACES
    # Width of one block level (if/while/for/function bodies)
    indent_size: int = 4
    # Width of one continuation level
    multiline_indent_size: int = 2
    insert_final_newline: bool = False

    def to_indent_config(self) -> IndentConfig:
        """Build the unit strings used by the indentation engine.

        With tabs, block levels use one tab each while continuation levels
        stay spaces, so a continuation lines up within its block.
        """
        if self.indent_style == IndentStyle.TABS:
            block_indent = "\t"
        else:
            block_indent = " " * self.indent_size
        return IndentConfig(
            block_indent=block_indent,
            multiline_indent=" " * self.multiline_indent_size,
        )


@dataclass
class FormattedResult:
    """Result of formatting one document."""

    formatted_text: str
    is_changed: bool

    @property
    def line_count(self) -> int:
        return len(self.formatted_text.splitlines())


def _build_lines(code: str) -> List[CodeLine]:
    lines: List[CodeLine] = []
    for raw_line in split_statements(code):
        line, comment = break_line(raw_line)
        line = normalize_code(line)
        # Parentheses are meaningful inside a continuation: ``a +\nf(x)``
        if not lines or not is_incomplete(lines[-1].code):
            line = strip_call_parentheses(line)
        line = strip_if_parentheses(line)
        lines.append(CodeLine(code=line.strip(), comment=comment.strip()))
    return lines


def format_code(text: str, config: Optional[IndentConfig] = None) -> str:
    """Format a complete MiniScript document.

    Never raises: text that cannot be normalized safely passes through
    unchanged.  Formatting already formatted text returns it as is, which
    callers use to skip no-op edits.

    Args:
        text: The complete document text.
        config: Indentation units; defaults to four spaces per block level
            and two per continuation level.

    Returns:
        The formatted document, without a trailing newline.
    """
    stripped, literals = extract_literals(text)
    stripped, comments = extract_comments(stripped)

    lines = _build_lines(stripped)
    process_indentation(lines, config)
    logger.debug(
        "Formatted %d line(s) with %d literal(s) and %d comment(s)",
        len(lines),
        len(literals),
        len(comments),
    )

    code = format_colons(join_lines(lines))
    code = restore_comments(code, comments)
    return restore_literals(code, literals)


class MiniscriptFormatter:
    """Formats whole documents according to :class:`FormattingOptions`."""

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.options = options or FormattingOptions()
        self._indent_config = self.options.to_indent_config()

    def format_document(self, source_text: str) -> FormattedResult:
        """
        Format a complete MiniScript document.

        Args:
            source_text: The source code to format

        Returns:
            FormattedResult with formatted text and whether it differs from
            the source
        """
        formatted_text = format_code(source_text, self._indent_config)
        if self.options.insert_final_newline and formatted_text:
            formatted_text += "\n"
        return FormattedResult(
            formatted_text=formatted_text,
            is_changed=formatted_text != source_text,
        )
