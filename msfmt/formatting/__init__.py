"""
Formatter for MiniScript source text.

The pipeline works on text and lines rather than on a syntax tree:

1. string literals and comment bodies are replaced by markers,
2. the text is split into lines and each line's code is normalized,
3. indentation is recomputed from block keywords and continuations,
4. colons inside map literals are spaced,
5. comments and literals are put back.

``format_code`` is the single entry point used by the CLI and the language
server.
"""

from __future__ import annotations

__all__ = [
    "DefaultFormattingRules",
    "FormattedResult",
    "FormattingOptions",
    "IndentConfig",
    "IndentStyle",
    "MiniscriptFormatter",
    "format_code",
]

from .core import FormattedResult, FormattingOptions, IndentStyle, MiniscriptFormatter, format_code
from .indentation import IndentConfig
from .rules import DefaultFormattingRules
