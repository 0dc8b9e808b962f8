"""Named formatting presets."""

from __future__ import annotations

from .core import FormattingOptions, IndentStyle


class DefaultFormattingRules:
    """Preset option sets for the formatter."""

    @classmethod
    def standard(cls) -> FormattingOptions:
        """Four spaces per block, two per continuation, final newline."""
        return FormattingOptions(
            indent_style=IndentStyle.SPACES,
            indent_size=4,
            multiline_indent_size=2,
            insert_final_newline=True,
        )

    @classmethod
    def compact(cls) -> FormattingOptions:
        """Two spaces per block and per continuation."""
        return FormattingOptions(
            indent_style=IndentStyle.SPACES,
            indent_size=2,
            multiline_indent_size=2,
            insert_final_newline=True,
        )

    @classmethod
    def tabs(cls) -> FormattingOptions:
        """One tab per block, two spaces per continuation."""
        return FormattingOptions(
            indent_style=IndentStyle.TABS,
            indent_size=4,
            multiline_indent_size=2,
            insert_final_newline=True,
        )
