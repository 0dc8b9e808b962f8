"""
CLI command modules.

Each module implements one msfmt subcommand.
"""

from .format import cmd_format
from .lsp import cmd_lsp

__all__ = ["cmd_format", "cmd_lsp"]
