"""
Command-line interface for msfmt.

Subcommands:
    format  Format MiniScript files in place, or check/diff them
    lsp     Start the formatting language server over stdio
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from msfmt import __version__

from .commands import cmd_format, cmd_lsp
from .context import CLIContext, get_cli_context
from .errors import (
    CLIConfigError,
    CLIError,
    CLIFileNotFoundError,
    CLIRuntimeError,
    CLIValidationError,
    handle_cli_exception,
)


def _configure_logging(args) -> None:
    """Configure the ``msfmt`` logger from the CLI flag or environment."""
    # Determine log level from CLI arg, environment, or default
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('MSFMT_LOG_LEVEL', 'warn')
    ).lower()

    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }

    numeric_level = level_map.get(log_level, logging.WARNING)

    msfmt_logger = logging.getLogger('msfmt')
    msfmt_logger.setLevel(numeric_level)

    # Add console handler if not already present
    if not msfmt_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        msfmt_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        msfmt_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="msfmt - source formatter for the MiniScript language",
        prog="msfmt"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to an msfmt.toml or .msfmtrc configuration file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set MSFMT_VERBOSE=1)'
    )
    parser.add_argument(
        '--workspace',
        default=None,
        help='Workspace root directory (defaults to current working directory)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set MSFMT_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Format subcommand
    format_parser = subparsers.add_parser(
        'format',
        help='Format MiniScript source files'
    )
    format_parser.add_argument(
        'files',
        nargs='*',
        default=['.'],
        help='Files or directories to format (default: current directory)'
    )
    format_parser.add_argument(
        '--check',
        action='store_true',
        help='Check if files need formatting without making changes'
    )
    format_parser.add_argument(
        '--diff',
        action='store_true',
        help='Show diff of formatting changes'
    )
    format_parser.add_argument(
        '--stdin',
        action='store_true',
        help='Read source from standard input and write the result to standard output'
    )
    format_parser.set_defaults(func=cmd_format)

    # LSP subcommand
    lsp_parser = subparsers.add_parser(
        'lsp',
        help='Start the msfmt language server for editor integrations'
    )
    lsp_parser.set_defaults(func=cmd_lsp)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        Format every .ms file below the current directory:
        >>> main(['format'])  # doctest: +SKIP

        Fail when a file is not formatted:
        >>> main(['format', '--check', 'src'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    args.verbose = getattr(args, "verbose", False)

    # Configure logging level
    _configure_logging(args)

    # Execute command
    args.func(args)


__all__ = [
    "main",
    "build_parser",
    "CLIContext",
    "get_cli_context",
    "CLIError",
    "CLIConfigError",
    "CLIValidationError",
    "CLIRuntimeError",
    "CLIFileNotFoundError",
    "handle_cli_exception",
]


if __name__ == '__main__':  # pragma: no cover
    main()
