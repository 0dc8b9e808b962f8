"""The ``lsp`` command."""

from __future__ import annotations

import argparse
import os
import sys

from ..context import get_cli_context
from ..errors import CLIRuntimeError, handle_cli_exception


def cmd_lsp(args: argparse.Namespace) -> None:
    """
    Handle the 'lsp' subcommand to launch the msfmt language server.

    Starts the language server over stdio so editors can request
    document formatting.

    Args:
        args: Parsed command-line arguments (no specific args required)

    Raises:
        SystemExit: If the language server fails to start
    """
    try:
        ctx = get_cli_context(args)

        try:
            from msfmt.lsp.server import create_server
        except ImportError as exc:
            raise CLIRuntimeError(
                "pygls is not installed",
                hint="Install with: pip install msfmt",
            ) from exc

        server = create_server(workspace_config=ctx.config if ctx.config.from_file else None)
        pid = os.getpid()
        print(f"Starting msfmt language server (pid={pid})", file=sys.stderr)

        try:
            server.start_io()
        except KeyboardInterrupt:
            print("Language server interrupted by user.", file=sys.stderr)
        except Exception as exc:
            raise CLIRuntimeError(
                f"Language server stopped unexpectedly: {exc}",
            ) from exc

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


__all__ = ["cmd_lsp"]
