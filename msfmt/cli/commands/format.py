"""The ``format`` command."""

from __future__ import annotations

import argparse
import difflib
import sys
from pathlib import Path
from typing import List

from msfmt.formatting import MiniscriptFormatter
from msfmt.observability.logging import get_logger, log_format_event

from ..context import CLIContext, get_cli_context
from ..errors import CLIFileNotFoundError, CLIValidationError, handle_cli_exception

logger = get_logger("msfmt.cli.format")


def collect_files(ctx: CLIContext, paths: List[str]) -> List[Path]:
    """
    Resolve command line paths into the list of files to format.

    Directories are searched recursively for files with a configured
    extension that are not excluded.  Files named explicitly are always
    included.

    Raises:
        CLIFileNotFoundError: If a path does not exist
    """
    files: List[Path] = []
    seen = set()
    for raw in paths:
        path = Path(raw)
        if not path.is_absolute():
            path = ctx.workspace_root / path
        if path.is_dir():
            candidates = list(ctx.config.iter_sources(path))
        elif path.is_file():
            candidates = [path]
        else:
            raise CLIFileNotFoundError(
                f"Path not found: {raw}",
                hint="Pass existing files or directories",
                context={"path": str(path)},
            )
        for candidate in candidates:
            key = candidate.resolve()
            if key in seen:
                continue
            seen.add(key)
            files.append(candidate)
    return files


def _format_stdin(ctx: CLIContext) -> None:
    source = sys.stdin.read()
    options = ctx.config.format.to_options(original_text=source)
    result = MiniscriptFormatter(options).format_document(source)
    log_format_event(path=None, changed=result.is_changed, lines=result.line_count, mode="stdin")
    sys.stdout.write(result.formatted_text)


def _display_path(ctx: CLIContext, path: Path) -> str:
    try:
        return path.resolve().relative_to(ctx.workspace_root).as_posix()
    except ValueError:
        return str(path)


def cmd_format(args: argparse.Namespace) -> None:
    """
    Handle the 'format' subcommand to format MiniScript source files.

    Args:
        args: Parsed command-line arguments containing:
            - files: List of files or directories to format
            - check: If True, only report files that need formatting
            - diff: If True, print a unified diff instead of writing
            - stdin: If True, format standard input to standard output

    Raises:
        SystemExit: If formatting encounters errors or check mode finds changes

    Examples:
        >>> args = argparse.Namespace(files=['main.ms'], check=False, diff=False, stdin=False)
        >>> cmd_format(args)  # doctest: +SKIP
        Formatted main.ms
        Formatted 1 file(s)
    """
    try:
        if args.check and args.diff:
            raise CLIValidationError(
                "--check and --diff cannot be combined",
                hint="Use --check in CI and --diff to inspect changes",
            )
        ctx = get_cli_context(args)

        if args.stdin:
            _format_stdin(ctx)
            return

        files = collect_files(ctx, args.files)
        if not files:
            print("No files to format")
            return

        changed_count = 0
        error_count = 0
        mode = "check" if args.check else "diff" if args.diff else "write"

        for file_path in files:
            display = _display_path(ctx, file_path)
            try:
                content = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Error reading {display}: {exc}", file=sys.stderr)
                logger.debug("Failed to read %s", file_path, exc_info=True)
                error_count += 1
                continue

            options = ctx.config.format.to_options(original_text=content)
            result = MiniscriptFormatter(options).format_document(content)
            log_format_event(path=display, changed=result.is_changed, lines=result.line_count, mode=mode)
            if not result.is_changed:
                continue

            changed_count += 1
            if args.check:
                print(f"Would reformat {display}")
            elif args.diff:
                diff = difflib.unified_diff(
                    content.splitlines(keepends=True),
                    result.formatted_text.splitlines(keepends=True),
                    fromfile=f"a/{display}",
                    tofile=f"b/{display}",
                )
                for line in diff:
                    sys.stdout.write(line if line.endswith("\n") else line + "\n")
            else:
                try:
                    file_path.write_text(result.formatted_text, encoding="utf-8")
                except OSError as exc:
                    print(f"Error writing {display}: {exc}", file=sys.stderr)
                    error_count += 1
                    continue
                print(f"Formatted {display}")

        # Summary
        if args.check:
            if changed_count > 0:
                print(f"{changed_count} file(s) would be reformatted")
                raise SystemExit(1)
            print("All files are already formatted")
        elif not args.diff:
            if changed_count > 0:
                print(f"Formatted {changed_count} file(s)")
            else:
                print("All files are already formatted")
        if error_count > 0:
            print(f"Encountered {error_count} error(s)", file=sys.stderr)
            raise SystemExit(1)

    except SystemExit:
        raise
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


__all__ = ["cmd_format", "collect_files"]
