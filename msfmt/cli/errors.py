"""
Error handling for the msfmt CLI.

This module provides the exception hierarchy for CLI operations, with error
codes, hints and user-friendly formatting.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional


# Maximum length for traceback output in CLI
_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIConfigError(CLIError):
    """
    Configuration file or workspace setup errors.

    Raised when the workspace configuration file is missing, unreadable or
    holds invalid values.
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_CONFIG_ERROR')
        super().__init__(message, **kwargs)


class CLIValidationError(CLIError):
    """
    Invalid command arguments or options.

    Raised when:
    - Incompatible options are used together
    - Argument values are invalid
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_VALIDATION_ERROR')
        super().__init__(message, **kwargs)


class CLIRuntimeError(CLIError):
    """Errors during command execution."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_RUNTIME_ERROR')
        super().__init__(message, **kwargs)


class CLIFileNotFoundError(CLIError):
    """Source file or directory given on the command line does not exist."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_FILE_NOT_FOUND')
        super().__init__(message, **kwargs)


def format_cli_error(
    exc: BaseException,
    *,
    verbose: bool = False,
    include_traceback: bool = False
) -> str:
    """
    Format exception for CLI display with context and hints.

    Args:
        exc: Exception to format
        verbose: Include additional context and metadata
        include_traceback: Include full Python traceback

    Returns:
        Formatted error message suitable for CLI output

    Examples:
        >>> try:
        ...     raise CLIValidationError("--check and --diff are exclusive", hint="Pick one")
        ... except Exception as e:
        ...     print(format_cli_error(e))
        Error [CLI_VALIDATION_ERROR]: --check and --diff are exclusive
        Hint: Pick one
    """
    lines = []

    if isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")

        if exc.hint:
            lines.append(f"Hint: {exc.hint}")

        if verbose and exc.context:
            lines.append("\nContext:")
            for key, value in exc.context.items():
                lines.append(f"  {key}: {value}")
    else:
        # Errors from the library know how to render themselves
        formatter = getattr(exc, "format", None)
        if callable(formatter):
            lines.append(f"Error: {formatter()}")
        else:
            lines.append(f"Error: {exc.__class__.__name__}: {exc}")

    if include_traceback:
        lines.append("\nTraceback:")
        lines.append(format_traceback_excerpt())

    return "\n".join(lines)


def format_traceback_excerpt() -> str:
    """
    Format current exception traceback with size limit.

    Note:
        Should only be called within an exception handler context.
    """
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def wrap_exception(
    exc: BaseException,
    *,
    message: str,
    error_class: type = CLIRuntimeError,
    **kwargs
) -> CLIError:
    """
    Wrap a generic exception as a CLI-specific error.

    The original exception is kept in the error context.

    Examples:
        >>> try:
        ...     raise ValueError("bad indent_size")
        ... except ValueError as e:
        ...     err = wrap_exception(e, message="Invalid configuration", error_class=CLIConfigError)
        >>> err.context["original_type"]
        'ValueError'
    """
    context = kwargs.get('context', {})
    context['original_exception'] = str(exc)
    context['original_type'] = exc.__class__.__name__
    kwargs['context'] = context

    return error_class(message, **kwargs)


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """
    Determine whether verbose error output is enabled.

    Respects an explicit flag and the MSFMT_VERBOSE/MSFMT_DEBUG
    environment variables.
    """
    return verbose_flag or _env_flag("MSFMT_VERBOSE") or _env_flag("MSFMT_DEBUG")


def cli_reraise_enabled() -> bool:
    """
    Determine whether exceptions should be re-raised instead of exiting.

    Controlled by MSFMT_RERAISE or MSFMT_DEBUG environment variables.
    """
    return _env_flag("MSFMT_RERAISE") or _env_flag("MSFMT_DEBUG")


def handle_cli_exception(
    exc: BaseException,
    *,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """
    Handle exception at CLI top-level with proper formatting and exit.

    Note:
        This function calls sys.exit() and does not return.
    """
    verbose_effective = cli_verbose_enabled(verbose)
    if cli_reraise_enabled():
        raise exc

    error_message = format_cli_error(
        exc,
        verbose=verbose_effective,
        include_traceback=verbose_effective
    )
    print(error_message, file=sys.stderr)

    sys.exit(exit_code)


__all__ = [
    "CLIError",
    "CLIConfigError",
    "CLIValidationError",
    "CLIRuntimeError",
    "CLIFileNotFoundError",
    "format_cli_error",
    "format_traceback_excerpt",
    "wrap_exception",
    "cli_verbose_enabled",
    "cli_reraise_enabled",
    "handle_cli_exception",
]
