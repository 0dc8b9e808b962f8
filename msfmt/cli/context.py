"""CLI context: the workspace configuration a command runs against."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from msfmt.config import WorkspaceConfig, load_workspace_config
from msfmt.errors import ConfigError

from .errors import CLIConfigError, wrap_exception


@dataclass
class CLIContext:
    """Resolved settings shared by all commands of one invocation."""

    workspace_root: Path
    config: WorkspaceConfig


def get_cli_context(args: argparse.Namespace) -> CLIContext:
    """Build the context from ``--workspace`` and ``--config``, loading the config once."""
    cached: Optional[CLIContext] = getattr(args, "_cli_context", None)
    if cached is not None:
        return cached

    workspace_arg = getattr(args, "workspace", None)
    workspace_root = Path(workspace_arg).resolve() if workspace_arg else Path.cwd()
    config_arg = getattr(args, "config", None)
    config_path = Path(config_arg).resolve() if config_arg else None

    try:
        config = load_workspace_config(workspace_root, config_path)
    except ConfigError as exc:
        raise wrap_exception(
            exc,
            message=exc.format(),
            error_class=CLIConfigError,
            hint="Check the [format] and [files] sections of msfmt.toml",
        ) from exc

    context = CLIContext(workspace_root=workspace_root, config=config)
    setattr(args, "_cli_context", context)
    return context


__all__ = ["CLIContext", "get_cli_context"]
