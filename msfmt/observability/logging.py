"""Centralised logging helpers for msfmt."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str = "msfmt") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def log_format_event(
    *,
    path: Optional[str],
    changed: bool,
    lines: int,
    mode: str = "write",
    logger: Optional[logging.Logger] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit a structured log entry for one formatted document."""

    payload: Dict[str, Any] = {
        "path": path or "<stdin>",
        "changed": changed,
        "lines": lines,
        "mode": mode,
    }
    if extras:
        payload.update(extras)
    target_logger = logger or get_logger("msfmt.format")
    target_logger.info(
        "Formatted document",
        extra={"msfmt_event": "format", "msfmt_data": payload},
    )
