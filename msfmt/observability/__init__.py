"""Logging helpers for msfmt."""

from .logging import get_logger, log_format_event

__all__ = ["get_logger", "log_format_event"]
