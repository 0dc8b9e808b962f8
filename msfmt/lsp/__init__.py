"""Language Server Protocol implementation for msfmt."""

from .server import MsfmtLanguageServer, create_server

__all__ = [
    "MsfmtLanguageServer",
    "create_server",
]
