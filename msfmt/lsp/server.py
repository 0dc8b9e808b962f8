"""pygls based Language Server entrypoint."""

from __future__ import annotations

import os
from typing import Optional

from lsprotocol.types import InitializedParams
from pygls.server import LanguageServer

from msfmt import __version__
from msfmt.config import WorkspaceConfig

from .handlers import register_all
from .workspace import DocumentStore


class MsfmtLanguageServer(LanguageServer):
    """LanguageServer that formats MiniScript documents."""

    def __init__(self, workspace_config: Optional[WorkspaceConfig] = None) -> None:
        super().__init__(name="msfmt-lsp", version=__version__)
        self.document_store = DocumentStore(config=workspace_config)
        self._explicit_config = workspace_config is not None
        register_all(self)
        self._register_lifecycle_handlers()

    def _register_lifecycle_handlers(self) -> None:
        store = self.document_store

        @self.feature("initialized")
        async def _on_initialized(ls: "MsfmtLanguageServer", params: InitializedParams) -> None:  # noqa: ARG001
            store.set_root(ls.workspace.root_uri)
            if not ls._explicit_config:
                store.reload_config()
            ls.logger.info("Workspace root set to %s", store.root_path)


def create_server(workspace_config: Optional[WorkspaceConfig] = None) -> MsfmtLanguageServer:
    return MsfmtLanguageServer(workspace_config)


def main() -> None:
    server = create_server()
    server.logger.info("Starting msfmt LSP (pid=%s)", os.getpid())
    server.start_io()


if __name__ == "__main__":  # pragma: no cover
    main()
