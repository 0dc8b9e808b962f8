from __future__ import annotations

from msfmt import __version__
from msfmt.config import WorkspaceConfig
from msfmt.lsp.server import MsfmtLanguageServer, create_server


def test_create_server() -> None:
    server = create_server()
    assert isinstance(server, MsfmtLanguageServer)
    assert server.name == "msfmt-lsp"
    assert server.version == __version__
    assert server.document_store.config is None


def test_explicit_config_is_kept(tmp_path) -> None:
    config = WorkspaceConfig(root=tmp_path, path=tmp_path / "msfmt.toml")
    server = create_server(workspace_config=config)
    assert server.document_store.config is config
