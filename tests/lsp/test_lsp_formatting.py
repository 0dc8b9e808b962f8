from __future__ import annotations

from lsprotocol.types import (
    Position,
    Range,
    TextDocumentContentChangeEvent_Type1,
    TextDocumentContentChangeEvent_Type2,
    TextDocumentItem,
)

from msfmt.config import WorkspaceConfig
from msfmt.lsp.workspace import DocumentStore


def test_formatting_returns_single_full_edit(store, open_document, formatting_params) -> None:
    uri = open_document("while a\nb=1\nend while\n")
    edits = store.format_document(formatting_params(uri))
    assert len(edits) == 1
    edit = edits[0]
    assert edit.new_text == "while a\n    b = 1\nend while\n"
    assert edit.range.start == Position(line=0, character=0)
    assert edit.range.end == Position(line=3, character=0)


def test_formatted_document_yields_no_edits(store, open_document, formatting_params) -> None:
    uri = open_document("while a\n    b = 1\nend while\n")
    assert store.format_document(formatting_params(uri)) == []


def test_unknown_document_yields_no_edits(store, formatting_params) -> None:
    assert store.format_document(formatting_params("file:///nowhere/x.ms")) == []


def test_missing_final_newline_is_preserved(store, open_document, formatting_params) -> None:
    uri = open_document("a=1")
    edits = store.format_document(formatting_params(uri))
    assert edits[0].new_text == "a = 1"
    assert edits[0].range.end == Position(line=0, character=3)


def test_client_options(store, open_document, formatting_params) -> None:
    uri = open_document("if a then\nb\nend if")
    tabs = store.format_document(formatting_params(uri, insert_spaces=False))
    assert tabs[0].new_text == "if a then\n\tb\nend if"
    two = store.format_document(formatting_params(uri, tab_size=2))
    assert two[0].new_text == "if a then\n  b\nend if"


def test_workspace_config_wins_over_client(tmp_path, formatting_params) -> None:
    (tmp_path / "msfmt.toml").write_text("[format]\nindent_size = 3\n", encoding="utf-8")
    store = DocumentStore(tmp_path.resolve().as_uri())
    store.reload_config()
    assert store.config is not None
    uri = (tmp_path / "a.ms").resolve().as_uri()
    store.did_open(TextDocumentItem(uri=uri, language_id="miniscript", version=1, text="while a\nb\nend while"))
    edits = store.format_document(formatting_params(uri, tab_size=8))
    assert edits[0].new_text == "while a\n   b\nend while"


def test_invalid_workspace_config_is_ignored(tmp_path) -> None:
    (tmp_path / "msfmt.toml").write_text("[format]\nindent_size = 0\n", encoding="utf-8")
    stale = WorkspaceConfig(root=tmp_path, path=tmp_path / "old.toml")
    store = DocumentStore(tmp_path.resolve().as_uri(), config=stale)
    store.reload_config()
    assert store.config is None


def test_utf16_end_position(store, open_document, formatting_params) -> None:
    uri = open_document('s="\U0001F600"')
    edits = store.format_document(formatting_params(uri))
    assert edits[0].new_text == 's = "\U0001F600"'
    assert edits[0].range.end == Position(line=0, character=6)


def test_full_change_replaces_text(store, open_document) -> None:
    uri = open_document("a=1")
    store.did_change(uri, 2, [TextDocumentContentChangeEvent_Type2(text="b=2")])
    document = store.document(uri)
    assert document.text == "b=2"
    assert document.version == 2


def test_incremental_changes_apply_in_order(store, open_document) -> None:
    uri = open_document("a=1\nb=2\n")
    changes = [
        TextDocumentContentChangeEvent_Type1(
            range=Range(start=Position(line=0, character=0), end=Position(line=0, character=1)),
            text="first\nx",
        ),
        TextDocumentContentChangeEvent_Type1(
            range=Range(start=Position(line=2, character=0), end=Position(line=2, character=1)),
            text="y",
        ),
    ]
    store.did_change(uri, 2, changes)
    assert store.document(uri).text == "first\nx=1\ny=2\n"


def test_close_forgets_document(store, open_document, formatting_params) -> None:
    uri = open_document("a=1")
    store.did_close(uri)
    assert store.document(uri) is None
    assert store.format_document(formatting_params(uri)) == []
