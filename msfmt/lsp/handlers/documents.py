"""Document lifecycle handlers."""

from __future__ import annotations

from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
)

from ..workspace import DocumentStore


def register(server) -> None:
    store: DocumentStore = server.document_store

    @server.feature("textDocument/didOpen")
    async def _did_open(ls, params: DidOpenTextDocumentParams) -> None:
        store.did_open(params.text_document)

    @server.feature("textDocument/didChange")
    async def _did_change(ls, params: DidChangeTextDocumentParams) -> None:
        if not params.content_changes:
            return
        store.did_change(
            params.text_document.uri,
            params.text_document.version or 0,
            params.content_changes,
        )

    @server.feature("textDocument/didClose")
    async def _did_close(ls, params: DidCloseTextDocumentParams) -> None:
        store.did_close(params.text_document.uri)
