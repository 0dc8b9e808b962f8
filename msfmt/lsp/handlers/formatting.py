"""Formatting handler."""

from __future__ import annotations

from lsprotocol.types import DocumentFormattingParams


def register(server) -> None:
    store = server.document_store

    @server.feature("textDocument/formatting")
    async def _format(ls, params: DocumentFormattingParams):
        return store.format_document(params)
