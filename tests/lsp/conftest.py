from __future__ import annotations

import pytest
from lsprotocol.types import (
    DocumentFormattingParams,
    FormattingOptions,
    TextDocumentIdentifier,
    TextDocumentItem,
)

from msfmt.lsp.workspace import DocumentStore


@pytest.fixture()
def store(tmp_path) -> DocumentStore:
    return DocumentStore(tmp_path.resolve().as_uri())


@pytest.fixture()
def open_document(store, tmp_path):
    """Open a document in ``store`` and return its URI."""

    def _open(text: str, name: str = "main.ms", version: int = 1) -> str:
        uri = (tmp_path / name).resolve().as_uri()
        store.did_open(TextDocumentItem(uri=uri, language_id="miniscript", version=version, text=text))
        return uri

    return _open


@pytest.fixture()
def formatting_params():
    def _params(uri: str, *, tab_size: int = 4, insert_spaces: bool = True) -> DocumentFormattingParams:
        return DocumentFormattingParams(
            text_document=TextDocumentIdentifier(uri=uri),
            options=FormattingOptions(tab_size=tab_size, insert_spaces=insert_spaces),
        )

    return _params
