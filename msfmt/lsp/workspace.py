"""Open document tracking and formatting for the msfmt language server."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from lsprotocol.types import (
    DocumentFormattingParams,
    FormattingOptions as LspFormattingOptions,
    Position,
    Range,
    TextDocumentContentChangeEvent,
    TextDocumentItem,
    TextEdit,
)
from pygls.uris import to_fs_path

from msfmt.config import WorkspaceConfig, load_workspace_config
from msfmt.errors import ConfigError
from msfmt.formatting import FormattingOptions, IndentStyle, MiniscriptFormatter
from msfmt.observability.logging import log_format_event

from .state import DocumentState


class DocumentStore:
    """Keeps the text of open documents and answers formatting requests."""

    def __init__(self, root_uri: Optional[str] = None, config: Optional[WorkspaceConfig] = None) -> None:
        self.logger = logging.getLogger("msfmt.lsp.workspace")
        self.root_uri = root_uri
        self.root_path = self._resolve_root(root_uri)
        self.config = config
        self._open_documents: Dict[str, DocumentState] = {}

    def set_root(self, root_uri: Optional[str]) -> None:
        self.root_uri = root_uri
        self.root_path = self._resolve_root(root_uri)

    def reload_config(self) -> None:
        """Load the workspace config file, falling back to client options on error."""
        try:
            config = load_workspace_config(self.root_path)
        except ConfigError as exc:
            self.logger.warning("Ignoring workspace configuration: %s", exc.format())
            self.config = None
            return
        self.config = config if config.from_file else None
        if self.config is not None:
            self.logger.info("Loaded configuration from %s", self.config.path)

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------
    def did_open(self, item: TextDocumentItem) -> None:
        self._open_documents[item.uri] = DocumentState(uri=item.uri, text=item.text, version=item.version)

    def did_change(
        self,
        uri: str,
        version: int,
        changes: Sequence[TextDocumentContentChangeEvent],
    ) -> None:
        document = self._open_documents.get(uri)
        if document is None:
            initial_text = self._read_document_from_fs(uri)
            document = DocumentState(uri=uri, text=initial_text, version=version)
            self._open_documents[uri] = document
        self._apply_content_changes(document, changes)
        document.version = version

    def did_close(self, uri: str) -> None:
        self._open_documents.pop(uri, None)

    def document(self, uri: str) -> Optional[DocumentState]:
        return self._open_documents.get(uri)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    def formatting_options(
        self,
        text: str,
        client_options: Optional[LspFormattingOptions] = None,
    ) -> FormattingOptions:
        """Resolve options from the workspace config file or else the client request."""
        if self.config is not None:
            return self.config.format.to_options(original_text=text)
        options = FormattingOptions(insert_final_newline=text.endswith("\n"))
        if client_options is not None:
            if not client_options.insert_spaces:
                options.indent_style = IndentStyle.TABS
            if client_options.tab_size and client_options.tab_size > 0:
                options.indent_size = client_options.tab_size
        return options

    def format_document(self, params: DocumentFormattingParams) -> List[TextEdit]:
        document = self.document(params.text_document.uri)
        if document is None:
            return []
        options = self.formatting_options(document.text, getattr(params, "options", None))
        result = MiniscriptFormatter(options).format_document(document.text)
        log_format_event(
            path=document.uri,
            changed=result.is_changed,
            lines=result.line_count,
            mode="lsp",
            logger=self.logger,
        )
        if not result.is_changed:
            return []
        total_range = Range(
            start=Position(line=0, character=0),
            end=document.end_position(),
        )
        return [TextEdit(range=total_range, new_text=result.formatted_text)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _apply_content_changes(
        self,
        document: DocumentState,
        changes: Sequence[TextDocumentContentChangeEvent],
    ) -> None:
        # Each change is relative to the text left by the previous one
        for change in changes:
            change_range = getattr(change, "range", None)
            if change_range is None:
                document.update(change.text, document.version)
                continue
            document.apply_change(change.text, change_range.start, change_range.end)

    def _read_document_from_fs(self, uri: str) -> str:
        try:
            path = Path(to_fs_path(uri))
        except (TypeError, ValueError):
            return ""
        try:
            return path.read_text(encoding="utf-8")
        except OSError:
            return ""

    def _resolve_root(self, root_uri: Optional[str]) -> Path:
        if root_uri:
            try:
                return Path(to_fs_path(root_uri))
            except (TypeError, ValueError):
                return Path(root_uri)
        return Path.cwd()


__all__ = ["DocumentStore"]
