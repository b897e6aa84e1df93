"""
Read access to the documents open in the editor.

pygls keeps the text of every open document up to date through the
didOpen/didChange/didClose notifications. Handlers take a snapshot of a
document through WorkspaceDocuments for the duration of one request.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygls.workspace import Workspace

from completionls.exceptions import DocumentNotFound


@dataclass(frozen=True)
class Document:
    """Snapshot of an open text document."""

    uri: str
    text: str
    language_id: str | None = None


class WorkspaceDocuments:
    """Looks up open documents by URI."""

    def __init__(self, workspace: Workspace) -> None:
        self.workspace = workspace

    def get(self, uri: str) -> Document:
        """
        Return a snapshot of the open document at uri.

        Raises:
            DocumentNotFound: The client never opened uri (or closed it).
        """
        # Workspace.get_text_document() would read unopened files from
        # disk; only documents the client opened are served.
        text_document = self.workspace.text_documents.get(uri)
        if text_document is None:
            raise DocumentNotFound(uri)

        return Document(
            uri=text_document.uri,
            text=text_document.source,
            language_id=text_document.language_id or None,
        )
