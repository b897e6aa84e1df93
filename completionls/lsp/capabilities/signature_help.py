"""
textDocument/signatureHelp handler.

The signature help trigger characters are announced together with the
completion options; the actual signatures come from a SignatureHelper
registered for the document language. Languages without one get no
signature help.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING

from lsprotocol.types import SignatureHelp, SignatureHelpParams

from completionls.completion.suggestion import ByteOffset, SourceDocument
from completionls.lsp.capabilities.capabilities import SignatureHelpCapability
from completionls.lsp.offset_helper import position_to_offset
from completionls.lsp.workspace import WorkspaceDocuments

if TYPE_CHECKING:
    from completionls.lsp.completion_language_server import CompletionLanguageServer


class SignatureHelper(ABC):
    """Produces signature help for a document at a byte offset."""

    @abstractmethod
    async def signature_help(
        self, document: SourceDocument, offset: ByteOffset
    ) -> SignatureHelp | None:
        pass


class SignatureHelpHandler(SignatureHelpCapability):
    """Answers signature help requests from the registered helpers."""

    def __init__(
        self,
        server: CompletionLanguageServer,
        documents: WorkspaceDocuments,
        helpers: Mapping[str, SignatureHelper],
        default_language_id: str = "php",
    ) -> None:
        super().__init__(server)
        self.documents = documents
        self.helpers = helpers
        self.default_language_id = default_language_id

    @classmethod
    def from_server(cls, server: CompletionLanguageServer) -> SignatureHelpHandler:
        return cls(
            server,
            documents=WorkspaceDocuments(server.workspace),
            helpers=server.signature_helpers,
            default_language_id=server.config.default_language_id,
        )

    @property
    def name(self) -> str:
        return "signature_help"

    @property
    def description(self) -> str:
        return "Show the signature of the function being called"

    async def signature_help(self, params: SignatureHelpParams) -> SignatureHelp | None:
        document = self.documents.get(params.text_document.uri)
        language_id = document.language_id or self.default_language_id

        helper = self.helpers.get(language_id)
        if helper is None:
            return None

        source = SourceDocument(
            uri=document.uri, text=document.text, language_id=language_id
        )
        return await helper.signature_help(
            source, position_to_offset(document.text, params.position)
        )
