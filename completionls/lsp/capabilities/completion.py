"""
textDocument/completion handler.

A request goes through these steps:

1. Resolve the open document and its language ("php" when the client
   did not send one).
2. Pick the completor registered for that language. Unsupported
   languages get an empty, complete list rather than an error.
3. Pull suggestions from the completor's stream one at a time, adapt
   each into a CompletionItem and hand control back to the event loop
   before pulling the next, so a cancellation can get through.
4. Stop as soon as the request is cancelled and return what has been
   collected so far, flagged incomplete. Otherwise the list is
   incomplete only if the completor says it did not exhaust its search.

Errors raised by the completor propagate: the client gets a failed
request rather than a silently truncated list.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from lsprotocol.types import (
    CompletionItem,
    CompletionList,
    CompletionParams,
    LogMessageParams,
    MessageType,
)

from completionls.completion.cancellation import CancellationToken
from completionls.completion.name_formatter import SuggestionNameFormatter
from completionls.completion.registry import CompletorRegistry
from completionls.completion.suggestion import SourceDocument
from completionls.exceptions import NoCompletorForLanguage
from completionls.lsp.capabilities.capabilities import CompletionCapability
from completionls.lsp.offset_helper import LineIndex
from completionls.lsp.suggestion_adapter import AdapterOptions, SuggestionAdapter
from completionls.lsp.workspace import WorkspaceDocuments

if TYPE_CHECKING:
    from completionls.lsp.completion_language_server import CompletionLanguageServer


class CompletionHandler(CompletionCapability):
    """Answers completion requests from the registered completors."""

    def __init__(
        self,
        server: CompletionLanguageServer,
        documents: WorkspaceDocuments,
        registry: CompletorRegistry,
        adapter: SuggestionAdapter,
        default_language_id: str = "php",
    ) -> None:
        super().__init__(server)
        self.documents = documents
        self.registry = registry
        self.adapter = adapter
        self.default_language_id = default_language_id

    @classmethod
    def from_server(cls, server: CompletionLanguageServer) -> CompletionHandler:
        config = server.config
        options = AdapterOptions(
            support_snippets=config.snippets and server.snippet_support,
            provide_text_edit=config.provide_text_edit,
        )
        return cls(
            server,
            documents=WorkspaceDocuments(server.workspace),
            registry=server.registry,
            adapter=SuggestionAdapter(
                SuggestionNameFormatter(config.trim_leading_dollar), options
            ),
            default_language_id=config.default_language_id,
        )

    @property
    def name(self) -> str:
        return "completion"

    @property
    def description(self) -> str:
        return "Complete PHP code from the completor registered for the document language"

    async def complete(
        self, params: CompletionParams, token: CancellationToken | None = None
    ) -> CompletionList:
        token = token or CancellationToken()

        # Raises DocumentNotFound, which the client must see.
        document = self.documents.get(params.text_document.uri)
        language_id = document.language_id or self.default_language_id

        try:
            completor = self.registry.completor_for(language_id)
        except NoCompletorForLanguage as e:
            self.server.window_log_message(
                LogMessageParams(type=MessageType.Warning, message=str(e))
            )
            return CompletionList(is_incomplete=False, items=[])

        lines = LineIndex(document.text)
        offset = lines.position_to_offset(params.position)
        source = SourceDocument(
            uri=document.uri, text=document.text, language_id=language_id
        )

        items: list[CompletionItem] = []
        is_incomplete = False

        async with completor.complete(source, offset) as suggestions:
            while True:
                if token.is_cancellation_requested:
                    is_incomplete = True
                    break

                try:
                    suggestion = await anext(suggestions)
                except StopAsyncIteration:
                    break
                except asyncio.CancelledError:
                    self._accept_cancellation(token)
                    continue

                items.append(self.adapter.adapt(suggestion, lines))

                try:
                    await asyncio.sleep(0)
                except asyncio.CancelledError:
                    self._accept_cancellation(token)

            is_incomplete = is_incomplete or not suggestions.is_complete

        self.server.window_log_message(
            LogMessageParams(
                type=MessageType.Log,
                message=f"Completion for {document.uri}: {len(items)} items"
                        f"{' (incomplete)' if is_incomplete else ''}",
            )
        )

        return CompletionList(is_incomplete=is_incomplete, items=items)

    def _accept_cancellation(self, token: CancellationToken) -> None:
        """
        Turn a cancellation of the request task (pygls cancels the task on
        $/cancelRequest) into a token cancellation, so the request still
        finishes with the items collected so far.
        """
        task = asyncio.current_task()
        if task is not None:
            task.uncancel()
        token.cancel()
