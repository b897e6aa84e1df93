"""
Suggestion -> CompletionItem translation.
"""

from __future__ import annotations

from dataclasses import dataclass

from lsprotocol.types import CompletionItem, InsertTextFormat, Range, TextEdit

from completionls.completion.name_formatter import SuggestionNameFormatter
from completionls.completion.suggestion import Suggestion
from completionls.lsp.completion_kind import completion_kind
from completionls.lsp.offset_helper import LineIndex


@dataclass(frozen=True)
class AdapterOptions:
    """
    Attributes:
        support_snippets: Client accepts snippet insert text.
        provide_text_edit: Emit a TextEdit replacing the suggestion's range.
    """

    support_snippets: bool = False
    provide_text_edit: bool = False


class SuggestionAdapter:
    """Builds LSP completion items from completor suggestions."""

    def __init__(
        self,
        formatter: SuggestionNameFormatter,
        options: AdapterOptions | None = None,
    ) -> None:
        self.formatter = formatter
        self.options = options or AdapterOptions()

    def adapt(self, suggestion: Suggestion, lines: LineIndex) -> CompletionItem:
        """
        Args:
            suggestion: The suggestion to translate.
            lines: Line index of the document the suggestion's range refers to.
        """
        label = self.formatter.format(suggestion)
        insert_text = label
        insert_text_format = InsertTextFormat.PlainText

        if self.options.support_snippets and suggestion.snippet:
            insert_text = suggestion.snippet
            insert_text_format = InsertTextFormat.Snippet

        return CompletionItem(
            label=label,
            kind=completion_kind(suggestion.type),
            detail=suggestion.short_description,
            documentation=suggestion.documentation,
            insert_text=insert_text,
            insert_text_format=insert_text_format,
            text_edit=self._text_edit(suggestion, lines),
        )

    def _text_edit(self, suggestion: Suggestion, lines: LineIndex) -> TextEdit | None:
        if not self.options.provide_text_edit:
            return None

        if suggestion.range is None:
            return None

        # Replaces the typed word with the bare name; any snippet
        # placeholders still come from insert_text.
        return TextEdit(
            range=Range(
                start=lines.offset_to_position(suggestion.range.start),
                end=lines.offset_to_position(suggestion.range.end),
            ),
            new_text=suggestion.name,
        )
