from __future__ import annotations

from lsprotocol.types import CompletionItemKind

from completionls.completion.suggestion import SuggestionType

SUGGESTION_KINDS: dict[SuggestionType, CompletionItemKind] = {
    SuggestionType.METHOD: CompletionItemKind.Method,
    SuggestionType.FUNCTION: CompletionItemKind.Function,
    SuggestionType.CONSTRUCTOR: CompletionItemKind.Constructor,
    SuggestionType.FIELD: CompletionItemKind.Field,
    SuggestionType.VARIABLE: CompletionItemKind.Variable,
    SuggestionType.CLASS: CompletionItemKind.Class,
    SuggestionType.INTERFACE: CompletionItemKind.Interface,
    SuggestionType.MODULE: CompletionItemKind.Module,
    SuggestionType.PROPERTY: CompletionItemKind.Property,
    SuggestionType.UNIT: CompletionItemKind.Unit,
    SuggestionType.VALUE: CompletionItemKind.Value,
    SuggestionType.ENUM: CompletionItemKind.Enum,
    SuggestionType.KEYWORD: CompletionItemKind.Keyword,
    SuggestionType.SNIPPET: CompletionItemKind.Snippet,
    SuggestionType.COLOR: CompletionItemKind.Color,
    SuggestionType.FILE: CompletionItemKind.File,
    SuggestionType.REFERENCE: CompletionItemKind.Reference,
    SuggestionType.CONSTANT: CompletionItemKind.Constant,
}


def completion_kind(suggestion_type: SuggestionType | str | None) -> CompletionItemKind:
    """
    Map a suggestion type to an LSP completion item kind.

    Raw type strings are accepted if they name a SuggestionType value.
    Anything else falls back to Text.
    """
    if isinstance(suggestion_type, str):
        try:
            suggestion_type = SuggestionType(suggestion_type)
        except ValueError:
            return CompletionItemKind.Text

    if suggestion_type is None:
        return CompletionItemKind.Text

    return SUGGESTION_KINDS.get(suggestion_type, CompletionItemKind.Text)
