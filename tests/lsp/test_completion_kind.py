from __future__ import annotations

import pytest
from lsprotocol.types import CompletionItemKind

from completionls.completion.suggestion import SuggestionType
from completionls.lsp.completion_kind import SUGGESTION_KINDS, completion_kind


def test_every_suggestion_type_has_a_kind():
    assert set(SUGGESTION_KINDS) == set(SuggestionType)


@pytest.mark.parametrize(
    "suggestion_type, kind",
    [
        (SuggestionType.METHOD, CompletionItemKind.Method),
        (SuggestionType.PROPERTY, CompletionItemKind.Property),
        (SuggestionType.VARIABLE, CompletionItemKind.Variable),
        (SuggestionType.CLASS, CompletionItemKind.Class),
        (SuggestionType.KEYWORD, CompletionItemKind.Keyword),
        (SuggestionType.CONSTANT, CompletionItemKind.Constant),
    ],
)
def test_known_types(suggestion_type, kind):
    assert completion_kind(suggestion_type) == kind


def test_raw_string_naming_a_type():
    assert completion_kind("method") == CompletionItemKind.Method


def test_unknown_string_falls_back_to_text():
    assert completion_kind("trait-alias") == CompletionItemKind.Text


def test_missing_type_falls_back_to_text():
    assert completion_kind(None) == CompletionItemKind.Text
