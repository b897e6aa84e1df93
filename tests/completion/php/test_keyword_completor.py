from __future__ import annotations

import pytest

from completionls.completion.php.keyword_completor import (
    KEYWORD_SNIPPETS,
    PHP_KEYWORDS,
    KeywordCompletor,
)
from completionls.completion.suggestion import (
    ByteOffset,
    ByteOffsetRange,
    SourceDocument,
    SuggestionType,
)


def document(text: str) -> SourceDocument:
    return SourceDocument(uri="file:///test.php", text=text, language_id="php")


async def complete(text: str, offset: int | None = None):
    offset = len(text.encode()) if offset is None else offset
    async with KeywordCompletor().complete(document(text), ByteOffset(offset)) as stream:
        suggestions = [suggestion async for suggestion in stream]
    return suggestions, stream


@pytest.mark.asyncio
async def test_offers_all_keywords_in_statement_position():
    suggestions, stream = await complete("<?php\nfor")

    assert [s.name for s in suggestions] == PHP_KEYWORDS
    assert all(s.type == SuggestionType.KEYWORD for s in suggestions)
    assert stream.is_complete


@pytest.mark.asyncio
async def test_range_covers_word_being_typed():
    suggestions, _ = await complete("<?php\nfor")

    assert suggestions[0].range == ByteOffsetRange.from_ints(6, 9)


@pytest.mark.asyncio
async def test_control_structures_have_snippets():
    suggestions, _ = await complete("<?php\n")
    by_name = {s.name: s for s in suggestions}

    assert by_name["foreach"].snippet == KEYWORD_SNIPPETS["foreach"]
    assert by_name["echo"].snippet is None


@pytest.mark.parametrize("text", ["$foo->", "$foo->ba", "Foo::", "Foo::B", "$", "$fo"])
@pytest.mark.asyncio
async def test_nothing_in_member_or_variable_position(text):
    suggestions, _ = await complete(text)

    assert suggestions == []


@pytest.mark.asyncio
async def test_offset_past_end_is_clamped():
    suggestions, _ = await complete("<?php\nre", offset=100)

    assert suggestions[0].range == ByteOffsetRange.from_ints(6, 8)
