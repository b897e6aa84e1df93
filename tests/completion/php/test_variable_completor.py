from __future__ import annotations

import pytest

from completionls.completion.php.variable_completor import VariableCompletor
from completionls.completion.suggestion import (
    ByteOffset,
    ByteOffsetRange,
    SourceDocument,
    SuggestionType,
)


async def complete(text: str, offset: int | None = None):
    offset = len(text.encode()) if offset is None else offset
    source = SourceDocument(uri="file:///test.php", text=text, language_id="php")
    async with VariableCompletor().complete(source, ByteOffset(offset)) as stream:
        return [suggestion async for suggestion in stream]


@pytest.mark.asyncio
async def test_offers_variables_in_order_of_first_use():
    text = "<?php\n$foo = 1;\n$bar = $foo;\n$"

    suggestions = await complete(text)

    assert [s.name for s in suggestions] == ["$foo", "$bar"]
    assert all(s.type == SuggestionType.VARIABLE for s in suggestions)


@pytest.mark.asyncio
async def test_range_covers_dollar_and_partial_name():
    text = "<?php\n$foo = 1;\n$f"

    suggestions = await complete(text)

    assert [s.name for s in suggestions] == ["$foo"]
    assert suggestions[0].range == ByteOffsetRange.from_ints(16, 18)


@pytest.mark.asyncio
async def test_variable_under_cursor_is_not_offered():
    text = "<?php\n$only"

    assert await complete(text) == []


@pytest.mark.asyncio
async def test_cursor_inside_existing_variable():
    text = "<?php\n$foo = $bar;"

    # Cursor between "$" and "bar".
    suggestions = await complete(text, offset=14)

    assert [s.name for s in suggestions] == ["$foo"]


@pytest.mark.asyncio
async def test_multibyte_variable_names():
    text = "<?php\n$café = 1;\n$"

    suggestions = await complete(text)

    assert [s.name for s in suggestions] == ["$café"]


@pytest.mark.parametrize("text", ["<?php\necho fo", "$foo->", "<?php\n"])
@pytest.mark.asyncio
async def test_nothing_outside_variable_position(text):
    assert await complete(text) == []
