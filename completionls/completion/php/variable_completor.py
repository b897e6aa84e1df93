from __future__ import annotations

from collections.abc import Iterator

from completionls.completion.completor import Completor, SuggestionStream
from completionls.completion.php.words import VARIABLE_PATTERN, clamp_offset, word_start
from completionls.completion.suggestion import (
    ByteOffset,
    ByteOffsetRange,
    SourceDocument,
    Suggestion,
    SuggestionType,
)


class VariableCompletor(Completor):
    """
    Suggests variables already used in the document.

    Only active when the cursor is on a variable (right after `$` or
    inside `$na|`). Variables are offered in order of first appearance,
    the one being typed excluded.
    """

    def complete(self, document: SourceDocument, offset: ByteOffset) -> SuggestionStream:
        return SuggestionStream(self._suggestions(document, offset))

    def _suggestions(
        self, document: SourceDocument, offset: ByteOffset
    ) -> Iterator[Suggestion]:
        data = document.data
        end = clamp_offset(data, offset)
        start = word_start(data, end)

        if start == 0 or data[start - 1:start] != b"$":
            return

        dollar = start - 1
        replace = ByteOffsetRange.from_ints(dollar, end)
        seen: set[bytes] = set()

        for match in VARIABLE_PATTERN.finditer(data):
            # Skip the token under the cursor.
            if match.start() == dollar:
                continue
            name = match.group()
            if name in seen:
                continue
            seen.add(name)
            yield Suggestion(
                name=name.decode("utf-8", "replace"),
                type=SuggestionType.VARIABLE,
                range=replace,
            )
