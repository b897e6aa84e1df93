"""
PHP keyword completion.

Offers every keyword and lets the client filter on what has been typed;
control structures come with a snippet. Nothing is offered in member
(`->`, `::`) or variable (`$`) position.
"""

from __future__ import annotations

from collections.abc import Iterator

from completionls.completion.completor import Completor, SuggestionStream
from completionls.completion.php.words import clamp_offset, preceded_by, word_start
from completionls.completion.suggestion import (
    ByteOffset,
    ByteOffsetRange,
    SourceDocument,
    Suggestion,
    SuggestionType,
)

PHP_KEYWORDS = [
    "abstract", "and", "array", "as", "break", "callable", "case", "catch",
    "class", "clone", "const", "continue", "declare", "default", "do", "echo",
    "else", "elseif", "empty", "enum", "extends", "final", "finally", "fn",
    "for", "foreach", "function", "global", "goto", "if", "implements",
    "include", "include_once", "instanceof", "insteadof", "interface",
    "isset", "list", "match", "namespace", "new", "or", "print", "private",
    "protected", "public", "readonly", "require", "require_once", "return",
    "static", "switch", "throw", "trait", "try", "unset", "use", "var",
    "while", "xor", "yield",
]

KEYWORD_SNIPPETS = {
    "class": "class ${1:Name}\n{\n\t$0\n}",
    "foreach": "foreach (${1:\\$items} as ${2:\\$item}) {\n\t$0\n}",
    "for": "for (${1:\\$i} = 0; ${1:\\$i} < ${2:\\$count}; ${1:\\$i}++) {\n\t$0\n}",
    "function": "function ${1:name}(${2}): ${3:void}\n{\n\t$0\n}",
    "if": "if (${1:condition}) {\n\t$0\n}",
    "match": "match (${1:\\$value}) {\n\t$0\n}",
    "switch": "switch (${1:\\$value}) {\n\t$0\n}",
    "try": "try {\n\t$1\n} catch (${2:\\Throwable} ${3:\\$e}) {\n\t$0\n}",
    "while": "while (${1:condition}) {\n\t$0\n}",
}


class KeywordCompletor(Completor):
    """Suggests PHP keywords at the start of an expression or statement."""

    def complete(self, document: SourceDocument, offset: ByteOffset) -> SuggestionStream:
        return SuggestionStream(self._suggestions(document, offset))

    def _suggestions(
        self, document: SourceDocument, offset: ByteOffset
    ) -> Iterator[Suggestion]:
        data = document.data
        end = clamp_offset(data, offset)
        start = word_start(data, end)

        if preceded_by(data, start, b"->", b"::", b"$"):
            return

        replace = ByteOffsetRange.from_ints(start, end)
        for keyword in PHP_KEYWORDS:
            yield Suggestion(
                name=keyword,
                type=SuggestionType.KEYWORD,
                short_description="PHP keyword",
                snippet=KEYWORD_SNIPPETS.get(keyword),
                range=replace,
            )
