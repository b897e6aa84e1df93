from __future__ import annotations

from completionls.completion.suggestion import Suggestion, SuggestionType


class SuggestionNameFormatter:
    """
    Decides how a suggestion's name is shown in the completion list.

    Some clients treat "$" as a word boundary and would insert "$$foo"
    after the user typed "$"; trim_leading_dollar works around that.
    """

    def __init__(self, trim_leading_dollar: bool = False) -> None:
        self.trim_leading_dollar = trim_leading_dollar

    def format(self, suggestion: Suggestion) -> str:
        name = suggestion.name

        if (
            self.trim_leading_dollar
            and suggestion.type == SuggestionType.VARIABLE
            and name.startswith("$")
        ):
            return name[1:]

        return name
