from __future__ import annotations

from collections.abc import Mapping

from completionls.completion.completor import Completor
from completionls.exceptions import NoCompletorForLanguage


class CompletorRegistry:
    """
    Maps language identifiers (as sent by the client, e.g. "php") to
    completors.

    Populated once during server initialization.
    """

    def __init__(self, completors: Mapping[str, Completor] | None = None) -> None:
        self._completors: dict[str, Completor] = dict(completors or {})

    def register(self, language_id: str, completor: Completor) -> None:
        self._completors[language_id] = completor

    def completor_for(self, language_id: str) -> Completor:
        completor = self._completors.get(language_id)
        if completor is None:
            raise NoCompletorForLanguage(language_id)
        return completor

    @property
    def language_ids(self) -> list[str]:
        return list(self._completors)

    def __contains__(self, language_id: object) -> bool:
        return language_id in self._completors
