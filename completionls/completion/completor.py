"""
Completor interface and lazy suggestion streams.

A completor does not build a list of suggestions up front. It returns a
SuggestionStream which produces suggestions one at a time as the consumer
pulls them, so the consumer can stop early (e.g. when a request is
cancelled) without paying for the rest of the search.

Completors can back a stream with either:

1. A plain generator. Its return value reports whether the search space
   was exhausted (``return False`` means "there would have been more").
   A generator that returns nothing is complete.
2. An async iterable, for producers that need to await I/O. Wrap another
   SuggestionStream to forward its completeness.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterable, Iterable, Iterator, Sequence

from completionls.completion.suggestion import ByteOffset, SourceDocument, Suggestion


class SuggestionStream:
    """Single-pass async iterator over lazily produced suggestions."""

    def __init__(self, source: Iterable[Suggestion] | AsyncIterable[Suggestion]) -> None:
        if isinstance(source, AsyncIterable):
            self._async_source = aiter(source)
            self._sync_source = None
        else:
            self._async_source = None
            self._sync_source = iter(source)
        self._complete = True
        self._exhausted = False

    @classmethod
    def empty(cls) -> SuggestionStream:
        return cls(())

    @property
    def is_complete(self) -> bool:
        """
        Whether the producer exhausted its search space.

        Only meaningful once the stream has been fully consumed.
        """
        return self._complete

    def _finish(self, complete: bool | None) -> None:
        self._exhausted = True
        self._complete = complete is None or bool(complete)

    def __aiter__(self) -> SuggestionStream:
        return self

    async def __anext__(self) -> Suggestion:
        if self._exhausted:
            raise StopAsyncIteration

        if self._sync_source is not None:
            try:
                return next(self._sync_source)
            except StopIteration as stop:
                self._finish(stop.value)
                raise StopAsyncIteration from None

        try:
            return await anext(self._async_source)
        except StopAsyncIteration:
            self._finish(getattr(self._async_source, "is_complete", True))
            raise

    async def aclose(self) -> None:
        """Release the producer. Safe to call more than once."""
        self._exhausted = True
        if self._sync_source is not None:
            close = getattr(self._sync_source, "close", None)
            if close is not None:
                close()
        elif self._async_source is not None:
            aclose = getattr(self._async_source, "aclose", None)
            if aclose is not None:
                await aclose()

    async def __aenter__(self) -> SuggestionStream:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


class Completor(ABC):
    """Produces suggestions for a document at a byte offset."""

    @abstractmethod
    def complete(self, document: SourceDocument, offset: ByteOffset) -> SuggestionStream:
        """
        Start a completion search.

        Must not do any work beyond setting up the stream; suggestions are
        produced as the returned stream is consumed.
        """
        pass


class _ChainedStream(SuggestionStream):
    def __init__(self, streams: Iterator[SuggestionStream]) -> None:
        super().__init__(())
        self._streams = streams
        self._current: SuggestionStream | None = None
        self._all_complete = True

    async def __anext__(self) -> Suggestion:
        while not self._exhausted:
            if self._current is None:
                self._current = next(self._streams, None)
                if self._current is None:
                    self._finish(self._all_complete)
                    break
            try:
                return await anext(self._current)
            except StopAsyncIteration:
                self._all_complete = self._all_complete and self._current.is_complete
                await self._current.aclose()
                self._current = None
        raise StopAsyncIteration

    async def aclose(self) -> None:
        if self._current is not None:
            await self._current.aclose()
            self._current = None
        await super().aclose()


class ChainCompletor(Completor):
    """
    Runs several completors one after another.

    Suggestions keep each completor's order, completors keep registration
    order. The chain is complete only if every member was.
    """

    def __init__(self, completors: Sequence[Completor]) -> None:
        self.completors = list(completors)

    def complete(self, document: SourceDocument, offset: ByteOffset) -> SuggestionStream:
        return _ChainedStream(
            completor.complete(document, offset) for completor in self.completors
        )


class _LimitedStream(SuggestionStream):
    def __init__(self, inner: SuggestionStream, limit: int) -> None:
        super().__init__(inner)
        self._limit = limit
        self._count = 0

    async def __anext__(self) -> Suggestion:
        suggestion = await super().__anext__()
        if self._count >= self._limit:
            # There was at least one more suggestion than we may return.
            self._finish(False)
            await self.aclose()
            raise StopAsyncIteration
        self._count += 1
        return suggestion


class LimitingCompletor(Completor):
    """Caps the number of suggestions a completor may produce."""

    def __init__(self, completor: Completor, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"Suggestion limit must not be negative, got {limit}")
        self.completor = completor
        self.limit = limit

    def complete(self, document: SourceDocument, offset: ByteOffset) -> SuggestionStream:
        return _LimitedStream(self.completor.complete(document, offset), self.limit)
