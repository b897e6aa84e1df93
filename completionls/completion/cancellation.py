from __future__ import annotations


class CancellationToken:
    """
    One-shot cancellation signal for a single request.

    Once cancelled, a token stays cancelled. Handlers poll
    is_cancellation_requested between units of work.
    """

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled
