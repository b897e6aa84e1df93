from __future__ import annotations

from completionls.completion.cancellation import CancellationToken


def test_new_token_is_not_cancelled():
    assert not CancellationToken().is_cancellation_requested


def test_cancel_is_permanent():
    token = CancellationToken()

    token.cancel()
    token.cancel()

    assert token.is_cancellation_requested


def test_tokens_are_independent():
    cancelled = CancellationToken()
    other = CancellationToken()

    cancelled.cancel()

    assert not other.is_cancellation_requested
