import pytest

from async_linq.utils.cancellation import (
    CancellationToken,
    CancellationTokenSource,
    OperationCancelledError,
)


def test_none_token_is_never_cancelled():
    token = CancellationToken.none()

    assert not token.is_cancellation_requested
    token.throw_if_cancellation_requested()


def test_cancel():
    source = CancellationTokenSource()
    token = source.token

    assert not token.is_cancellation_requested

    source.cancel()

    assert source.is_cancelled
    assert token.is_cancellation_requested
    with pytest.raises(OperationCancelledError) as exc_info:
        token.throw_if_cancellation_requested()

    assert str(exc_info.value) == "The operation was cancelled."
