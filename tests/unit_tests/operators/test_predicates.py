import pytest

from async_linq.operators.predicates import (
    AwaitIndexedPredicate,
    AwaitIndexedWithCancellationPredicate,
    AwaitPredicate,
    AwaitWithCancellationPredicate,
    SyncIndexedPredicate,
    SyncPredicate,
)
from async_linq.utils.cancellation import CancellationToken
from tests.utils.async_helper import to_awaitable

TOKEN = CancellationToken.none()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "evaluator, indexed",
    [
        (SyncPredicate(lambda x: x == "a"), False),
        (SyncIndexedPredicate(lambda x, i: x == "a" and i == 3), True),
        (AwaitPredicate(lambda x: to_awaitable(x == "a")), False),
        (
            AwaitWithCancellationPredicate(
                lambda x, t: to_awaitable(x == "a" and t is TOKEN)
            ),
            False,
        ),
        (
            AwaitIndexedPredicate(lambda x, i: to_awaitable(x == "a" and i == 3)),
            True,
        ),
        (
            AwaitIndexedWithCancellationPredicate(
                lambda x, i, t: to_awaitable(x == "a" and i == 3 and t is TOKEN)
            ),
            True,
        ),
    ],
)
async def test_evaluate(evaluator, indexed: bool):
    assert evaluator.indexed is indexed
    assert await evaluator.evaluate("a", 3, TOKEN) is True
    assert await evaluator.evaluate("b", 3, TOKEN) is False


@pytest.mark.asyncio
async def test_result_is_coerced_to_bool():
    evaluator = SyncPredicate(lambda x: x)

    assert await evaluator.evaluate([1], 0, TOKEN) is True
    assert await evaluator.evaluate([], 0, TOKEN) is False
