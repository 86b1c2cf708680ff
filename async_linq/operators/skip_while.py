import logging
from collections.abc import AsyncIterable, Awaitable, Callable, Iterable
from enum import Enum
from typing import TypeVar

from typing_extensions import override

from async_linq.conf.sequence_conf import DEFAULT_CONF, SequenceConf
from async_linq.operators.predicates import (
    AwaitIndexedPredicate,
    AwaitIndexedWithCancellationPredicate,
    AwaitPredicate,
    AwaitWithCancellationPredicate,
    PredicateEvaluator,
    SyncIndexedPredicate,
    SyncPredicate,
)
from async_linq.sequence.async_sequence import AsyncCursor, AsyncSequence
from async_linq.sequence.exceptions import NoCurrentElementError
from async_linq.sequence.iterable_sequence import from_iterable
from async_linq.utils.cancellation import CancellationToken
from async_linq.utils.checked import checked_increment
from async_linq.utils.checks import require_not_none

logger = logging.getLogger(__name__)

T = TypeVar("T")

Source = AsyncSequence[T] | AsyncIterable[T] | Iterable[T]


class Phase(str, Enum):
    SKIPPING = "skipping"
    PASSING = "passing"


class SkipWhileCursor(AsyncCursor[T]):
    def __init__(
        self,
        source: AsyncSequence[T],
        evaluator: PredicateEvaluator[T],
        cancellation: CancellationToken,
        max_index: int,
    ):
        self._source = source
        self._evaluator = evaluator
        self._cancellation = cancellation
        self._max_index = max_index

        self._upstream: AsyncCursor[T] | None = None
        self._phase = Phase.SKIPPING
        self._index = -1
        self._skipped = 0
        self._current: T | None = None
        self._has_current = False
        self._finished = False

    @property
    def phase(self) -> Phase:
        return self._phase

    @override
    async def move_next(self) -> bool:
        self._has_current = False
        self._current = None
        if self._finished:
            return False

        try:
            if self._upstream is None:
                self._upstream = self._source.cursor(self._cancellation)

            if self._phase == Phase.SKIPPING:
                return await self._skip(self._upstream)
            return await self._pass(self._upstream)
        except BaseException as e:
            logger.debug(
                f"Skip-while enumeration failed with {type(e).__name__}"
            )
            await self._release()
            raise

    async def _skip(self, upstream: AsyncCursor[T]) -> bool:
        while await upstream.move_next():
            element = upstream.current
            if self._evaluator.indexed:
                self._index = checked_increment(self._index, self._max_index)

            if not await self._evaluator.evaluate(
                element, self._index, self._cancellation
            ):
                logger.debug(
                    f"Skip phase ended after {self._skipped} skipped element(s)"
                )
                self._phase = Phase.PASSING
                self._set_current(element)
                return True

            self._skipped += 1

        await self._release()
        return False

    async def _pass(self, upstream: AsyncCursor[T]) -> bool:
        if await upstream.move_next():
            self._set_current(upstream.current)
            return True

        await self._release()
        return False

    def _set_current(self, element: T):
        self._current = element
        self._has_current = True

    @property
    @override
    def current(self) -> T:
        if not self._has_current:
            raise NoCurrentElementError()
        return self._current  # type: ignore

    async def _release(self):
        self._finished = True
        self._has_current = False
        self._current = None

        upstream, self._upstream = self._upstream, None
        if upstream is not None:
            logger.debug("Releasing upstream cursor")
            await upstream.aclose()

    @override
    async def aclose(self) -> None:
        await self._release()


class SkipWhileSequence(AsyncSequence[T]):
    """Lazily drops the leading elements of `source` while the predicate
    holds and forwards everything after the first rejected element.

    No element is pulled before the first `move_next` of a cursor, and each
    cursor owns its own phase, position counter and upstream cursor.
    """

    def __init__(
        self,
        source: AsyncSequence[T],
        evaluator: PredicateEvaluator[T],
        conf: SequenceConf = DEFAULT_CONF,
    ):
        self._source = source
        self._evaluator = evaluator
        self._conf = conf

    @override
    def cursor(
        self, cancellation: CancellationToken | None = None
    ) -> AsyncCursor[T]:
        return SkipWhileCursor(
            self._source,
            self._evaluator,
            cancellation or CancellationToken.none(),
            self._conf.max_index,
        )


def _create(
    source: Source[T] | None,
    predicate: Callable | None,
    evaluator_type: Callable[[Callable], PredicateEvaluator[T]],
    conf: SequenceConf | None,
) -> AsyncSequence[T]:
    source = require_not_none(source, "source")
    predicate = require_not_none(predicate, "predicate")

    return SkipWhileSequence(
        from_iterable(source), evaluator_type(predicate), conf or DEFAULT_CONF
    )


def skip_while(
    source: Source[T],
    predicate: Callable[[T], bool],
    conf: SequenceConf | None = None,
) -> AsyncSequence[T]:
    return _create(source, predicate, SyncPredicate, conf)


def skip_while_indexed(
    source: Source[T],
    predicate: Callable[[T, int], bool],
    conf: SequenceConf | None = None,
) -> AsyncSequence[T]:
    return _create(source, predicate, SyncIndexedPredicate, conf)


def skip_while_await(
    source: Source[T],
    predicate: Callable[[T], Awaitable[bool]],
    conf: SequenceConf | None = None,
) -> AsyncSequence[T]:
    return _create(source, predicate, AwaitPredicate, conf)


def skip_while_await_with_cancellation(
    source: Source[T],
    predicate: Callable[[T, CancellationToken], Awaitable[bool]],
    conf: SequenceConf | None = None,
) -> AsyncSequence[T]:
    return _create(source, predicate, AwaitWithCancellationPredicate, conf)


def skip_while_await_indexed(
    source: Source[T],
    predicate: Callable[[T, int], Awaitable[bool]],
    conf: SequenceConf | None = None,
) -> AsyncSequence[T]:
    return _create(source, predicate, AwaitIndexedPredicate, conf)


def skip_while_await_indexed_with_cancellation(
    source: Source[T],
    predicate: Callable[[T, int, CancellationToken], Awaitable[bool]],
    conf: SequenceConf | None = None,
) -> AsyncSequence[T]:
    return _create(
        source, predicate, AwaitIndexedWithCancellationPredicate, conf
    )
