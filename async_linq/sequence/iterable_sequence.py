from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable
from typing import TypeVar

from typing_extensions import override

from async_linq.sequence.async_sequence import AsyncCursor, AsyncSequence
from async_linq.sequence.exceptions import NoCurrentElementError
from async_linq.utils.cancellation import CancellationToken
from async_linq.utils.checks import require_not_none

T = TypeVar("T")


async def _to_async_iterator(source: Iterable[T]) -> AsyncIterator[T]:
    for item in source:
        yield item


class IterableCursor(AsyncCursor[T]):
    def __init__(
        self,
        iterator_factory: Callable[[], AsyncIterator[T]],
        cancellation: CancellationToken,
    ):
        self._iterator_factory = iterator_factory
        self._cancellation = cancellation
        self._iterator: AsyncIterator[T] | None = None
        self._current: T | None = None
        self._has_current = False
        self._closed = False

    @override
    async def move_next(self) -> bool:
        self._has_current = False
        if self._closed:
            return False

        self._cancellation.throw_if_cancellation_requested()
        if self._iterator is None:
            self._iterator = self._iterator_factory()

        try:
            self._current = await anext(self._iterator)
        except StopAsyncIteration:
            self._current = None
            return False

        self._has_current = True
        return True

    @property
    @override
    def current(self) -> T:
        if not self._has_current:
            raise NoCurrentElementError()
        return self._current  # type: ignore

    @override
    async def aclose(self) -> None:
        if self._closed:
            return

        self._closed = True
        self._has_current = False
        self._current = None
        aclose = getattr(self._iterator, "aclose", None)
        if aclose is not None:
            await aclose()


class IterableSequence(AsyncSequence[T]):
    """Re-iterable sequence over a sync or async iterable.

    Every cursor starts a new pass, so a one-shot iterator passed here can
    only be enumerated once.
    """

    def __init__(self, source: Iterable[T] | AsyncIterable[T]):
        self._source = source

    def _iterate(self) -> AsyncIterator[T]:
        if isinstance(self._source, AsyncIterable):
            return aiter(self._source)
        return _to_async_iterator(self._source)

    @override
    def cursor(
        self, cancellation: CancellationToken | None = None
    ) -> AsyncCursor[T]:
        return IterableCursor(
            self._iterate, cancellation or CancellationToken.none()
        )


def from_iterable(
    source: Iterable[T] | AsyncIterable[T],
) -> AsyncSequence[T]:
    require_not_none(source, "source")
    if isinstance(source, AsyncSequence):
        return source
    return IterableSequence(source)
