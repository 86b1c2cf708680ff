from abc import ABC, abstractmethod
from collections.abc import AsyncIterable, AsyncIterator
from types import TracebackType
from typing import Generic, TypeVar

from typing_extensions import override

from async_linq.utils.cancellation import CancellationToken

T = TypeVar("T")


class AsyncCursor(ABC, Generic[T], AsyncIterator[T]):
    """Forward-only handle over a sequence.

    `move_next` advances and reports whether an element is available,
    `current` reads it, and `aclose` releases the cursor. Releasing more
    than once is a no-op.
    """

    @abstractmethod
    async def move_next(self) -> bool:
        pass

    @property
    @abstractmethod
    def current(self) -> T:
        pass

    @abstractmethod
    async def aclose(self) -> None:
        pass

    @override
    def __aiter__(self) -> AsyncIterator[T]:
        return self

    @override
    async def __anext__(self) -> T:
        if not await self.move_next():
            raise StopAsyncIteration
        return self.current

    async def __aenter__(self) -> "AsyncCursor[T]":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()


class AsyncSequence(ABC, Generic[T], AsyncIterable[T]):
    @abstractmethod
    def cursor(
        self, cancellation: CancellationToken | None = None
    ) -> AsyncCursor[T]:
        pass

    @override
    def __aiter__(self) -> AsyncIterator[T]:
        return self.cursor()


async def to_list(
    sequence: AsyncSequence[T], cancellation: CancellationToken | None = None
) -> list[T]:
    async with sequence.cursor(cancellation) as cursor:
        return [item async for item in cursor]
