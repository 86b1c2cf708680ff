from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from typing_extensions import override

from async_linq.utils.cancellation import CancellationToken

T = TypeVar("T")


class PredicateEvaluator(ABC, Generic[T]):
    """Uniform async view over the supported predicate call shapes.

    `index` is the zero-based position of the element and is only
    meaningful when `indexed` is true.
    """

    def __init__(self, predicate: Callable[..., object]):
        self._predicate = predicate

    @property
    def indexed(self) -> bool:
        return False

    @abstractmethod
    async def evaluate(
        self, element: T, index: int, cancellation: CancellationToken
    ) -> bool:
        pass


class IndexedPredicateEvaluator(PredicateEvaluator[T], ABC):
    @property
    @override
    def indexed(self) -> bool:
        return True


class SyncPredicate(PredicateEvaluator[T]):
    def __init__(self, predicate: Callable[[T], bool]):
        super().__init__(predicate)

    @override
    async def evaluate(
        self, element: T, index: int, cancellation: CancellationToken
    ) -> bool:
        return bool(self._predicate(element))


class SyncIndexedPredicate(IndexedPredicateEvaluator[T]):
    def __init__(self, predicate: Callable[[T, int], bool]):
        super().__init__(predicate)

    @override
    async def evaluate(
        self, element: T, index: int, cancellation: CancellationToken
    ) -> bool:
        return bool(self._predicate(element, index))


class AwaitPredicate(PredicateEvaluator[T]):
    def __init__(self, predicate: Callable[[T], Awaitable[bool]]):
        super().__init__(predicate)

    @override
    async def evaluate(
        self, element: T, index: int, cancellation: CancellationToken
    ) -> bool:
        return bool(await self._predicate(element))  # type: ignore


class AwaitWithCancellationPredicate(PredicateEvaluator[T]):
    def __init__(
        self, predicate: Callable[[T, CancellationToken], Awaitable[bool]]
    ):
        super().__init__(predicate)

    @override
    async def evaluate(
        self, element: T, index: int, cancellation: CancellationToken
    ) -> bool:
        return bool(await self._predicate(element, cancellation))  # type: ignore


class AwaitIndexedPredicate(IndexedPredicateEvaluator[T]):
    def __init__(self, predicate: Callable[[T, int], Awaitable[bool]]):
        super().__init__(predicate)

    @override
    async def evaluate(
        self, element: T, index: int, cancellation: CancellationToken
    ) -> bool:
        return bool(await self._predicate(element, index))  # type: ignore


class AwaitIndexedWithCancellationPredicate(IndexedPredicateEvaluator[T]):
    def __init__(
        self,
        predicate: Callable[[T, int, CancellationToken], Awaitable[bool]],
    ):
        super().__init__(predicate)

    @override
    async def evaluate(
        self, element: T, index: int, cancellation: CancellationToken
    ) -> bool:
        return bool(
            await self._predicate(element, index, cancellation)  # type: ignore
        )
