from typing import TypeVar

from async_linq.sequence.exceptions import ArgumentNullError

T = TypeVar("T")


def require_not_none(value: T | None, param: str) -> T:
    if value is None:
        raise ArgumentNullError(param)

    return value
