from async_linq.sequence.exceptions import IndexOverflowError

INT32_MAX = 2**31 - 1


def checked_increment(value: int, max_value: int = INT32_MAX) -> int:
    if value >= max_value:
        raise IndexOverflowError(max_value)

    return value + 1
