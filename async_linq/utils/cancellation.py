class OperationCancelledError(Exception):
    def __init__(self, message: str = "The operation was cancelled."):
        super().__init__(message)


class CancellationToken:
    """Cooperative cancellation signal observed by cursors and predicates."""

    def __init__(self, source: "CancellationTokenSource | None" = None):
        self._source = source

    @property
    def is_cancellation_requested(self) -> bool:
        return self._source is not None and self._source.is_cancelled

    def throw_if_cancellation_requested(self):
        if self.is_cancellation_requested:
            raise OperationCancelledError()

    @staticmethod
    def none() -> "CancellationToken":
        return _NONE


_NONE = CancellationToken()


class CancellationTokenSource:
    def __init__(self):
        self._cancelled = False
        self._token = CancellationToken(self)

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        self._cancelled = True
