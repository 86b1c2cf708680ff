class ArgumentNullError(ValueError):
    def __init__(self, param: str):
        super().__init__(f"Value cannot be None. Parameter name: {param}")
        self._param = param

    @property
    def param(self) -> str:
        return self._param


class IndexOverflowError(OverflowError):
    def __init__(self, max_value: int):
        super().__init__(
            f"Element position exceeded the maximum value of {max_value}."
        )


class NoCurrentElementError(RuntimeError):
    def __init__(self):
        super().__init__("The cursor is not positioned on an element.")
