class IntSetError(Exception):
    pass


class IntSetCapacityExceeded(IntSetError):
    def __init__(self, capacity: int, required: int) -> None:
        self.capacity = capacity
        self.required = required
        super().__init__(f'Operation needs room for {required} distinct values, '
                         f'but capacity is {capacity}')


class IntSetValueTypeError(IntSetError, TypeError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f'IntSet holds integers only, got {type(value).__name__}: {value!r}')


class IntSetConfigError(IntSetError, ValueError):
    pass
