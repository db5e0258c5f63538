class EmptyWorldSetError(AssertionError):
    """Raised when an operation produces no possible world at all.

    Every base operator is total, so lifting them over non-empty operands
    can never yield the empty set. Reaching this means an operator
    definition or the lifting itself is broken; callers must not catch it.
    """


class ConversionError(ValueError):
    """A value has no counterpart in the requested logic domain."""

    def __init__(self, value: object, target: str):
        super().__init__(f"{value!r} cannot be converted to {target}")
        self.value = value
        self.target = target
