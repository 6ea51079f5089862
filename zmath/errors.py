"""Exceptions raised at the zmath API boundary."""


class InvalidBranchIndex(ValueError):
    """A branch index (k, k1, k2) was given that is not a whole number in int64 range."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"branch index {name} must be a whole number in int64 range, got {value!r}")


class ComplexParseError(ValueError):
    """Text could not be evaluated to a complex number."""
