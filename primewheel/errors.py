"""
Error types.

Every error keeps its constructor arguments in ``args`` so it pickles
cleanly across the process pool used by the batch module.
"""


class PrimeWheelError(Exception):
    """Base class for all library errors."""


class InvalidNumber(PrimeWheelError, ValueError):
    """Input has no prime factorization (n < 1)."""

    def __init__(self, number: int):
        super().__init__(number)
        self.number = number

    def __str__(self) -> str:
        return f"invalid number {self.number}: must be >= 1"


class RangeError(PrimeWheelError, ValueError):
    """Malformed or oversized interval request."""

    def __init__(self, start: int, through: int, reason: str):
        super().__init__(start, through, reason)
        self.start = start
        self.through = through
        self.reason = reason

    def __str__(self) -> str:
        return f"invalid range [{self.start}, {self.through}]: {self.reason}"


class IntegerOverflow(PrimeWheelError, OverflowError):
    """Value is not representable in the requested integer width."""

    def __init__(self, value: int, width: str):
        super().__init__(value, width)
        self.value = value
        self.width = width

    def __str__(self) -> str:
        return f"{self.value} does not fit in {self.width}"
