"""
Exception hierarchy for numeric test assertions.

Precondition errors signal a mistake by the caller (a non-positive tolerance,
sequences of different lengths) and derive from ValueError. Assertion errors
signal that a predicate was false on valid input and derive from
AssertionError, so test runners report them as ordinary test failures.
"""

from __future__ import annotations


class PreconditionError(ValueError):
    """Base exception for invalid arguments passed to a comparison."""

    pass


class ToleranceError(PreconditionError):
    """Raised when a relative or absolute tolerance is not strictly positive."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} tolerance nonpositive (got {value})")


class LengthMismatchError(PreconditionError):
    """Raised when two sequences compared element-wise differ in length."""

    def __init__(self, len_a: int, len_b: int) -> None:
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(f"arrays have different lengths: {len_a} != {len_b}")


class NumericAssertionError(AssertionError):
    """Base exception for failed numeric assertions."""

    def __init__(self, label: str, message: str) -> None:
        self.label = label
        super().__init__(f"({label}) {message}")


class NotNearlyEqualError(NumericAssertionError):
    """Raised when two values, or two arrays at some entry, are not nearly equal."""

    def __init__(self, label: str, a: object, b: object, index: int | None = None) -> None:
        self.a = a
        self.b = b
        self.index = index
        if index is None:
            message = f"{a} is not nearly equal to {b}"
        else:
            message = f"arrays not equal at entry {index}"
        super().__init__(label, message)


class NanFoundError(NumericAssertionError):
    """Raised when a sequence expected to be NaN-free contains a NaN."""

    def __init__(self, label: str, index: int) -> None:
        self.index = index
        super().__init__(label, f"nan at position {index}")


class BoundViolationError(NumericAssertionError):
    """Raised when an element lies outside an inclusive bound."""

    def __init__(self, label: str, index: int, value: object, limit: object, relation: str) -> None:
        self.index = index
        self.value = value
        self.limit = limit
        super().__init__(label, f"array[{index}] = {value} is {relation} than {limit}")
