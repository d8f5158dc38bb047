"""Tolerance-based float comparisons and numeric assertions for unit tests."""

from unit_test_utils import arrays, config, exceptions, floats
from unit_test_utils.arrays import (
    assert_all_ge,
    assert_all_le,
    assert_nearly_equal_array,
    assert_none_is_nan,
    is_any_nan,
    nearly_equal_array,
)
from unit_test_utils.config import Tolerance
from unit_test_utils.exceptions import (
    BoundViolationError,
    LengthMismatchError,
    NanFoundError,
    NotNearlyEqualError,
    NumericAssertionError,
    PreconditionError,
    ToleranceError,
)
from unit_test_utils.floats import assert_nearly_equal, nearly_equal

__all__ = [
    "BoundViolationError",
    "LengthMismatchError",
    "NanFoundError",
    "NotNearlyEqualError",
    "NumericAssertionError",
    "PreconditionError",
    "Tolerance",
    "ToleranceError",
    "arrays",
    "assert_all_ge",
    "assert_all_le",
    "assert_nearly_equal",
    "assert_nearly_equal_array",
    "assert_none_is_nan",
    "config",
    "exceptions",
    "floats",
    "is_any_nan",
    "nearly_equal",
    "nearly_equal_array",
]
