from __future__ import annotations

import math
from typing import TypeAlias

import numpy as np
from beartype import beartype

from unit_test_utils.exceptions import NotNearlyEqualError, ToleranceError
from unit_test_utils.logs.structlog import logger

# Python floats are double precision; numpy.floating covers float16/32/64.
Real: TypeAlias = float | np.floating


@beartype
def smallest_positive(a: Real, b: Real) -> float:
    """Smallest positive normal value at the precision shared by `a` and `b`."""
    return float(np.finfo(np.result_type(a, b)).tiny)


@beartype
def check_tolerances(rel_tol: Real, abs_tol: Real) -> None:
    """
    Validate a tolerance pair.

    Raises:
        ToleranceError: If either tolerance is not strictly positive (NaN included).
    """
    if not rel_tol > 0:
        logger.debug("rejected tolerance", kind="relative", value=rel_tol)
        raise ToleranceError("relative", rel_tol)
    if not abs_tol > 0:
        logger.debug("rejected tolerance", kind="absolute", value=abs_tol)
        raise ToleranceError("absolute", abs_tol)


@beartype
def nearly_equal(a: Real, b: Real, rel_tol: Real, abs_tol: Real) -> bool:
    """
    Whether two floats are nearly equal up to the given tolerances.

    The values are nearly equal when they are identical (same-signed infinities
    included), when they differ by no more than the smallest positive normal
    value of their precision, or when

        |a - b| <= min(abs_tol, rel_tol * max(|a|, |b|))

    Both bounds must hold, so the tighter one governs. NaN is never nearly
    equal to anything, itself included.

    Args:
        a: First value.
        b: Second value.
        rel_tol: Relative tolerance, strictly positive.
        abs_tol: Absolute tolerance, strictly positive.

    Raises:
        ToleranceError: If a tolerance is not strictly positive.
    """
    check_tolerances(rel_tol, abs_tol)

    if math.isnan(a) or math.isnan(b):
        return False
    if a == b:
        return True

    # Infinite operands only reach here with an infinite difference.
    with np.errstate(over="ignore", invalid="ignore"):
        abs_diff = abs(a - b)
        if abs_diff <= smallest_positive(a, b):
            return True
        bound = min(abs_tol, rel_tol * max(abs(a), abs(b)))
    return bool(abs_diff <= bound)


@beartype
def assert_nearly_equal(a: Real, b: Real, rel_tol: Real, abs_tol: Real, msg: str) -> None:
    """
    Assert that two floats are nearly equal.

    Raises:
        NotNearlyEqualError: If `nearly_equal` is false; the message carries `msg`.
        ToleranceError: If a tolerance is not strictly positive.
    """
    if not nearly_equal(a, b, rel_tol, abs_tol):
        logger.debug("values not nearly equal", label=msg, a=a, b=b, rel_tol=rel_tol, abs_tol=abs_tol)
        raise NotNearlyEqualError(msg, a, b)
