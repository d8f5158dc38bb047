"""
Element-wise assertions over one-dimensional sequences of floats.

Sequences may be Python sequences or one-dimensional numpy arrays. The
comparisons report the first offending index.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

import numpy as np
from beartype import beartype

from unit_test_utils.exceptions import (
    BoundViolationError,
    LengthMismatchError,
    NanFoundError,
    NotNearlyEqualError,
    PreconditionError,
)
from unit_test_utils.floats import Real, check_tolerances, nearly_equal
from unit_test_utils.logs.structlog import logger

Values: TypeAlias = Sequence[Real] | np.ndarray

# Bounds are compared element-wise by numpy, so plain ints work as limits.
Limit: TypeAlias = Real | int


def _as_array(values: Values) -> np.ndarray:
    array = np.asarray(values)
    if array.ndim != 1:
        raise PreconditionError(f"expected a one-dimensional sequence, got {array.ndim} dimensions")
    return array


def _check_same_length(a: Values, b: Values) -> None:
    len_a = len(_as_array(a))
    len_b = len(_as_array(b))
    if len_a != len_b:
        logger.debug("rejected arrays", len_a=len_a, len_b=len_b)
        raise LengthMismatchError(len_a, len_b)


def _first(mask: np.ndarray) -> int | None:
    indices = np.flatnonzero(mask)
    return int(indices[0]) if indices.size else None


@beartype
def nearly_equal_array(a: Values, b: Values, rel_tol: Real, abs_tol: Real) -> bool:
    """
    Check whether two arrays are element-wise nearly equal.

    Returns True if and only if `nearly_equal` holds at every index.

    Raises:
        LengthMismatchError: If the arrays have different lengths.
        ToleranceError: If a tolerance is not strictly positive.
    """
    check_tolerances(rel_tol, abs_tol)
    _check_same_length(a, b)
    return all(nearly_equal(ai, bi, rel_tol, abs_tol) for ai, bi in zip(a, b))


@beartype
def assert_nearly_equal_array(a: Values, b: Values, rel_tol: Real, abs_tol: Real, msg: str) -> None:
    """
    Assert that two arrays are element-wise nearly equal.

    Raises:
        NotNearlyEqualError: At the first entry where the arrays differ.
        LengthMismatchError: If the arrays have different lengths.
        ToleranceError: If a tolerance is not strictly positive.
    """
    check_tolerances(rel_tol, abs_tol)
    _check_same_length(a, b)
    for idx, (ai, bi) in enumerate(zip(a, b)):
        if not nearly_equal(ai, bi, rel_tol, abs_tol):
            logger.debug("arrays not nearly equal", label=msg, index=idx, a=ai, b=bi)
            raise NotNearlyEqualError(msg, ai, bi, index=idx)


@beartype
def is_any_nan(values: Values) -> bool:
    """Return True if and only if at least one element is NaN."""
    return bool(np.isnan(_as_array(values)).any())


@beartype
def assert_none_is_nan(values: Values, msg: str) -> None:
    """
    Assert that no element is NaN.

    Raises:
        NanFoundError: Carrying the index of the first NaN.
    """
    idx = _first(np.isnan(_as_array(values)))
    if idx is not None:
        logger.debug("nan found", label=msg, index=idx)
        raise NanFoundError(msg, idx)


@beartype
def assert_all_ge(values: Values, limit: Limit, msg: str) -> None:
    """
    Assert that every element is greater than or equal to `limit`.

    Raises:
        BoundViolationError: For the first element strictly lower than `limit`.
    """
    array = _as_array(values)
    idx = _first(array < limit)
    if idx is not None:
        logger.debug("lower bound violated", label=msg, index=idx, value=array[idx], limit=limit)
        raise BoundViolationError(msg, idx, array[idx], limit, "lower")


@beartype
def assert_all_le(values: Values, limit: Limit, msg: str) -> None:
    """
    Assert that every element is less than or equal to `limit`.

    Raises:
        BoundViolationError: For the first element strictly greater than `limit`.
    """
    array = _as_array(values)
    idx = _first(array > limit)
    if idx is not None:
        logger.debug("upper bound violated", label=msg, index=idx, value=array[idx], limit=limit)
        raise BoundViolationError(msg, idx, array[idx], limit, "greater")
