"""Numerical utilities."""

from __future__ import annotations

import numpy as np

__all__ = [
    "MACHINE_EPSILON",
    "is_negligible",
    "falling_factorial",
    "relative_error",
]

#: Machine epsilon for double precision floats.
MACHINE_EPSILON = float(np.finfo(np.float64).eps)


def is_negligible(value: float, tol: float = MACHINE_EPSILON) -> bool:
    """Checks whether ``value`` is numerically indistinguishable from zero.

    Args:
        value: The value to test.
        tol: Absolute threshold. Defaults to machine epsilon.

    Returns:
        True if ``abs(value) < tol``.
    """
    return abs(value) < tol


def falling_factorial(j: int, d: int) -> int:
    """Computes the falling factorial ``j * (j - 1) * ... * (j - d + 1)``.

    This is the multiplier the monomial ``t**j`` acquires after ``d``
    differentiations, and is zero when ``j < d``.

    Args:
        j: Power of the monomial (>= 0).
        d: Number of differentiations (>= 0).

    Returns:
        ``j! / (j - d)!`` for ``j >= d``, else 0.

    Raises:
        ValueError: If ``j`` or ``d`` is negative.
    """
    if j < 0 or d < 0:
        raise ValueError("j and d must be non-negative.")
    if j < d:
        return 0
    result = 1
    for k in range(j - d + 1, j + 1):
        result *= k
    return result


def relative_error(a: np.ndarray, b: np.ndarray) -> float:
    """Computes the relative error metric between a and b.

    This metric is defined as the maximum over all components of a and b of
    the absolute difference divided by the maximum of 1.0 and the absolute values of
    a and b.

    Args:
        a: First array-like input.
        b: Second array-like input.

    Returns:
        The relative error metric as a float.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    denom = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
    return float(np.max(np.abs(a - b) / denom))
