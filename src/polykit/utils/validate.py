"""Validation utilities for PolyKit.

These helpers implement the fail-fast contract checks of the package. A
failing check signals a caller bug, so they raise immediately instead of
truncating, padding or clamping their inputs.
"""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "validate_num_coefficients",
    "validate_coefficients",
    "validate_derivative",
]


def validate_num_coefficients(n: int) -> int:
    """Validates a coefficient count ``N``.

    Args:
        n: Number of coefficients (order + 1).

    Returns:
        ``n`` as a Python ``int``.

    Raises:
        TypeError: If ``n`` is not an integer.
        ValueError: If ``n <= 0``.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"N must be an integer; got {type(n).__name__}.")
    if n <= 0:
        raise ValueError(f"N must be positive; got N={n}.")
    return int(n)


def validate_coefficients(
    coeffs: ArrayLike,
    n: int | None = None,
) -> NDArray[np.float64]:
    """Validates a coefficient vector and returns it as a new float array.

    Args:
        coeffs: Array-like of coefficients in increasing powers of ``t``.
        n: Expected number of coefficients. If ``None`` only the shape is
            checked.

    Returns:
        A freshly allocated 1D ``float64`` array.

    Raises:
        ValueError: If ``coeffs`` is not 1D, is empty, or its length does
            not match ``n``.
    """
    arr = np.array(coeffs, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"coefficients must be 1D; got shape {arr.shape}.")
    if arr.size == 0:
        raise ValueError("coefficients must not be empty.")
    if n is not None and arr.size != n:
        raise ValueError(
            f"Number of coefficients has to match: expected {n}, got {arr.size}."
        )
    return arr


def validate_derivative(
    derivative: int,
    upper: int,
    *,
    inclusive: bool = True,
    name: str = "derivative",
) -> int:
    """Validates a derivative order against ``[0, upper]`` or ``[0, upper)``.

    Args:
        derivative: The derivative order to check.
        upper: Upper bound of the valid range.
        inclusive: Whether ``upper`` itself is allowed.
        name: Name used in error messages.

    Returns:
        ``derivative`` as a Python ``int``.

    Raises:
        TypeError: If ``derivative`` is not an integer.
        ValueError: If ``derivative`` is outside the valid range.
    """
    if isinstance(derivative, bool) or not isinstance(derivative, numbers.Integral):
        raise TypeError(f"{name} must be an integer; got {type(derivative).__name__}.")
    d = int(derivative)
    too_big = d > upper if inclusive else d >= upper
    if d < 0 or too_big:
        bracket = "]" if inclusive else ")"
        raise ValueError(f"{name} must be in [0, {upper}{bracket}; got {d}.")
    return d
