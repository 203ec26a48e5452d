"""Basis coefficient table for analytic differentiation of monomials.

Entry ``(d, j)`` of the table is the multiplier the monomial coefficient of
``t**j`` acquires after differentiating ``d`` times, i.e. the falling
factorial ``j! / (j - d)!`` (zero when ``j < d``). With these multipliers a
derivative of a power-basis polynomial is obtained without symbolic algebra.

One table covering every polynomial with up to :data:`K_MAX_N` coefficients
is built when this module is imported and shared read-only afterwards.
Polynomials with more coefficients get a table of their own size, built on
first use and cached per size.

Examples:
=========

>>> from polykit.base_coefficients import compute_base_coefficients
>>> compute_base_coefficients(4)
array([[1., 1., 1., 1.],
       [0., 1., 2., 3.],
       [0., 0., 2., 6.],
       [0., 0., 0., 6.]])

>>> from polykit.base_coefficients import base_coeffs_with_time
>>> base_coeffs_with_time(4, 1, 2.0)
array([ 0.,  1.,  4., 12.])
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np
from numpy.typing import ArrayLike, NDArray

from polykit.logger import polykit_logger
from polykit.utils.numerics import is_negligible
from polykit.utils.thread_safety import wrap_with_lock
from polykit.utils.validate import validate_derivative, validate_num_coefficients

__all__ = [
    "K_MAX_N",
    "BaseCoefficientTable",
    "SHARED_BASE_COEFFICIENTS",
    "compute_base_coefficients",
    "base_coefficients_for",
    "base_coeffs_with_time",
]

#: Largest number of coefficients covered by the shared table.
K_MAX_N = 12


def compute_base_coefficients(n: int) -> NDArray[np.float64]:
    """Computes the base coefficients of the derivatives of a polynomial.

    Row 0 is all ones. Row ``d`` follows from row ``d - 1`` by multiplying
    column ``j`` by ``j - d + 1``; columns left of the diagonal are zero.

    Args:
        n: Number of coefficients (order + 1) to cover.

    Returns:
        A ``(n, n)`` array whose entry ``(d, j)`` equals ``j! / (j - d)!``
        for ``j >= d`` and 0 otherwise.

    Raises:
        TypeError: If ``n`` is not an integer.
        ValueError: If ``n <= 0``.
    """
    n = validate_num_coefficients(n)
    table = np.zeros((n, n), dtype=np.float64)
    table[0, :] = 1.0
    powers = np.arange(n, dtype=np.float64)
    for d in range(1, n):
        table[d, d:] = table[d - 1, d:] * (powers[d:] - d + 1)
    return table


class BaseCoefficientTable:
    """Immutable square table of falling-factorial multipliers.

    The wrapped array is marked read-only, so a table can be shared between
    any number of polynomials (and threads) without copying.

    Attributes:
        matrix: The read-only ``(n, n)`` array.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: ArrayLike):
        """Initializes the table from a square array.

        Args:
            matrix: Square array-like. It is copied and frozen.

        Raises:
            ValueError: If ``matrix`` is not a non-empty square 2D array.
        """
        arr = np.array(matrix, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] == 0:
            raise ValueError(
                f"base coefficient table must be a non-empty square matrix; got shape {arr.shape}."
            )
        arr.setflags(write=False)
        self._matrix = arr

    @classmethod
    def build(cls, n: int) -> BaseCoefficientTable:
        """Builds the table for polynomials with up to ``n`` coefficients."""
        return cls(compute_base_coefficients(n))

    @property
    def n(self) -> int:
        """Number of coefficients covered by this table."""
        return self._matrix.shape[0]

    @property
    def matrix(self) -> NDArray[np.float64]:
        """The read-only table."""
        return self._matrix

    def row(self, derivative: int, n: int | None = None) -> NDArray[np.float64]:
        """Returns the multipliers of one derivative order.

        Args:
            derivative: Derivative order (row index).
            n: Number of leading columns to return. Defaults to the full row.

        Returns:
            A read-only view of length ``n``.
        """
        if n is None:
            n = self.n
        return self._matrix[derivative, :n]

    def __getitem__(self, key):
        return self._matrix[key]

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n})"


#: Table shared by every polynomial with at most ``K_MAX_N`` coefficients.
SHARED_BASE_COEFFICIENTS = BaseCoefficientTable.build(K_MAX_N)


@lru_cache(maxsize=None)
def _oversized_table(n: int) -> BaseCoefficientTable:
    """Builds and caches a table for ``n > K_MAX_N`` coefficients."""
    polykit_logger.warning(
        "Polynomial with N=%d coefficients exceeds the shared basis table "
        "(K_MAX_N=%d); building a dedicated table.",
        n,
        K_MAX_N,
    )
    return BaseCoefficientTable.build(n)


_oversized_table_locked = wrap_with_lock(_oversized_table)


def base_coefficients_for(n: int) -> BaseCoefficientTable:
    """Returns the table a polynomial with ``n`` coefficients should use.

    Args:
        n: Number of coefficients.

    Returns:
        :data:`SHARED_BASE_COEFFICIENTS` for ``n <= K_MAX_N``, otherwise a
        cached table of exactly ``n`` rows.

    Raises:
        TypeError: If ``n`` is not an integer.
        ValueError: If ``n <= 0``.
    """
    n = validate_num_coefficients(n)
    if n <= K_MAX_N:
        return SHARED_BASE_COEFFICIENTS
    return _oversized_table_locked(n)


def base_coeffs_with_time(n: int, derivative: int, t: float) -> NDArray[np.float64]:
    """Computes the base coefficients with the according powers of ``t``.

    The dot product of the result with a polynomial's coefficient vector
    gives that polynomial's ``derivative``-th derivative at ``t``. This is
    the row needed to express "derivative ``d`` at time ``t`` equals ``v``"
    as a linear (in)equality constraint.

    Args:
        n: Number of coefficients of the polynomial.
        derivative: Derivative order, ``0 <= derivative < n``.
        t: Time of evaluation.

    Returns:
        Array of length ``n``.

    Raises:
        ValueError: If ``n <= 0`` or ``derivative`` is outside ``[0, n)``.
    """
    n = validate_num_coefficients(n)
    derivative = validate_derivative(derivative, n, inclusive=False)
    table = base_coefficients_for(n)

    coeffs = np.zeros(n, dtype=np.float64)
    # first coefficient doesn't get multiplied
    coeffs[derivative] = table[derivative, derivative]

    if is_negligible(t):
        return coeffs

    t_power = t
    for j in range(derivative + 1, n):
        coeffs[j] = table[derivative, j] * t_power
        t_power *= t
    return coeffs
