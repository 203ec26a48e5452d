"""Fixed-order polynomials for one segment of a piecewise trajectory.

Coefficients are stored with increasing powers of ``t``, i.e.
``c_0 + c_1 t + ... + c_{N-1} t^{N-1}`` where ``N`` is the number of
coefficients (order + 1). ``N`` is fixed when the polynomial is created;
the coefficients may be replaced as a whole any number of times.

Derivatives are never formed symbolically. They come from the shared
basis coefficient table (see :mod:`polykit.base_coefficients`), which holds
the falling-factorial multiplier of every monomial for every derivative
order.

Examples:
=========

>>> from polykit.polynomial import Polynomial
>>> p = Polynomial([1.0, 2.0, 3.0])  # 1 + 2 t + 3 t**2
>>> p.evaluate(2.0)
array([17., 14.,  6.])
>>> p.evaluate_derivative(2.0, 1)
14.0
>>> p.get_coefficients(1)
array([2., 6., 0.])
"""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from polykit.base_coefficients import BaseCoefficientTable, base_coefficients_for
from polykit.config import ExtremaConfig
from polykit.extrema import MinMax, find_min_max, find_min_max_with_roots
from polykit.roots import find_real_and_complex_roots
from polykit.utils.types import ComplexArray
from polykit.utils.validate import (
    validate_coefficients,
    validate_derivative,
    validate_num_coefficients,
)

__all__ = ["Polynomial"]


class Polynomial:
    """Polynomial of order ``N - 1`` with real coefficients.

    Instances own their coefficient buffer. They carry no internal locking:
    concurrent readers are fine, concurrent writers must synchronize
    externally.

    Attributes:
        N: Number of coefficients (order + 1).
        order: Polynomial order ``N - 1``.
        coefficients: Read-only view of the coefficients.
    """

    __hash__ = None

    def __init__(
        self,
        coefficients: ArrayLike | None = None,
        *,
        n: int | None = None,
    ):
        """Initializes the polynomial.

        Args:
            coefficients: Coefficients in increasing powers of ``t``. If
                omitted, ``n`` zeros are used. A plain integer is read as
                ``n``.
            n: Number of coefficients. Required when ``coefficients`` is
                omitted; otherwise it must match ``len(coefficients)``.

        Raises:
            ValueError: If neither argument is given, ``n <= 0``, or the
                lengths disagree.
        """
        if isinstance(coefficients, numbers.Integral) and not isinstance(coefficients, bool):
            # Polynomial(N): fixed order, zero coefficients.
            if n is not None:
                raise ValueError("Pass N either positionally or as n, not both.")
            coefficients, n = None, coefficients
        if coefficients is None:
            if n is None:
                raise ValueError("Either coefficients or n must be given.")
            n = validate_num_coefficients(n)
            coeffs = np.zeros(n, dtype=np.float64)
        else:
            if n is not None:
                n = validate_num_coefficients(n)
            coeffs = validate_coefficients(coefficients, n)

        self._n = coeffs.size
        self._coefficients = coeffs
        self._table = base_coefficients_for(self._n)

    @classmethod
    def zeros(cls, n: int) -> Polynomial:
        """Creates a polynomial with ``n`` zero coefficients."""
        return cls(n=n)

    @property
    def N(self) -> int:
        """Number of coefficients (order + 1)."""
        return self._n

    @property
    def order(self) -> int:
        """Polynomial order."""
        return self._n - 1

    @property
    def coefficients(self) -> NDArray[np.float64]:
        """Read-only view of the stored coefficients."""
        view = self._coefficients.view()
        view.setflags(write=False)
        return view

    @property
    def base_coefficients(self) -> BaseCoefficientTable:
        """The basis table used for differentiation."""
        return self._table

    def set_coefficients(self, coefficients: ArrayLike) -> None:
        """Replaces all coefficients.

        Args:
            coefficients: ``N`` coefficients in increasing powers of ``t``.

        Raises:
            ValueError: If the number of coefficients does not match ``N``.
        """
        self._coefficients = validate_coefficients(coefficients, self._n)

    def get_coefficients(self, derivative: int = 0) -> NDArray[np.float64]:
        """Returns the coefficients of a derivative of the polynomial.

        Entry ``i`` of derivative ``d`` is ``c[i + d] * (i + d)! / i!``. The
        top ``d`` entries are zero, so the result always has length ``N``.

        Args:
            derivative: Derivative order in ``[0, N]``.

        Returns:
            A new array of length ``N``.

        Raises:
            ValueError: If ``derivative`` is outside ``[0, N]``.
        """
        d = validate_derivative(derivative, self._n)
        if d == 0:
            return self._coefficients.copy()

        n = self._n
        result = np.zeros(n, dtype=np.float64)
        if d < n:
            result[: n - d] = self._coefficients[d:] * self._table.row(d, n)[d:]
        return result

    def _horner(self, t: float, derivative: int) -> float:
        """Evaluates one derivative with Horner's scheme seeded by a table row."""
        n = self._n
        terms = (self._table.row(derivative, n)[derivative:] * self._coefficients[derivative:]).tolist()
        acc = terms[-1]
        for term in reversed(terms[:-1]):
            acc = acc * t + term
        return float(acc)

    def evaluate(
        self,
        t: float,
        max_derivative: int | None = None,
        *,
        derivative: int | None = None,
    ) -> NDArray[np.float64] | float:
        """Evaluates the polynomial and its derivatives at time ``t``.

        With ``max_derivative`` the derivatives ``0 .. max_derivative - 1``
        are returned as an array. With ``derivative`` a single value is
        returned, exactly as :meth:`evaluate_derivative`.

        Args:
            t: Time of evaluation.
            max_derivative: Number of derivatives to return, in ``[0, N]``.
                Defaults to ``N``.
            derivative: Evaluate only this derivative.

        Returns:
            Array of length ``max_derivative``, or a float if ``derivative``
            is given.

        Raises:
            ValueError: If both arguments are given, or ``max_derivative`` is
                outside ``[0, N]``.
        """
        if derivative is not None:
            if max_derivative is not None:
                raise ValueError("Pass either max_derivative or derivative, not both.")
            return self.evaluate_derivative(t, derivative)

        if max_derivative is None:
            max_derivative = self._n
        max_derivative = validate_derivative(max_derivative, self._n, name="max_derivative")

        result = np.empty(max_derivative, dtype=np.float64)
        for i in range(max_derivative):
            result[i] = self._horner(t, i)
        return result

    def evaluate_derivative(self, t: float, derivative: int = 0) -> float:
        """Evaluates a single derivative at time ``t``.

        Derivatives at or beyond ``N`` are identically zero and return
        ``0.0`` instead of failing, so generic code can probe derivative
        orders without checking ``N`` first.

        Args:
            t: Time of evaluation.
            derivative: Derivative order (>= 0).

        Returns:
            The value of the derivative.

        Raises:
            TypeError: If ``derivative`` is not an integer.
            ValueError: If ``derivative`` is negative.
        """
        if isinstance(derivative, bool) or not isinstance(derivative, numbers.Integral):
            raise TypeError(f"derivative must be an integer; got {type(derivative).__name__}.")
        if derivative < 0:
            raise ValueError(f"derivative must be >= 0; got {derivative}.")
        if derivative >= self._n:
            return 0.0
        return self._horner(t, int(derivative))

    def __call__(self, t: float) -> float:
        return self.evaluate_derivative(t, 0)

    def compute_roots(self, method: str | None = None) -> ComplexArray:
        """Computes the complex roots of the polynomial.

        Only for the polynomial itself, not for its derivatives; use
        ``self.derivative(d).compute_roots()`` for those.

        Args:
            method: Name of a registered root solver.

        Returns:
            Complex array of roots with multiplicity.
        """
        return find_real_and_complex_roots(self._coefficients, method=method)

    def find_min_max(
        self,
        t1: float,
        t2: float,
        derivative_order: int = 0,
        roots_of_derivative: ArrayLike | None = None,
        config: ExtremaConfig | None = None,
    ) -> MinMax | None:
        """Minimum and maximum of a derivative on ``[t1, t2]``.

        See :func:`polykit.extrema.find_min_max`.
        """
        return find_min_max(
            self,
            t1,
            t2,
            derivative_order,
            roots_of_derivative=roots_of_derivative,
            config=config,
        )

    def find_min_max_with_roots(
        self,
        t1: float,
        t2: float,
        derivative_order: int = 0,
        config: ExtremaConfig | None = None,
    ) -> tuple[MinMax | None, ComplexArray]:
        """See :func:`polykit.extrema.find_min_max_with_roots`."""
        return find_min_max_with_roots(self, t1, t2, derivative_order, config=config)

    def derivative(self, derivative: int = 1) -> Polynomial:
        """Returns the ``derivative``-th derivative as a polynomial with the same ``N``."""
        return type(self)(self.get_coefficients(derivative))

    def scale_in_time(self, factor: float) -> Polynomial:
        """Returns ``q`` with ``q(t) == p(factor * t)``.

        Args:
            factor: Time scaling factor.

        Returns:
            A new polynomial with coefficients ``c_j * factor**j``.
        """
        powers = np.power(float(factor), np.arange(self._n, dtype=np.float64))
        return type(self)(self._coefficients * powers)

    def with_appended_coefficients(self, n: int) -> Polynomial:
        """Returns the same polynomial with ``n`` coefficients, zero padded.

        Args:
            n: New number of coefficients, ``n >= N``.

        Raises:
            ValueError: If ``n < N``.
        """
        n = validate_num_coefficients(n)
        if n < self._n:
            raise ValueError(f"Cannot shrink a polynomial from N={self._n} to N={n}.")
        coeffs = np.zeros(n, dtype=np.float64)
        coeffs[: self._n] = self._coefficients
        return type(self)(coeffs)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if other.N != self._n:
            raise ValueError(f"Cannot add polynomials with N={self._n} and N={other.N}.")
        return type(self)(self._coefficients + other._coefficients)

    def __mul__(self, scalar: float) -> Polynomial:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return type(self)(self._coefficients * float(scalar))

    __rmul__ = __mul__

    def __neg__(self) -> Polynomial:
        return type(self)(-self._coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._n == other.N and bool(np.array_equal(self._coefficients, other._coefficients))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(N={self._n}, coefficients={self._coefficients.tolist()!r})"
