"""Minimum and maximum of a polynomial derivative over a closed interval.

Interior extrema of a differentiable function lie where its derivative
vanishes, so the candidates for the extrema of derivative ``k`` on
``[t1, t2]`` are the endpoints plus the real roots of derivative ``k + 1``
inside the interval. Root finding dominates the cost of a query; callers
that probe many intervals of the same polynomial can compute the roots once
with :func:`find_min_max_with_roots` and pass them back in to
:func:`find_min_max`.

Examples:
=========

>>> from polykit import Polynomial
>>> from polykit.extrema import find_min_max
>>> p = Polynomial([3.0, -4.0, 1.0])  # t**2 - 4 t + 3
>>> result = find_min_max(p, 0.0, 5.0, 0)
>>> float(result.t_min), float(result.min), float(result.t_max), float(result.max)
(2.0, -1.0, 5.0, 8.0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

import numpy as np
from numpy.typing import ArrayLike

from polykit.config import ExtremaConfig
from polykit.logger import polykit_logger
from polykit.roots import find_real_and_complex_roots
from polykit.utils.types import ComplexArray

if TYPE_CHECKING:
    from polykit.polynomial import Polynomial

__all__ = [
    "MinMax",
    "find_min_max",
    "find_min_max_with_roots",
    "select_candidates",
]


class MinMax(NamedTuple):
    """Result of an extrema query.

    Attributes:
        t_min: Time at which the minimum is attained.
        t_max: Time at which the maximum is attained.
        min: Minimum value of the evaluated derivative.
        max: Maximum value of the evaluated derivative.
    """

    t_min: float
    t_max: float
    min: float
    max: float


def select_candidates(
    t1: float,
    t2: float,
    roots_of_derivative: ArrayLike,
    config: ExtremaConfig | None = None,
) -> list[float]:
    """Collects the candidate times for an extrema query.

    Args:
        t1: Interval start.
        t2: Interval end.
        roots_of_derivative: Roots of the next-higher derivative.
        config: Tolerances and endpoint policy. Defaults to
            :class:`~polykit.config.ExtremaConfig`.

    Returns:
        Endpoints first (if enabled), then the real parts of the roots whose
        imaginary part is negligible and which lie in ``[t1, t2]``.
    """
    config = config or ExtremaConfig()
    candidates = [float(t1), float(t2)] if config.include_endpoints else []

    roots = np.asarray(roots_of_derivative, dtype=np.complex128).reshape(-1)
    for root in roots:
        # Only real roots are considered as critical points.
        if abs(root.imag) > config.imag_tol:
            continue
        candidate = float(root.real)
        if candidate < t1 or candidate > t2:
            continue
        candidates.append(candidate)
    return candidates


def _derivative_roots(
    polynomial: Polynomial,
    derivative_order: int,
    config: ExtremaConfig,
) -> ComplexArray:
    """Roots of derivative ``derivative_order + 1`` of ``polynomial``."""
    if derivative_order + 1 >= polynomial.N:
        # That derivative is identically zero: no critical points to add.
        return np.zeros(0, dtype=np.complex128)
    coeffs = polynomial.get_coefficients(derivative_order + 1)
    return find_real_and_complex_roots(coeffs, method=config.root_method)


def find_min_max(
    polynomial: Polynomial,
    t1: float,
    t2: float,
    derivative_order: int,
    roots_of_derivative: ArrayLike | None = None,
    config: ExtremaConfig | None = None,
) -> MinMax | None:
    """Computes the minimum and maximum of a derivative between ``t1`` and ``t2``.

    Args:
        polynomial: The polynomial to analyse.
        t1: Interval start.
        t2: Interval end.
        derivative_order: Which derivative to evaluate (0 for the
            polynomial itself).
        roots_of_derivative: Roots of derivative ``derivative_order + 1``.
            Computed with ``config.root_method`` when omitted.
        config: Tolerances, solver and endpoint policy.

    Returns:
        A :class:`MinMax` tuple, or ``None`` if ``t1 > t2`` or no valid
        candidate lies in the interval.

    Raises:
        ValueError: If ``derivative_order`` is negative.
    """
    if derivative_order < 0:
        raise ValueError(f"derivative_order must be >= 0; got {derivative_order}.")
    if t1 > t2:
        polykit_logger.debug("find_min_max: degenerate interval [%g, %g].", t1, t2)
        return None

    config = config or ExtremaConfig()
    if roots_of_derivative is None:
        roots_of_derivative = _derivative_roots(polynomial, derivative_order, config)

    candidates = select_candidates(t1, t2, roots_of_derivative, config)
    if not candidates:
        polykit_logger.debug(
            "find_min_max: no real candidates in [%g, %g] for derivative %d.",
            t1,
            t2,
            derivative_order,
        )
        return None

    values = [polynomial.evaluate_derivative(t, derivative_order) for t in candidates]
    i_min = int(np.argmin(values))
    i_max = int(np.argmax(values))
    return MinMax(
        t_min=candidates[i_min],
        t_max=candidates[i_max],
        min=values[i_min],
        max=values[i_max],
    )


def find_min_max_with_roots(
    polynomial: Polynomial,
    t1: float,
    t2: float,
    derivative_order: int,
    config: ExtremaConfig | None = None,
) -> tuple[MinMax | None, ComplexArray]:
    """Like :func:`find_min_max`, additionally returning the computed roots.

    The roots of derivative ``derivative_order + 1`` do not depend on the
    interval, so they can be passed to later :func:`find_min_max` calls on
    the same polynomial.

    Args:
        polynomial: The polynomial to analyse.
        t1: Interval start.
        t2: Interval end.
        derivative_order: Which derivative to evaluate.
        config: Tolerances, solver and endpoint policy.

    Returns:
        ``(result, roots)`` where ``result`` is as in :func:`find_min_max`.
        The roots are computed even when the interval is degenerate.
    """
    if derivative_order < 0:
        raise ValueError(f"derivative_order must be >= 0; got {derivative_order}.")
    config = config or ExtremaConfig()
    roots = _derivative_roots(polynomial, derivative_order, config)
    result = find_min_max(
        polynomial,
        t1,
        t2,
        derivative_order,
        roots_of_derivative=roots,
        config=config,
    )
    return result, roots
