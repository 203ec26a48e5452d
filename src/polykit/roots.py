"""Pluggable complex root solvers for power-basis polynomials.

Root finding is kept behind a small registry so the numerical method can be
swapped without touching :class:`~polykit.polynomial.Polynomial`. A solver is
any callable taking a 1D coefficient array in increasing powers of ``t`` and
returning the complex roots.

Adding solvers
--------------
New solvers can be registered by name and used anywhere a ``method`` is
accepted.

Examples:
    Basic usage:

        >>> import numpy as np
        >>> from polykit.roots import find_real_and_complex_roots
        >>> roots = find_real_and_complex_roots([2.0, -3.0, 1.0])  # (t-1)(t-2)
        >>> bool(np.allclose(np.sort(roots.real), [1.0, 2.0]))
        True

    Registering a new solver:

        >>> from polykit.roots import register_root_solver
        >>> register_root_solver(
        ...     name="my-solver",
        ...     solver=lambda c: np.roots(c[::-1]),
        ...     aliases=("mine",),
        ... )  # doctest: +SKIP

Notes:
    - Solver names are case/spacing/punctuation insensitive.
    - High-order zero coefficients are stripped before a solver is called, so
      solvers always see a nonzero leading coefficient and at least degree 1.
    - Zero roots implied by low-order zero coefficients are factored out
      before calling the solver and appended to the result.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Iterable, Mapping

import numpy as np
import numpy.polynomial.polynomial as npp
from numpy.typing import ArrayLike

from polykit.logger import polykit_logger
from polykit.utils.types import ComplexArray, FloatArray
from polykit.utils.validate import validate_coefficients

__all__ = [
    "RootSolver",
    "DEFAULT_ROOT_METHOD",
    "find_real_and_complex_roots",
    "register_root_solver",
    "available_root_solvers",
    "companion_roots",
    "eigen_roots",
]

RootSolver = Callable[[FloatArray], ArrayLike]

DEFAULT_ROOT_METHOD = "companion"


def companion_roots(coeffs: FloatArray) -> ComplexArray:
    """Roots via the eigenvalues of the scaled companion matrix.

    Uses :func:`numpy.polynomial.polynomial.polyroots`, which also refines
    the degree-1 case analytically.

    Args:
        coeffs: Coefficients in increasing powers, nonzero leading entry.

    Returns:
        Complex array of ``len(coeffs) - 1`` roots.
    """
    return np.asarray(npp.polyroots(coeffs), dtype=np.complex128)


def eigen_roots(coeffs: FloatArray) -> ComplexArray:
    """Roots via an explicit companion matrix and ``numpy.linalg.eigvals``.

    The matrix is built from the monic polynomial, with ones on the
    subdiagonal and the negated normalized coefficients in the last column.

    Args:
        coeffs: Coefficients in increasing powers, nonzero leading entry.

    Returns:
        Complex array of ``len(coeffs) - 1`` roots.
    """
    degree = coeffs.size - 1
    companion = np.zeros((degree, degree), dtype=np.float64)
    if degree > 1:
        companion[1:, :-1] = np.eye(degree - 1)
    companion[:, -1] = -coeffs[:-1] / coeffs[-1]
    return np.asarray(np.linalg.eigvals(companion), dtype=np.complex128)


# These are the built-in solvers available in the package by default.
_SOLVER_SPECS: list[tuple[str, RootSolver, list[str]]] = [
    ("companion", companion_roots, ["polyroots", "numpy"]),
    ("eigen", eigen_roots, ["eigvals"]),
]


def _norm(s: str) -> str:
    """Normalize a solver name for robust matching (case/spacing/punct insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _solver_maps() -> tuple[Mapping[str, RootSolver], tuple[str, ...]]:
    """Construct and cache lookup tables for root solvers.

    Returns:
        A pair ``(solver_map, canonical_names)`` where ``solver_map`` maps
        normalized names and aliases to solvers and ``canonical_names`` lists
        the sorted canonical names.
    """
    solver_map: dict[str, RootSolver] = {}
    canonical: set[str] = set()
    for name, solver, aliases in _SOLVER_SPECS:
        k = _norm(name)
        solver_map[k] = solver
        canonical.add(k)
        for a in aliases:
            solver_map[_norm(a)] = solver
    return solver_map, tuple(sorted(canonical))


def register_root_solver(
    name: str,
    solver: RootSolver,
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new root solver.

    The internal cache is cleared and rebuilt on the next lookup, so this is
    safe to call at any time.

    Args:
        name: Canonical public name of the solver.
        solver: Callable mapping a coefficient array (increasing powers,
            nonzero leading coefficient) to its complex roots.
        aliases: Additional accepted spellings.

    Raises:
        TypeError: If ``solver`` is not callable.
    """
    if not callable(solver):
        raise TypeError(f"solver must be callable; got {type(solver).__name__}.")
    _SOLVER_SPECS.append((name, solver, list(aliases)))
    _solver_maps.cache_clear()
    polykit_logger.debug("Registered root solver '%s' (aliases: %s).", name, list(aliases))


def available_root_solvers() -> tuple[str, ...]:
    """Returns the canonical names of all registered root solvers."""
    return _solver_maps()[1]


def _resolve(method: str | None) -> RootSolver:
    """Resolve a solver name or alias to the solver callable."""
    solver_map, canon = _solver_maps()
    try:
        return solver_map[_norm(method or DEFAULT_ROOT_METHOD)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown root solver '{method}'. Choose one of {{{opts}}}.") from None


def find_real_and_complex_roots(
    coefficients: ArrayLike,
    method: str | None = None,
) -> ComplexArray:
    """Finds all roots of ``c_0 + c_1 t + ... + c_{N-1} t^{N-1}``.

    Args:
        coefficients: 1D array-like of coefficients in increasing powers.
        method: Name of a registered solver. Defaults to
            :data:`DEFAULT_ROOT_METHOD`.

    Returns:
        Complex array of the roots, with multiplicity. Its length is the
        degree of the polynomial after stripping high-order zeros; constant
        (including all-zero) polynomials have no roots.

    Raises:
        ValueError: If ``coefficients`` is not a non-empty 1D array or
            ``method`` is unknown.
    """
    solver = _resolve(method)
    coeffs = validate_coefficients(coefficients)

    nonzero = np.flatnonzero(coeffs)
    if nonzero.size == 0 or nonzero[-1] == 0:
        return np.zeros(0, dtype=np.complex128)

    lowest, highest = nonzero[0], nonzero[-1]
    zero_roots = np.zeros(lowest, dtype=np.complex128)
    reduced = coeffs[lowest:highest + 1]
    if reduced.size == 1:
        return zero_roots

    roots = np.asarray(solver(reduced), dtype=np.complex128).reshape(-1)
    return np.concatenate([roots, zero_roots])
