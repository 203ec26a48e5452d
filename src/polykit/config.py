"""Configuration for the extrema finder.

This config controls which roots of the next-higher derivative are accepted
as critical points, which root solver produces them, and whether the
interval endpoints are part of the candidate set.
"""

from __future__ import annotations

from polykit.roots import DEFAULT_ROOT_METHOD


class ExtremaConfig:
    """Configuration for :func:`polykit.extrema.find_min_max`."""

    def __init__(
        self,
        imag_tol: float = 1e-10,
        root_method: str = DEFAULT_ROOT_METHOD,
        include_endpoints: bool = True,
    ):
        """Initialize configuration.

        Args:
            imag_tol:
                Largest absolute imaginary part for which a root of the
                next-higher derivative still counts as a real crossing.
                Roots with ``|imag| > imag_tol`` are discarded. Nearly
                repeated real roots come back from eigenvalue-based
                solvers with small spurious imaginary parts, so this should
                not be tighter than the solver's accuracy.

            root_method:
                Name (or alias) of a registered root solver, see
                :func:`polykit.roots.available_root_solvers`. Only used when
                the caller does not supply the roots.

            include_endpoints:
                If ``True`` the interval endpoints ``t1`` and ``t2`` are
                always candidates. If ``False`` only interior critical
                points are considered, and the query fails when there are
                none.

        Raises:
            ValueError: If ``imag_tol`` is negative.
        """
        if imag_tol < 0:
            raise ValueError(f"imag_tol must be >= 0; got {imag_tol}.")
        self.imag_tol = float(imag_tol)
        self.root_method = root_method
        self.include_endpoints = bool(include_endpoints)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(imag_tol={self.imag_tol!r}, "
            f"root_method={self.root_method!r}, "
            f"include_endpoints={self.include_endpoints!r})"
        )
