"""Quick comparison of the registered root solvers in polykit.

Run with:
    python compare_root_methods.py
"""

from __future__ import annotations

from typing import Any

import numpy as np

from polykit import Polynomial, available_root_solvers
from polykit.utils.numerics import relative_error


def from_roots(roots: list[float]) -> Polynomial:
    """Polynomial with the given real roots and unit leading coefficient."""
    return Polynomial(np.polynomial.polynomial.polyfromroots(roots))


def max_root_error(found: np.ndarray, truth: list[float]) -> float:
    """Relative error between sorted real parts (order independent)."""
    if found.size != len(truth):
        return float("inf")
    return relative_error(np.sort(found.real), np.sort(np.asarray(truth, dtype=float)))


def main() -> None:
    """Main comparison routine."""
    # Polynomials to test: name -> known real roots
    cases: list[dict[str, Any]] = [
        {"name": "quadratic", "roots": [1.0, 3.0]},
        {"name": "quintic, spread", "roots": [-2.0, -0.5, 0.1, 1.5, 4.0]},
        # delicate cases
        {"name": "double root", "roots": [1.0, 1.0, 2.0]},
        {"name": "near-repeated", "roots": [1.0, 1.0 + 1e-6, 1.0 + 2e-6]},
        {"name": "wilkinson-like (10)", "roots": [float(k) for k in range(1, 11)]},
    ]

    line = "-" * 60

    for case in cases:
        p = from_roots(case["roots"])
        print(line)
        print(f"Polynomial: {case['name']!r}, N = {p.N}")
        print(line)
        print("  {:>12s}  {:>18s}".format("solver", "max rel err"))

        for method in available_root_solvers():
            roots = p.compute_roots(method=method)
            err = max_root_error(roots, case["roots"])
            print(f"  {method:>12s}  {err:18.10e}")

        print()


if __name__ == "__main__":
    main()
