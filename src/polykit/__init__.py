"""Provides all polykit methods."""

from importlib.metadata import PackageNotFoundError, version

from polykit.base_coefficients import (
    K_MAX_N,
    BaseCoefficientTable,
    base_coefficients_for,
    base_coeffs_with_time,
    compute_base_coefficients,
)
from polykit.config import ExtremaConfig
from polykit.extrema import MinMax, find_min_max, find_min_max_with_roots
from polykit.polynomial import Polynomial
from polykit.roots import (
    available_root_solvers,
    find_real_and_complex_roots,
    register_root_solver,
)

try:
    __version__ = version("polykit")
except PackageNotFoundError:
    pass

__all__ = [
    "K_MAX_N",
    "BaseCoefficientTable",
    "ExtremaConfig",
    "MinMax",
    "Polynomial",
    "available_root_solvers",
    "base_coefficients_for",
    "base_coeffs_with_time",
    "compute_base_coefficients",
    "find_min_max",
    "find_min_max_with_roots",
    "find_real_and_complex_roots",
    "register_root_solver",
]
