"""Utility functions for PolyKit package."""

from .numerics import falling_factorial, is_negligible
from .thread_safety import wrap_with_lock

__all__ = [
    "falling_factorial",
    "is_negligible",
    "wrap_with_lock",
]
