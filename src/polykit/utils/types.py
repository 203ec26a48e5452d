"""Shared typing aliases for PolyKit."""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

Float: TypeAlias = np.floating
FloatArray: TypeAlias = NDArray[np.float64]
ComplexArray: TypeAlias = NDArray[np.complex128]

ArrayLike1D: TypeAlias = Sequence[float] | NDArray[np.floating]
