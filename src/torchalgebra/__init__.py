"""torchalgebra: matrix and polynomial engines for a calculator, on PyTorch."""

from . import (
    linear_algebra,
    polynomial,
)
from ._scalar import Scalar, as_scalar

__all__ = [
    "Scalar",
    "as_scalar",
    "linear_algebra",
    "polynomial",
]

__version__ = "0.1.0"
