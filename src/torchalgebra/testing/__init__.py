"""Testing utilities for torchalgebra."""

from . import strategies

__all__ = [
    "strategies",
]
