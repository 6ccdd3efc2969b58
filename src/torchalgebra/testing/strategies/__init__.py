"""Hypothesis strategies for matrix and polynomial testing."""

from ._integer_polynomials import integer_polynomials
from ._integers_as_floats import integers_as_floats
from ._matrices import matrices
from ._matrix_shapes import matrix_shapes
from ._rank_deficient_matrices import rank_deficient_matrices
from ._rational_roots import rational_roots

__all__ = [
    # Numeric strategies
    "integers_as_floats",
    "rational_roots",
    # Matrix strategies
    "matrix_shapes",
    "matrices",
    "rank_deficient_matrices",
    # Polynomial strategies
    "integer_polynomials",
]
