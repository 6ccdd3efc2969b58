from ._polynomial import Polynomial, polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_from_roots import polynomial_from_roots

__all__ = [
    "Polynomial",
    "polynomial",
    "polynomial_degree",
    "polynomial_evaluate",
    "polynomial_from_roots",
]
