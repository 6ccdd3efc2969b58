"""Polynomials with descending coefficients and Ruffini's rule.

Functions
---------
solve_polynomial
    Roots of an integer polynomial by rational root search and synthetic
    division, with an audit trail and a factored form.

synthetic_division
    Divide a polynomial by (x - r), returning quotient, remainder and the
    three-row division table.

rational_root_candidates
    Candidate rational roots p/q from the rational root theorem.

rationalize
    Closest fraction with a bounded denominator.

Exceptions
----------
PolynomialError
    Base class of polynomial errors.

InvalidPolynomialError
    Empty coefficients, zero leading coefficient or non-integer input.
"""

from torchalgebra.polynomial._invalid_polynomial_error import (
    InvalidPolynomialError,
)
from torchalgebra.polynomial._polynomial import (
    Polynomial,
    polynomial,
    polynomial_degree,
    polynomial_evaluate,
    polynomial_from_roots,
)
from torchalgebra.polynomial._polynomial_error import PolynomialError
from torchalgebra.polynomial._ruffini import (
    MAX_DENOMINATOR,
    ROOT_TOLERANCE,
    RuffiniResult,
    RuffiniStep,
    SyntheticDivisionResult,
    SyntheticDivisionTable,
    divisors,
    factored_form,
    rational_root_candidates,
    rationalize,
    solve_polynomial,
    synthetic_division,
)

__all__ = [
    "InvalidPolynomialError",
    "MAX_DENOMINATOR",
    "Polynomial",
    "PolynomialError",
    "ROOT_TOLERANCE",
    "RuffiniResult",
    "RuffiniStep",
    "SyntheticDivisionResult",
    "SyntheticDivisionTable",
    "divisors",
    "factored_form",
    "polynomial",
    "polynomial_degree",
    "polynomial_evaluate",
    "polynomial_from_roots",
    "rational_root_candidates",
    "rationalize",
    "solve_polynomial",
    "synthetic_division",
]
