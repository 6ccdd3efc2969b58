import math
from fractions import Fraction
from typing import Iterable, Optional, Sequence, Union

import torch
from torch import Tensor

from torchalgebra._scalar import Scalar
from torchalgebra.polynomial._invalid_polynomial_error import (
    InvalidPolynomialError,
)
from torchalgebra.polynomial._polynomial import (
    polynomial,
    polynomial_degree,
)

from ._constants import ROOT_TOLERANCE
from ._factored_form import factored_form
from ._rational_root_candidates import divisors, rational_root_candidates
from ._rationalize import as_fraction
from ._result_types import (
    RuffiniResult,
    RuffiniStep,
    SyntheticDivisionResult,
)
from ._synthetic_division import synthetic_division


def _validate(coefficients: Union[Tensor, Sequence[int]]) -> list[float]:
    if isinstance(coefficients, Tensor):
        if coefficients.is_complex():
            raise InvalidPolynomialError(
                "solve_polynomial: coefficients must be real integers"
            )
        coefficients = coefficients.tolist()

    values = list(coefficients)

    if not values:
        raise InvalidPolynomialError(
            "solve_polynomial: at least one coefficient is required"
        )

    for c in values:
        if isinstance(c, complex) or not float(c).is_integer():
            raise InvalidPolynomialError(
                f"solve_polynomial: all coefficients must be integers, "
                f"got {c!r}"
            )

    if values[0] == 0:
        raise InvalidPolynomialError(
            "solve_polynomial: the leading coefficient (for the highest "
            "power of x) cannot be zero"
        )

    return [float(c) for c in values]


def _snap(coefficients: Iterable[float]) -> list[float]:
    # Quotients of integer polynomials by rational roots are integral
    return [
        float(round(c)) if abs(c - round(c)) < ROOT_TOLERANCE else c
        for c in coefficients
    ]


def _first_root(
    working: list[float], candidates: Iterable[Union[int, Fraction]]
) -> Optional[tuple[float, SyntheticDivisionResult]]:
    for candidate in candidates:
        root = float(candidate)

        division = synthetic_division(working, root)

        if abs(division.remainder) < ROOT_TOLERANCE:
            return root, division

    return None


def solve_polynomial(
    coefficients: Union[Tensor, Sequence[int]],
    *,
    latex: bool = False,
) -> RuffiniResult:
    r"""
    Find the roots of an integer polynomial with Ruffini's rule.

    Rational roots are split off one at a time by synthetic division. Each
    round tries, in this order:

    1. the root 0, when the constant term is exactly 0;
    2. every integer divisor (positive and negative) of the constant term;
    3. every fraction p/q with p dividing the constant term and q dividing
       the leading coefficient (rational root theorem).

    Candidates are tried by increasing magnitude, negative first on ties;
    the first one leaving a remainder below 1e-9 is accepted, recorded as
    a :class:`RuffiniStep`, and the quotient becomes the working
    polynomial. Rounds continue while the working polynomial has degree at
    least 2 and fewer than ``degree - 1`` roots have been found, and stop
    early when no candidate divides. What remains is solved in closed form:
    the quadratic formula at degree 2, in the cancellation-free form
    q = -(b + sign(b) sqrt(b^2 - 4ac)) / 2 with roots q/a and c/q (a
    complex conjugate pair for a negative discriminant), and -b/a at
    degree 1.

    Polynomials of degree 2 or less are solved in closed form directly.

    Parameters
    ----------
    coefficients : Tensor or sequence of int
        Integer coefficients in descending order (index 0 is the leading
        coefficient). Integral floats are accepted.
    latex : bool, optional
        Render the factored form with LaTeX fractions and powers. Default is
        False.

    Returns
    -------
    RuffiniResult
        A named tuple containing:

        - **roots** (*tuple*) - Roots found, floats for real roots and
          complex for complex roots, in the order they were found. Never
          more than the degree.
        - **steps** (*tuple of RuffiniStep*) - Every accepted synthetic
          division, in order.
        - **remainder** (*Polynomial*) - The working polynomial when the
          search stopped; the constant leading coefficient after a closed
          form solve.
        - **factored_form** (*str*) - Deterministic human-readable
          factorization, e.g. ``(x - 1)(x - 2)(x - 3)``.

    Raises
    ------
    InvalidPolynomialError
        If ``coefficients`` is empty, holds non-integers, or has a zero
        leading coefficient.

    Examples
    --------
    >>> result = solve_polynomial([1, -6, 11, -6])  # x^3 - 6x^2 + 11x - 6
    >>> result.roots
    (1.0, 2.0, 3.0)
    >>> len(result.steps)
    2
    >>> result.factored_form
    '(x - 1)(x - 2)(x - 3)'

    Complex roots come from the quadratic formula:

    >>> solve_polynomial([1, 0, 1]).roots
    (1j, -1j)

    Notes
    -----
    Irrational roots of factors of degree 3 or more are not isolated: for
    x^4 - 2 no rational root exists, so the result has no roots and the
    remainder is the input itself.
    """
    working = _validate(coefficients)

    degree = polynomial_degree(polynomial(working))

    roots: list[Scalar] = []
    rational_roots: list[float] = []
    steps: list[RuffiniStep] = []

    quadratic = None

    if degree > 2:
        while len(working) > 2 and len(roots) < degree - 1:
            leading = working[0]
            constant = working[-1]

            found = None

            if constant == 0:
                found = _first_root(working, [0])

            if found is None:
                integers = sorted(
                    divisors(constant), key=lambda c: (abs(c), c)
                )
                found = _first_root(working, integers)

            if found is None:
                ratios = [
                    c
                    for c in rational_root_candidates(constant, leading)
                    if c.denominator != 1
                ]
                found = _first_root(working, ratios)

            if found is None:
                break

            root, division = found

            roots.append(root)
            rational_roots.append(root)
            steps.append(
                RuffiniStep(
                    root=root,
                    coefficients=torch.tensor(working, dtype=torch.float64),
                    table=division.table,
                )
            )

            working = _snap(division.quotient.tolist())

    if len(working) == 3:
        a, b, c = working

        delta = b * b - 4 * a * c

        if delta >= 0:
            # q takes the sign of -b so the sum never cancels; the smaller
            # root comes from c / q (Vieta)
            if b >= 0:
                q = -(b + math.sqrt(delta)) / 2
            else:
                q = -(b - math.sqrt(delta)) / 2

            if q == 0:
                r1 = r2 = 0.0
            elif b >= 0:
                r1 = c / q + 0.0
                r2 = q / a + 0.0
            else:
                r1 = q / a + 0.0
                r2 = c / q + 0.0

            roots.extend((r1, r2))

            if as_fraction(r1) is not None and as_fraction(r2) is not None:
                rational_roots.extend((r1, r2))
            else:
                quadratic = working
        else:
            real = -b / (2 * a) + 0.0
            imag = math.sqrt(-delta) / (2 * a)

            roots.extend((complex(real, imag), complex(real, -imag)))

            quadratic = working

        working = [a]
    elif len(working) == 2:
        a, b = working

        root = -b / a + 0.0

        roots.append(root)
        rational_roots.append(root)

        working = [a]

    form = factored_form(
        working[0],
        rational_roots,
        quadratic=quadratic,
        remainder=working if len(working) > 2 else None,
        latex=latex,
    )

    return RuffiniResult(
        roots=tuple(roots),
        steps=tuple(steps),
        remainder=polynomial(working),
        factored_form=form,
    )
