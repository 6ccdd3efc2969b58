import math
from fractions import Fraction
from typing import List, Tuple

import hypothesis.strategies

from ._rational_roots import rational_roots


def _expand(roots: List[Fraction]) -> List[int]:
    # prod (q x - p), descending
    coefficients = [1]

    for root in roots:
        p, q = root.numerator, root.denominator

        shifted = [q * c for c in coefficients] + [0]

        for i, c in enumerate(coefficients):
            shifted[i + 1] -= p * c

        coefficients = shifted

    common = 0

    for c in coefficients:
        common = math.gcd(common, c)

    return [c // common for c in coefficients] if common else coefficients


@hypothesis.strategies.composite
def integer_polynomials(
    draw: hypothesis.strategies.DrawFn,
    min_degree: int = 1,
    max_degree: int = 5,
    max_numerator: int = 6,
    max_denominator: int = 3,
) -> Tuple[List[int], List[Fraction]]:
    """Generate an integer polynomial with known rational roots.

    Returns
    -------
    tuple
        Descending integer coefficients (content 1, positive leading
        coefficient) and the roots used to build them.
    """
    roots = draw(
        hypothesis.strategies.lists(
            rational_roots(max_numerator, max_denominator),
            min_size=min_degree,
            max_size=max_degree,
        )
    )

    return _expand(roots), roots
