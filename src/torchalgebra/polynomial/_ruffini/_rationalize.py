from fractions import Fraction
from typing import Optional

from ._constants import MAX_DENOMINATOR, ROOT_TOLERANCE


def rationalize(
    x: float, max_denominator: int = MAX_DENOMINATOR
) -> tuple[int, int]:
    """Closest fraction to ``x`` with a bounded denominator.

    Parameters
    ----------
    x : float
        Finite value to approximate.
    max_denominator : int, optional
        Largest allowed denominator. Default is 10000.

    Returns
    -------
    tuple of int
        ``(numerator, denominator)`` in lowest terms, denominator positive.

    Examples
    --------
    >>> rationalize(0.75)
    (3, 4)
    >>> rationalize(-1 / 3)
    (-1, 3)
    """
    f = Fraction(x).limit_denominator(max_denominator)

    return f.numerator, f.denominator


def as_fraction(
    x: float,
    max_denominator: int = MAX_DENOMINATOR,
    tolerance: float = ROOT_TOLERANCE,
) -> Optional[Fraction]:
    """``x`` as a Fraction if it is rational within ``tolerance``."""
    numerator, denominator = rationalize(x, max_denominator)

    f = Fraction(numerator, denominator)

    if abs(x - float(f)) < tolerance:
        return f

    return None
