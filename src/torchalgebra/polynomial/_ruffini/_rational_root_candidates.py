from fractions import Fraction


def divisors(n: float) -> list[int]:
    """Positive and negative divisors of round(n), ascending.

    ``divisors(0)`` is ``[0]``.

    Examples
    --------
    >>> divisors(-6)
    [-6, -3, -2, -1, 1, 2, 3, 6]
    """
    n = abs(round(n))

    if n == 0:
        return [0]

    result = set()

    i = 1
    while i * i <= n:
        if n % i == 0:
            result.update((i, -i, n // i, -(n // i)))
        i += 1

    return sorted(result)


def rational_root_candidates(
    constant: float, leading: float
) -> list[Fraction]:
    """Candidate rational roots p/q of an integer polynomial.

    By the rational root theorem every rational root p/q in lowest terms
    has p dividing the constant term and q dividing the leading
    coefficient.

    Parameters
    ----------
    constant : float
        Constant term, rounded to the nearest integer.
    leading : float
        Leading coefficient, rounded to the nearest integer.

    Returns
    -------
    list of Fraction
        Distinct candidates ordered by magnitude, negative first on ties.

    Examples
    --------
    >>> [str(c) for c in rational_root_candidates(1, 2)]
    ['-1/2', '1/2', '-1', '1']
    """
    candidates = {
        Fraction(p, q)
        for p in divisors(constant)
        for q in divisors(leading)
        if q != 0
    }

    return sorted(candidates, key=lambda c: (abs(c), c))
