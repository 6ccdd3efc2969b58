from typing import Optional, Sequence

from ._constants import ROOT_TOLERANCE
from ._rationalize import as_fraction


def _format_magnitude(x: float, *, latex: bool, wrap: bool = False) -> str:
    # Non-negative value as an integer, a reduced fraction or a decimal
    f = as_fraction(x)

    if f is None:
        return f"{x:.6g}"

    if f.denominator == 1:
        return str(f.numerator)

    if latex:
        return f"\\frac{{{f.numerator}}}{{{f.denominator}}}"

    if wrap:
        return f"({f.numerator}/{f.denominator})"

    return f"{f.numerator}/{f.denominator}"


def _format_power(power: int, *, latex: bool) -> str:
    if power == 0:
        return ""

    if power == 1:
        return "x"

    if latex:
        return f"x^{{{power}}}"

    return f"x^{power}"


def format_leading(leading: float, *, latex: bool = False) -> str:
    """Leading scalar factor: empty for 1, ``-`` for -1."""
    if leading == 1:
        return ""

    if leading == -1:
        return "-"

    sign = "-" if leading < 0 else ""

    return sign + _format_magnitude(abs(leading), latex=latex)


def format_root_factor(root: float, *, latex: bool = False) -> str:
    """Linear factor ``(x - r)``, ``(x + |r|)``, or ``x`` for r = 0."""
    if abs(root) < ROOT_TOLERANCE:
        return "x"

    sign = "-" if root > 0 else "+"

    return f"(x {sign} {_format_magnitude(abs(root), latex=latex)})"


def format_polynomial(
    coefficients: Sequence[float], *, latex: bool = False
) -> str:
    """Parenthesized polynomial from descending coefficients.

    Examples
    --------
    >>> format_polynomial([1.0, 0.0, 0.0, 0.0, -2.0])
    '(x^4 - 2)'
    >>> format_polynomial([1.0, 1.5, 1.0])
    '(x^2 + (3/2)x + 1)'
    """
    degree = len(coefficients) - 1

    terms = []

    for i, c in enumerate(coefficients):
        if abs(c) < ROOT_TOLERANCE:
            continue

        power = degree - i

        if not terms:
            sign = "-" if c < 0 else ""
        else:
            sign = " - " if c < 0 else " + "

        magnitude = _format_magnitude(abs(c), latex=latex, wrap=power > 0)

        if magnitude == "1" and power > 0:
            magnitude = ""

        terms.append(sign + magnitude + _format_power(power, latex=latex))

    if not terms:
        return "0"

    return "(" + "".join(terms) + ")"


def factored_form(
    leading: float,
    roots: Sequence[float],
    *,
    quadratic: Optional[Sequence[float]] = None,
    remainder: Optional[Sequence[float]] = None,
    latex: bool = False,
) -> str:
    r"""Render a factorization found by the Ruffini solver.

    The string is the leading scalar, one linear factor per nonzero
    rational root in the order the roots were found, then the quadratic
    factor whose roots are not rational (if any) and the unfactored
    remainder of degree at least 2 (if any). Both are normalized to be
    monic. Zero roots are grouped into one power of x, ``x^n``, placed
    where the first of them was found.

    Parameters
    ----------
    leading : float
        Leading coefficient of the original polynomial.
    roots : sequence of float
        Rational roots, each rendered as a linear factor.
    quadratic : sequence of float, optional
        Coefficients (a, b, c) of a quadratic with irrational or complex
        roots.
    remainder : sequence of float, optional
        Coefficients of a polynomial left unfactored.
    latex : bool, optional
        Render fractions as ``\frac{p}{q}`` and powers as ``x^{n}``.
        Default is False.

    Returns
    -------
    str
        Factored form, e.g. ``2(x - 1)(x + 1/2)``.

    Examples
    --------
    >>> factored_form(1.0, [1.0, 2.0, 3.0])
    '(x - 1)(x - 2)(x - 3)'
    >>> factored_form(1.0, [0.0, 0.0, -1.0])
    'x^2(x + 1)'
    >>> factored_form(1.0, [], quadratic=[1.0, 0.0, 1.0])
    '(x^2 + 1)'
    >>> factored_form(2.0, [1.0, -0.5], latex=True)
    '2(x - 1)(x + \\frac{1}{2})'
    """
    parts = [format_leading(leading, latex=latex)]

    zeros = sum(1 for r in roots if abs(r) < ROOT_TOLERANCE)

    for r in roots:
        if abs(r) >= ROOT_TOLERANCE:
            parts.append(format_root_factor(r, latex=latex))
        elif zeros:
            parts.append(_format_power(zeros, latex=latex))
            zeros = 0

    for factor in (quadratic, remainder):
        if factor is not None and len(factor) > 2:
            monic = [c / factor[0] for c in factor]
            parts.append(format_polynomial(monic, latex=latex))

    result = "".join(parts)

    if result == "":
        return "1"

    if result == "-":
        return "-1"

    return result
