from torchalgebra.polynomial._polynomial_error import PolynomialError


class InvalidPolynomialError(PolynomialError):
    """Invalid polynomial coefficients.

    Raised when a coefficient sequence is empty, has a zero leading
    coefficient (the degree is undefined), or holds values the operation
    cannot accept (e.g. non-integers for the rational root search).
    """

    pass
