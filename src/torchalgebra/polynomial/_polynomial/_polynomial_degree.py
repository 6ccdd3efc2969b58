from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return the formal degree len(coeffs) - 1 of a polynomial."""
    return p.coeffs.shape[-1] - 1
