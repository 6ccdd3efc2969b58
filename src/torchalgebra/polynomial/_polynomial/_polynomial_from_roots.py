from typing import Sequence, Union

import torch
from torch import Tensor

from ._polynomial import Polynomial, polynomial


def polynomial_from_roots(
    roots: Union[Tensor, Sequence[complex]],
    leading: float = 1.0,
) -> Polynomial:
    """Construct polynomial from its roots and leading coefficient.

    Constructs leading * (x - r_0)(x - r_1)...(x - r_{n-1}).

    Parameters
    ----------
    roots : Tensor or sequence
        Roots, shape (N,). Can be complex.
    leading : float, optional
        Leading coefficient. Default is 1.0 (monic).

    Returns
    -------
    Polynomial
        Polynomial with given roots, descending coefficients of shape (N+1,).
        Complex when any root is complex.

    Examples
    --------
    >>> p = polynomial_from_roots([1.0, 2.0])  # x^2 - 3x + 2
    >>> p.coeffs
    tensor([ 1., -3.,  2.], dtype=torch.float64)
    """
    if not isinstance(roots, Tensor):
        values = list(roots)
        if any(isinstance(r, complex) for r in values):
            roots = torch.tensor(values, dtype=torch.complex128)
        else:
            roots = torch.tensor(values, dtype=torch.float64)

    coeffs = torch.full((1,), leading, dtype=roots.dtype)

    for r in roots:
        # (c_0 x^i + ... + c_i) * (x - r)
        shifted = torch.nn.functional.pad(coeffs, (0, 1))  # multiply by x
        scaled = torch.nn.functional.pad(coeffs, (1, 0)) * r

        coeffs = shifted - scaled

    return polynomial(coeffs)
