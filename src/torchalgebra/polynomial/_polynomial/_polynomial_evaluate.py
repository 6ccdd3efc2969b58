from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(
    p: Polynomial, x: Union[Tensor, complex, float]
) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with descending coefficients, shape (N,).
    x : Tensor or scalar
        Evaluation points of any shape. Complex points are supported.

    Returns
    -------
    Tensor
        Values p(x), same shape as ``x``. Complex if either the
        coefficients or ``x`` are complex.

    Examples
    --------
    >>> p = polynomial([1.0, 0.0, -4.0])  # x^2 - 4
    >>> polynomial_evaluate(p, torch.tensor([0.0, 2.0], dtype=torch.float64))
    tensor([-4.,  0.], dtype=torch.float64)
    """
    coeffs = p.coeffs

    if not isinstance(x, Tensor):
        if isinstance(x, complex):
            x = torch.tensor(x, dtype=torch.complex128)
        else:
            x = torch.tensor(x, dtype=coeffs.dtype)

    dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(dtype)
    x = x.to(dtype)

    result = torch.zeros_like(x)

    for c in coeffs:
        result = result * x + c

    return result
