from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchalgebra.polynomial._invalid_polynomial_error import (
    InvalidPolynomialError,
)


@tensorclass
class Polynomial:
    """Polynomial in power basis with descending coefficients.

    Represents p(x) = coeffs[0]*x^(N-1) + coeffs[1]*x^(N-2) + ... + coeffs[-1]

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in descending order, shape (N,) where N = degree + 1.
        coeffs[0] is the leading coefficient, coeffs[-1] the constant term.

    Examples
    --------
    x^3 - 6x^2 + 11x - 6:
        Polynomial(coeffs=torch.tensor([1.0, -6.0, 11.0, -6.0]))

    Evaluation:
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __call__(self, x: Union[Tensor, complex, float]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(coeffs: Union[Tensor, Sequence[float]]) -> Polynomial:
    """Create polynomial from descending coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of numbers
        Coefficients in descending order, shape (N,). Python sequences are
        converted to float64 (complex128 if any value is complex).

    Returns
    -------
    Polynomial
        Polynomial instance.

    Raises
    ------
    InvalidPolynomialError
        If coeffs is empty or not one-dimensional.

    Examples
    --------
    >>> p = polynomial([1, 0, -4])  # x^2 - 4
    >>> p.coeffs
    tensor([ 1.,  0., -4.], dtype=torch.float64)
    """
    if not isinstance(coeffs, Tensor):
        values = list(coeffs)
        if any(isinstance(c, complex) for c in values):
            coeffs = torch.tensor(values, dtype=torch.complex128)
        else:
            coeffs = torch.tensor(values, dtype=torch.float64)

    if coeffs.dim() != 1 or coeffs.numel() == 0:
        raise InvalidPolynomialError(
            "Polynomial must have a non-empty 1D coefficient tensor, "
            f"got shape {tuple(coeffs.shape)}"
        )

    return Polynomial(coeffs=coeffs)
