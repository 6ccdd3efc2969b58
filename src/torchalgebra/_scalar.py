"""Scalar values shared by the matrix and polynomial engines."""

from typing import Union

from torch import Tensor

Scalar = Union[float, complex]


def as_scalar(
    value: Union[int, float, complex, Tensor],
    epsilon: float = 1e-12,
) -> Scalar:
    """Convert a number or 0-d tensor to a Python scalar.

    Parameters
    ----------
    value : int, float, complex or Tensor
        Value to convert. Tensors must hold exactly one element.
    epsilon : float, optional
        Imaginary parts with magnitude below this threshold are dropped.
        Default is 1e-12.

    Returns
    -------
    float or complex
        ``float`` when the value is real within ``epsilon``, otherwise
        ``complex``.

    Examples
    --------
    >>> as_scalar(complex(2.0, 1e-15))
    2.0
    >>> as_scalar(torch.tensor(1.0 + 2.0j))
    (1+2j)
    """
    if isinstance(value, Tensor):
        value = value.item()

    value = complex(value)

    if abs(value.imag) < epsilon:
        return value.real

    return value
