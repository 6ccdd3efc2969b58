import math
from typing import Sequence, Union

import torch
from torch import Tensor

from torchalgebra.polynomial._invalid_polynomial_error import (
    InvalidPolynomialError,
)

from ._result_types import SyntheticDivisionResult, SyntheticDivisionTable


def synthetic_division(
    coefficients: Union[Tensor, Sequence[float]], root: float
) -> SyntheticDivisionResult:
    """Divide a polynomial by (x - root) with Ruffini's rule.

    Horner accumulation: the leading coefficient is brought down, and each
    following column adds root times the previous result to the dividend
    coefficient. The last result is the remainder p(root).

    Parameters
    ----------
    coefficients : Tensor or sequence of float
        Dividend coefficients in descending order, shape (N,).
    root : float
        The r of the divisor (x - r).

    Returns
    -------
    SyntheticDivisionResult
        A named tuple containing:

        - **quotient** (*Tensor*) - Descending coefficients of shape
          (N-1,).
        - **remainder** (*float*) - p(root).
        - **table** (*SyntheticDivisionTable*) - The three rows of the
          division.

    Raises
    ------
    InvalidPolynomialError
        If ``coefficients`` is empty.

    Examples
    --------
    >>> result = synthetic_division([1.0, -6.0, 11.0, -6.0], 1.0)
    >>> result.quotient
    tensor([ 1., -5.,  6.], dtype=torch.float64)
    >>> result.remainder
    0.0
    """
    if isinstance(coefficients, Tensor):
        coefficients = coefficients.tolist()

    coeffs = [float(c) for c in coefficients]

    if not coeffs:
        raise InvalidPolynomialError(
            "synthetic_division: coefficients must not be empty"
        )

    root = float(root)

    current = coeffs[0]

    quotient = []
    products = [math.nan]
    result_row = [current]

    for c in coeffs[1:]:
        quotient.append(current)

        product = current * root
        products.append(product)

        current = c + product
        result_row.append(current)

    table = SyntheticDivisionTable(
        top_row=torch.tensor(coeffs, dtype=torch.float64),
        products=torch.tensor(products, dtype=torch.float64),
        result_row=torch.tensor(result_row, dtype=torch.float64),
    )

    return SyntheticDivisionResult(
        quotient=torch.tensor(quotient, dtype=torch.float64),
        remainder=current,
        table=table,
    )
