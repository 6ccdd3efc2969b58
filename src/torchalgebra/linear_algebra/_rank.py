"""Numerical rank from the reduced row echelon form."""

import torch

from torchalgebra.linear_algebra._reduced_row_echelon_form import (
    reduced_row_echelon_form,
)


def rank(a, *, epsilon: float = 1e-12) -> int:
    """Numerical rank of a real or complex matrix.

    The rank is the number of rows of the reduced row echelon form that
    contain at least one entry with modulus greater than ``epsilon``.

    Parameters
    ----------
    a : Tensor or sequence
        Input matrix of shape (m, n).
    epsilon : float, optional
        Zero threshold, shared with the row reduction. Default is 1e-12.

    Returns
    -------
    int
        Numerical rank, between 0 and min(m, n).

    Raises
    ------
    ValueError
        If ``a`` is not 2D or ``epsilon`` is negative.

    Examples
    --------
    >>> rank(torch.eye(3, dtype=torch.float64))
    3
    >>> rank(torch.zeros(2, 4, dtype=torch.float64))
    0
    """
    r = reduced_row_echelon_form(a, epsilon=epsilon)

    if r.numel() == 0:
        return 0

    nonzero_rows = (r.abs() > epsilon).any(dim=-1)

    return int(torch.count_nonzero(nonzero_rows))
