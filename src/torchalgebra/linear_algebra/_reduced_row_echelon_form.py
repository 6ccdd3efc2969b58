"""Reduced row echelon form over the complex field."""

import torch
from torch import Tensor

from torchalgebra.linear_algebra._tolerances import as_matrix


def _collapse_imaginary(m: Tensor, epsilon: float) -> Tensor:
    """Drop imaginary parts smaller than ``epsilon``.

    Returns a real tensor when every entry collapses.
    """
    negligible = m.imag.abs() < epsilon

    if torch.all(negligible):
        return m.real.clone()

    real = torch.complex(m.real, torch.zeros_like(m.real))

    return torch.where(negligible, real, m)


def reduced_row_echelon_form(a, *, epsilon: float = 1e-12) -> Tensor:
    r"""
    Reduced row echelon form by Gauss-Jordan elimination.

    Columns are scanned left to right. For each column the first row at or
    below the current pivot row whose entry has modulus greater than
    ``epsilon`` becomes the pivot: it is swapped into place, scaled so the
    pivot equals 1, and its multiples are subtracted from every other row
    so the pivot is the only nonzero entry of its column. Columns without
    such an entry contribute no pivot.

    Parameters
    ----------
    a : Tensor or sequence
        Input matrix of shape (m, n). Real or complex. Integer inputs are
        promoted to float64.
    epsilon : float, optional
        Entries with modulus at or below this value are treated as zero
        when searching for pivots. Default is 1e-12.

    Returns
    -------
    Tensor
        Matrix of shape (m, n) in reduced row echelon form. The result is
        float64 when every imaginary part is smaller than ``epsilon``,
        otherwise complex128 with the negligible imaginary parts zeroed.

    Raises
    ------
    ValueError
        If ``a`` is not 2D or ``epsilon`` is negative.

    Examples
    --------
    >>> a = torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)
    >>> reduced_row_echelon_form(a)
    tensor([[1., 0.],
            [0., 1.]], dtype=torch.float64)

    Rank-deficient input leaves a zero row at the bottom:

    >>> a = torch.tensor([[1.0, 2.0], [2.0, 4.0]], dtype=torch.float64)
    >>> reduced_row_echelon_form(a)
    tensor([[1., 2.],
            [0., 0.]], dtype=torch.float64)

    Notes
    -----
    Elimination always runs in complex128 so that real and complex
    matrices share one code path. The input is never modified.
    """
    a = as_matrix(a, "reduced_row_echelon_form")

    if epsilon < 0:
        raise ValueError(
            f"reduced_row_echelon_form: epsilon must be non-negative, "
            f"got {epsilon}"
        )

    m = a.to(torch.complex128).clone()
    rows, cols = m.shape

    pivot_row = 0

    for lead in range(cols):
        if pivot_row >= rows:
            break

        candidates = torch.nonzero(m[pivot_row:, lead].abs() > epsilon)

        if candidates.numel() == 0:
            continue

        i = pivot_row + int(candidates[0, 0])

        if i != pivot_row:
            m[[pivot_row, i]] = m[[i, pivot_row]]

        m[pivot_row] = m[pivot_row] / m[pivot_row, lead]

        factors = m[:, lead].clone()
        factors[pivot_row] = 0

        m = m - factors.unsqueeze(-1) * m[pivot_row].unsqueeze(0)

        pivot_row += 1

    return _collapse_imaginary(m, epsilon)
