"""Completion of a set of orthonormal columns to a larger basis."""

from typing import Optional

import torch
from torch import Generator, Tensor

# Seed for the random fallback when no generator is supplied
DEFAULT_SEED = 0


def _orthogonalize(columns: list[Tensor], v: Tensor) -> Tensor:
    # Classical Gram-Schmidt: subtract projections onto accepted columns
    for c in columns:
        v = v - torch.dot(c, v) * c

    return v


def complete_orthonormal_basis(
    columns: Tensor,
    k: int,
    *,
    epsilon: Optional[float] = None,
    generator: Optional[Generator] = None,
) -> Tensor:
    r"""
    Extend orthonormal columns to an orthonormal basis of ``k`` columns.

    The canonical vectors :math:`e_0, \ldots, e_{m-1}` are orthogonalized in
    turn against every column already in the basis; each residual whose
    norm exceeds ``epsilon`` is normalized and appended. If the canonical
    vectors are exhausted before ``k`` columns are assembled, the columns of
    the Q factor of a random matrix are used as further candidates.

    Parameters
    ----------
    columns : Tensor
        Real matrix of shape (m, r) with orthonormal columns. ``r`` may be
        zero.
    k : int
        Number of columns wanted, ``r <= k <= m``.
    epsilon : float, optional
        Residuals with norm at or below this value are discarded. Default
        is 16 times the machine epsilon of ``columns.dtype``.
    generator : torch.Generator, optional
        Source of the random fallback candidates. If None, a generator
        seeded with 0 is used so results are reproducible.

    Returns
    -------
    Tensor
        Matrix of shape (m, k) whose first r columns are ``columns``.

    Raises
    ------
    ValueError
        If ``k`` is larger than the ambient dimension m or smaller than r.

    Examples
    --------
    >>> u = torch.tensor([[1.0], [0.0], [0.0]], dtype=torch.float64)
    >>> complete_orthonormal_basis(u, 3)
    tensor([[1., 0., 0.],
            [0., 1., 0.],
            [0., 0., 1.]], dtype=torch.float64)
    """
    m, r = columns.shape

    if k > m or k < r:
        raise ValueError(
            f"complete_orthonormal_basis: k must satisfy {r} <= k <= {m}, "
            f"got {k}"
        )

    if epsilon is None:
        epsilon = 16 * torch.finfo(columns.dtype).eps

    basis = [columns[:, j] for j in range(r)]

    eye = torch.eye(m, dtype=columns.dtype, device=columns.device)

    for i in range(m):
        if len(basis) >= k:
            break

        v = _orthogonalize(basis, eye[:, i])
        norm = torch.linalg.vector_norm(v)

        if norm > epsilon:
            basis.append(v / norm)

    if len(basis) < k:
        if generator is None:
            generator = torch.Generator(device=columns.device)
            generator.manual_seed(DEFAULT_SEED)

        random = (
            torch.rand(
                m,
                k - len(basis),
                generator=generator,
                dtype=columns.dtype,
                device=columns.device,
            )
            * 2
            - 1
        )

        q, _ = torch.linalg.qr(random)

        for j in range(q.shape[-1]):
            v = _orthogonalize(basis, q[:, j])
            norm = torch.linalg.vector_norm(v)

            if norm > epsilon:
                basis.append(v / norm)

            if len(basis) == k:
                break

    if len(basis) == 0:
        return columns.new_zeros(m, 0)

    return torch.stack(basis[:k], dim=-1)
