"""Symmetric eigenvalue decomposition."""

import torch
from torch import Tensor

from torchalgebra.linear_algebra.decomposition._result_types import (
    SymmetricEigenvalueResult,
)


def symmetric_eigenvalue(a: Tensor) -> SymmetricEigenvalueResult:
    r"""
    Eigenvalues and eigenvectors of a real symmetric matrix.

    This is the default eigensolver used by
    :func:`singular_value_decomposition`. Any callable with the same
    signature can be passed there instead.

    Parameters
    ----------
    a : Tensor
        Real symmetric matrix of shape (n, n). Only the lower triangle is
        read.

    Returns
    -------
    SymmetricEigenvalueResult
        A named tuple containing:

        - **eigenvalues** (*Tensor*) - Real eigenvalues of shape (n,) in
          ascending order.
        - **eigenvectors** (*Tensor*) - Orthonormal eigenvectors as the
          columns of an (n, n) matrix.

    Raises
    ------
    ValueError
        If ``a`` is not a square 2D tensor.
    torch.linalg.LinAlgError
        If the underlying solver does not converge.

    Examples
    --------
    >>> a = torch.tensor([[2.0, 1.0], [1.0, 2.0]], dtype=torch.float64)
    >>> symmetric_eigenvalue(a).eigenvalues
    tensor([1., 3.], dtype=torch.float64)
    """
    if a.dim() != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(
            f"symmetric_eigenvalue: a must be a square matrix, "
            f"got shape {tuple(a.shape)}"
        )

    eigenvalues, eigenvectors = torch.linalg.eigh(a)

    return SymmetricEigenvalueResult(
        eigenvalues=eigenvalues, eigenvectors=eigenvectors
    )
