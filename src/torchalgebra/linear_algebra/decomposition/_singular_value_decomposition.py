"""Singular value decomposition via the Gram matrix."""

import warnings
from typing import Callable, Optional

import torch
from torch import Generator, Tensor

from torchalgebra.linear_algebra._tolerances import (
    as_matrix,
    default_tolerances,
)
from torchalgebra.linear_algebra.decomposition._complete_orthonormal_basis import (
    _orthogonalize,
    complete_orthonormal_basis,
)
from torchalgebra.linear_algebra.decomposition._result_types import (
    SingularValueDecompositionResult,
    SymmetricEigenvalueResult,
)
from torchalgebra.linear_algebra.decomposition._symmetric_eigenvalue import (
    symmetric_eigenvalue,
)


def _as_real(a: Tensor, epsilon: float) -> Tensor:
    if not a.is_complex():
        return a

    if torch.any(a.imag.abs() > epsilon):
        raise ValueError(
            "singular_value_decomposition: only implemented for real "
            "matrices"
        )

    return a.real.clone()


def _eigenpairs(
    gram: Tensor,
    eigensolver: Callable[[Tensor], SymmetricEigenvalueResult],
    k: int,
    generator: Optional[Generator],
) -> tuple[Tensor, Tensor]:
    n = gram.shape[0]

    try:
        eigenvalues, eigenvectors = eigensolver(gram)
    except torch.linalg.LinAlgError as e:
        warnings.warn(
            f"singular_value_decomposition: eigensolver failed ({e}); "
            f"singular values set to zero",
            RuntimeWarning,
            stacklevel=3,
        )
    else:
        if torch.all(torch.isfinite(eigenvalues)) and torch.all(
            torch.isfinite(eigenvectors)
        ):
            return eigenvalues.to(gram.dtype), eigenvectors.to(gram.dtype)

        warnings.warn(
            "singular_value_decomposition: eigensolver returned non-finite "
            "values; singular values set to zero",
            RuntimeWarning,
            stacklevel=3,
        )

    eigenvectors = complete_orthonormal_basis(
        gram.new_zeros(n, 0), k, generator=generator
    )

    return gram.new_zeros(k), eigenvectors


def singular_value_decomposition(
    a,
    *,
    epsilon: Optional[float] = None,
    eigensolver: Optional[
        Callable[[Tensor], SymmetricEigenvalueResult]
    ] = None,
    generator: Optional[Generator] = None,
) -> SingularValueDecompositionResult:
    r"""
    Economy-size singular value decomposition of a real matrix.

    Computes

    .. math::

        A = U \operatorname{diag}(S) V^T

    from the eigen-decomposition of the Gram matrix :math:`G = A^T A`.
    With :math:`k = \min(m, n)`, the k largest eigenvalues give the
    singular values :math:`\sigma_i = \sqrt{\max(\lambda_i, 0)}` and their
    eigenvectors give V. The left singular vectors are
    :math:`u_i = A v_i / \sigma_i` for every non-negligible singular value;
    when A is rank deficient the remaining columns of U are filled with an
    orthonormal completion, so U never contains zero columns.

    Parameters
    ----------
    a : Tensor or sequence
        Real input matrix of shape (m, n). Integer inputs are promoted to
        float64. Complex inputs are accepted only when every imaginary
        part is negligible.
    epsilon : float, optional
        Singular values at or below this threshold are treated as zero, as
        are singular values whose image norm |A v| falls below half their
        value (rounding noise from forming the Gram matrix).
        Default is ``max(m, n) * eps * S[0]``, floored at ``16 * eps`` where
        ``eps`` is the machine epsilon of the working dtype.
    eigensolver : callable, optional
        Function mapping a symmetric (n, n) matrix to a
        :class:`SymmetricEigenvalueResult`. Default is
        :func:`symmetric_eigenvalue`.
    generator : torch.Generator, optional
        Random source for the last-resort basis completion. If None, a
        generator with a fixed seed is used.

    Returns
    -------
    SingularValueDecompositionResult
        A named tuple containing:

        - **U** (*Tensor*) - Left singular vectors of shape (m, k) with
          orthonormal columns.
        - **S** (*Tensor*) - Singular values of shape (k,), non-negative
          and in descending order.
        - **V** (*Tensor*) - Right singular vectors of shape (n, k) with
          orthonormal columns (not transposed).

    Raises
    ------
    ValueError
        If ``a`` is not 2D or has non-negligible imaginary parts.

    Warns
    -----
    RuntimeWarning
        If the eigensolver fails. The failure is masked: the singular
        values are set to zero and U, V are orthonormal completions.

    Examples
    --------
    >>> a = torch.tensor([[3.0, 0.0], [0.0, -2.0]], dtype=torch.float64)
    >>> singular_value_decomposition(a).S
    tensor([3., 2.], dtype=torch.float64)

    A singular matrix still yields a full orthonormal U:

    >>> a = torch.tensor(
    ...     [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [0.0, 0.0, 0.0]],
    ...     dtype=torch.float64,
    ... )
    >>> result = singular_value_decomposition(a)
    >>> eye = torch.eye(3, dtype=torch.float64)
    >>> torch.allclose(result.U.T @ result.U, eye)
    True

    Notes
    -----
    Forming :math:`A^T A` squares the condition number, so singular values
    much smaller than :math:`\sqrt{\text{eps}} \cdot \sigma_{\max}` lose
    relative accuracy. This is acceptable for the small, well-scaled
    matrices (2x2 up to 8x8) the function is meant for. Complexity is
    :math:`O(n^3)`.
    """
    a = as_matrix(a, "singular_value_decomposition")

    real_dtype = a.real.dtype if a.is_complex() else a.dtype
    tolerances = default_tolerances(real_dtype)
    floor = tolerances["singular_value"]

    a = _as_real(a, tolerances["epsilon"])

    if eigensolver is None:
        eigensolver = symmetric_eigenvalue

    m, n = a.shape
    k = min(m, n)

    if k == 0:
        return SingularValueDecompositionResult(
            U=a.new_zeros(m, 0), S=a.new_zeros(0), V=a.new_zeros(n, 0)
        )

    gram = a.T @ a

    eigenvalues, eigenvectors = _eigenpairs(gram, eigensolver, k, generator)

    order = torch.argsort(eigenvalues, descending=True, stable=True)[:k]

    S = torch.sqrt(torch.clamp(eigenvalues[order], min=0))
    V = eigenvectors[:, order]

    if epsilon is None:
        eps = torch.finfo(a.dtype).eps
        epsilon = max(max(m, n) * eps * S[0].item(), floor)

    # |A v| equals sigma for a genuine singular pair; a much smaller image
    # means sigma is rounding noise from forming A^T A
    AV = a @ V
    images = torch.linalg.vector_norm(AV, dim=0)

    significant = (S > epsilon) & (images > 0.5 * S)

    S = torch.where(significant, S, torch.zeros_like(S))

    order = torch.argsort(S, descending=True, stable=True)

    S = S[order]
    V = V[:, order]
    AV = AV[:, order]

    r = int(torch.count_nonzero(significant))

    # Normalize the first r columns of A V, re-orthogonalizing against drift
    columns = []

    for j in range(r):
        u = _orthogonalize(columns, AV[:, j])
        columns.append(u / torch.linalg.vector_norm(u).clamp(min=floor))

    if columns:
        U = torch.stack(columns, dim=-1)
    else:
        U = a.new_zeros(m, 0)

    if r < k:
        U = complete_orthonormal_basis(
            U, k, epsilon=floor, generator=generator
        )

    return SingularValueDecompositionResult(U=U, S=S, V=V)
