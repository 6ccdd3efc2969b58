"""2-norm condition number."""

import math
from typing import Callable, Optional

import torch
from torch import Tensor

from torchalgebra.linear_algebra.decomposition._result_types import (
    SymmetricEigenvalueResult,
)
from torchalgebra.linear_algebra.decomposition._singular_value_decomposition import (
    singular_value_decomposition,
)


def condition_number(
    a,
    *,
    epsilon: Optional[float] = None,
    eigensolver: Optional[
        Callable[[Tensor], SymmetricEigenvalueResult]
    ] = None,
) -> float:
    r"""
    Condition number in the 2-norm.

    .. math::

        \kappa_2(A) = \frac{\sigma_{\max}}{\sigma_{\min}}

    where the singular values come from
    :func:`~torchalgebra.linear_algebra.decomposition.singular_value_decomposition`
    and :math:`\sigma_{\min}` is the smallest of the :math:`\min(m, n)`
    singular values.

    Parameters
    ----------
    a : Tensor or sequence
        Real input matrix of shape (m, n).
    epsilon : float, optional
        If the smallest singular value does not exceed this threshold the
        matrix is treated as singular. Default is 16 times the machine
        epsilon of float64.
    eigensolver : callable, optional
        Passed through to the singular value decomposition.

    Returns
    -------
    float
        :math:`\sigma_{\max} / \sigma_{\min}`, ``math.inf`` for singular
        matrices, or 0.0 for an empty matrix.

    Examples
    --------
    >>> condition_number(torch.eye(4, dtype=torch.float64))
    1.0
    >>> condition_number(
    ...     torch.tensor([[1.0, 2.0], [2.0, 4.0]], dtype=torch.float64)
    ... )
    inf
    """
    if epsilon is None:
        epsilon = 16 * torch.finfo(torch.float64).eps

    S = singular_value_decomposition(a, eigensolver=eigensolver).S

    if S.numel() == 0:
        return 0.0

    s_max = S[0].item()
    s_min = S[-1].item()

    if s_min > epsilon:
        return s_max / s_min

    return math.inf
