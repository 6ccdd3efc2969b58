"""Single entry point for the calculator's matrix operations."""

from typing import Literal, Optional

import torch
from torch import Tensor

from torchalgebra._scalar import as_scalar
from torchalgebra.linear_algebra._condition_number import condition_number
from torchalgebra.linear_algebra._rank import rank
from torchalgebra.linear_algebra._reduced_row_echelon_form import (
    reduced_row_echelon_form,
)
from torchalgebra.linear_algebra._tolerances import as_matrix
from torchalgebra.linear_algebra.decomposition._result_types import (
    EigenDecompositionResult,
    LUDecompositionResult,
    MatrixOperationResult,
    MatrixResult,
    QRDecompositionResult,
    ScalarResult,
)
from torchalgebra.linear_algebra.decomposition._singular_value_decomposition import (
    singular_value_decomposition,
)

MatrixOperation = Literal[
    "add",
    "subtract",
    "multiply",
    "determinant",
    "rank",
    "trace",
    "norm",
    "condition_number",
    "inverse",
    "transpose",
    "rref",
    "pseudo_inverse",
    "solve",
    "lu",
    "qr",
    "svd",
    "eigen",
    "power",
    "matrix_exponential",
]

_BINARY = {
    "add": torch.add,
    "subtract": torch.sub,
    "multiply": torch.matmul,
}

_UNARY_MATRIX = {
    "inverse": torch.linalg.inv,
    "transpose": lambda a: a.T.clone(),
    "rref": reduced_row_echelon_form,
    "pseudo_inverse": torch.linalg.pinv,
    "matrix_exponential": torch.linalg.matrix_exp,
}


def _promote(a: Tensor, b: Tensor) -> tuple[Tensor, Tensor]:
    dtype = torch.promote_types(a.dtype, b.dtype)

    return a.to(dtype), b.to(dtype)


def matrix_operation(
    operation: MatrixOperation,
    a,
    b=None,
    *,
    vector=None,
    exponent: Optional[int] = None,
) -> MatrixOperationResult:
    r"""
    Apply a named matrix operation and return a tagged result.

    Rank, reduced row echelon form, singular value decomposition and
    condition number are computed by this package; every other operation
    is delegated to :mod:`torch.linalg`. The result is one of the
    :data:`MatrixOperationResult` variants, so callers can dispatch on the
    result type instead of probing its shape:

    .. code-block:: python

        match matrix_operation("qr", a):
            case QRDecompositionResult(Q=q, R=r):
                ...
            case MatrixResult(matrix=m):
                ...

    Parameters
    ----------
    operation : str
        One of ``"add"``, ``"subtract"``, ``"multiply"`` (require ``b``);
        ``"determinant"``, ``"rank"``, ``"trace"``, ``"norm"``
        (Frobenius), ``"condition_number"`` (scalar results);
        ``"inverse"``, ``"transpose"``, ``"rref"``, ``"pseudo_inverse"``,
        ``"matrix_exponential"`` (matrix results); ``"solve"`` (requires
        ``vector``); ``"power"`` (requires ``exponent``); ``"lu"``,
        ``"qr"``, ``"svd"``, ``"eigen"`` (decompositions).
    a : Tensor or sequence
        First operand, shape (m, n).
    b : Tensor or sequence, optional
        Second operand for the binary operations.
    vector : Tensor or sequence, optional
        Right-hand side b of ``A x = b`` for ``"solve"``.
    exponent : int, optional
        Integer power for ``"power"``. Negative powers invert ``a``.

    Returns
    -------
    MatrixOperationResult
        :class:`ScalarResult`, :class:`MatrixResult`,
        :class:`LUDecompositionResult`, :class:`QRDecompositionResult`,
        :class:`SingularValueDecompositionResult` or
        :class:`EigenDecompositionResult`.

    Raises
    ------
    ValueError
        If ``operation`` is unknown or a required operand is missing.
    torch.linalg.LinAlgError
        Propagated from :mod:`torch.linalg`, e.g. when inverting a
        singular matrix.

    Examples
    --------
    >>> a = torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)
    >>> matrix_operation("rank", a)
    ScalarResult(value=2)
    >>> matrix_operation("determinant", a).value  # doctest: +ELLIPSIS
    -2.0...
    """
    a = as_matrix(a, "matrix_operation")

    if operation in _BINARY:
        if b is None:
            raise ValueError(
                f"matrix_operation: '{operation}' requires a second matrix b"
            )

        a, b = _promote(a, as_matrix(b, "matrix_operation"))

        return MatrixResult(matrix=_BINARY[operation](a, b))

    if operation in _UNARY_MATRIX:
        return MatrixResult(matrix=_UNARY_MATRIX[operation](a))

    if operation == "determinant":
        return ScalarResult(value=as_scalar(torch.linalg.det(a)))

    if operation == "trace":
        return ScalarResult(value=as_scalar(torch.trace(a)))

    if operation == "norm":
        return ScalarResult(value=torch.linalg.matrix_norm(a).item())

    if operation == "rank":
        return ScalarResult(value=rank(a))

    if operation == "condition_number":
        return ScalarResult(value=condition_number(a))

    if operation == "solve":
        if vector is None:
            raise ValueError(
                "matrix_operation: 'solve' requires a right-hand side vector"
            )

        if isinstance(vector, Tensor):
            vector = vector.reshape(1, -1)
        else:
            vector = [list(vector)]

        rhs = as_matrix(vector, "matrix_operation").T
        a, rhs = _promote(a, rhs)

        return MatrixResult(matrix=torch.linalg.solve(a, rhs))

    if operation == "power":
        if exponent is None or int(exponent) != exponent:
            raise ValueError(
                f"matrix_operation: 'power' requires an integer exponent, "
                f"got {exponent}"
            )

        power = torch.linalg.matrix_power(a, int(exponent))

        return MatrixResult(matrix=power)

    if operation == "lu":
        P, L, U = torch.linalg.lu(a)

        return LUDecompositionResult(P=P, L=L, U=U)

    if operation == "qr":
        Q, R = torch.linalg.qr(a, mode="complete")

        return QRDecompositionResult(Q=Q, R=R)

    if operation == "svd":
        return singular_value_decomposition(a)

    if operation == "eigen":
        eigenvalues, eigenvectors = torch.linalg.eig(a)

        return EigenDecompositionResult(
            eigenvalues=eigenvalues, eigenvectors=eigenvectors
        )

    raise ValueError(f"matrix_operation: unknown operation '{operation}'")
