from typing import NamedTuple, Union

from torch import Tensor

from torchalgebra._scalar import Scalar


class SymmetricEigenvalueResult(NamedTuple):
    """Result of symmetric eigenvalue decomposition A = QΛQᵀ."""

    eigenvalues: Tensor  # (n,) - real, any order
    eigenvectors: Tensor  # (n, n) - eigenvectors as columns


class SingularValueDecompositionResult(NamedTuple):
    """Result of singular value decomposition A = U diag(S) Vᵀ.

    The decomposition is economy-size: with k = min(m, n), U and V both
    have k orthonormal columns, also when A is rank deficient.
    """

    U: Tensor  # (m, k) - Left singular vectors
    S: Tensor  # (k,) - Singular values, non-negative, descending
    V: Tensor  # (n, k) - Right singular vectors, not transposed


class LUDecompositionResult(NamedTuple):
    """Result of LU decomposition with partial pivoting A = PLU."""

    P: Tensor  # (m, m) - Permutation matrix
    L: Tensor  # (m, k) - Unit lower triangular
    U: Tensor  # (k, n) - Upper triangular


class QRDecompositionResult(NamedTuple):
    """Result of QR decomposition A = QR."""

    Q: Tensor  # (m, m) - Orthogonal/unitary matrix
    R: Tensor  # (m, n) - Upper triangular


class EigenDecompositionResult(NamedTuple):
    """Result of general eigenvalue decomposition AV = VΛ."""

    eigenvalues: Tensor  # (n,) - complex
    eigenvectors: Tensor  # (n, n) - complex, eigenvectors as columns


class ScalarResult(NamedTuple):
    """Scalar produced by a matrix operation (determinant, rank, ...)."""

    value: Union[int, Scalar]


class MatrixResult(NamedTuple):
    """Plain matrix produced by a matrix operation."""

    matrix: Tensor


MatrixOperationResult = Union[
    ScalarResult,
    MatrixResult,
    LUDecompositionResult,
    QRDecompositionResult,
    SingularValueDecompositionResult,
    EigenDecompositionResult,
]
