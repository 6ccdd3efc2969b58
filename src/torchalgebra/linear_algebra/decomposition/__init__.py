"""Matrix decompositions.

Functions
---------
singular_value_decomposition
    Computes the economy-size SVD A = U diag(S) V^T of a real matrix from
    the eigen-decomposition of A^T A. U is completed to a full orthonormal
    basis when A is rank deficient.

symmetric_eigenvalue
    Computes eigenvalues and eigenvectors of a real symmetric matrix. This
    is the default eigensolver of singular_value_decomposition.

complete_orthonormal_basis
    Extends a set of orthonormal columns to an orthonormal basis with a
    requested number of columns.

Result Types
------------
SingularValueDecompositionResult
    Named tuple with U, S, V.

SymmetricEigenvalueResult
    Named tuple with eigenvalues, eigenvectors.

LUDecompositionResult
    Named tuple with P, L, U.

QRDecompositionResult
    Named tuple with Q, R.

EigenDecompositionResult
    Named tuple with eigenvalues, eigenvectors.

ScalarResult
    Named tuple with value.

MatrixResult
    Named tuple with matrix.

MatrixOperationResult
    Union of the result types above, returned by matrix_operation.
"""

from torchalgebra.linear_algebra.decomposition._complete_orthonormal_basis import (
    complete_orthonormal_basis,
)
from torchalgebra.linear_algebra.decomposition._result_types import (
    EigenDecompositionResult,
    LUDecompositionResult,
    MatrixOperationResult,
    MatrixResult,
    QRDecompositionResult,
    ScalarResult,
    SingularValueDecompositionResult,
    SymmetricEigenvalueResult,
)
from torchalgebra.linear_algebra.decomposition._singular_value_decomposition import (
    singular_value_decomposition,
)
from torchalgebra.linear_algebra.decomposition._symmetric_eigenvalue import (
    symmetric_eigenvalue,
)

__all__ = [
    "EigenDecompositionResult",
    "LUDecompositionResult",
    "MatrixOperationResult",
    "MatrixResult",
    "QRDecompositionResult",
    "ScalarResult",
    "SingularValueDecompositionResult",
    "SymmetricEigenvalueResult",
    "complete_orthonormal_basis",
    "singular_value_decomposition",
    "symmetric_eigenvalue",
]
