"""Linear algebra on PyTorch tensors.

Functions
---------
reduced_row_echelon_form
    Gauss-Jordan elimination over the complex field.

rank
    Numerical rank, counted from the reduced row echelon form.

condition_number
    2-norm condition number sigma_max / sigma_min.

matrix_operation
    Named matrix operation returning a tagged result variant.

default_tolerances
    Dtype-appropriate zero thresholds.

Submodules
----------
decomposition
    Singular value decomposition and result types.
"""

from torchalgebra.linear_algebra import decomposition
from torchalgebra.linear_algebra._condition_number import condition_number
from torchalgebra.linear_algebra._matrix_operation import (
    MatrixOperation,
    matrix_operation,
)
from torchalgebra.linear_algebra._rank import rank
from torchalgebra.linear_algebra._reduced_row_echelon_form import (
    reduced_row_echelon_form,
)
from torchalgebra.linear_algebra._tolerances import default_tolerances

__all__ = [
    "MatrixOperation",
    "condition_number",
    "decomposition",
    "default_tolerances",
    "matrix_operation",
    "rank",
    "reduced_row_echelon_form",
]
