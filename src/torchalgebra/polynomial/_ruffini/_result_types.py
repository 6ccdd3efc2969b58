from typing import NamedTuple

from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchalgebra._scalar import Scalar
from torchalgebra.polynomial._polynomial import Polynomial


@tensorclass
class SyntheticDivisionTable:
    """Three-row table of one synthetic division, for presentation.

    All rows have the dividend's length and are column aligned.

    Attributes
    ----------
    top_row : Tensor
        Dividend coefficients, descending.
    products : Tensor
        Running products root * result_row[i - 1]. Entry 0 is NaN because
        nothing is carried into the leading column.
    result_row : Tensor
        Quotient coefficients followed by the remainder.
    """

    top_row: Tensor
    products: Tensor
    result_row: Tensor


class SyntheticDivisionResult(NamedTuple):
    """Result of dividing a polynomial by (x - root)."""

    quotient: Tensor  # (N-1,) - descending coefficients
    remainder: float
    table: SyntheticDivisionTable


class RuffiniStep(NamedTuple):
    """One accepted synthetic division of the solver's audit trail."""

    root: float
    coefficients: Tensor  # (N,) - working polynomial before the step
    table: SyntheticDivisionTable


class RuffiniResult(NamedTuple):
    """Result of solving a polynomial with Ruffini's rule.

    ``remainder`` is the working polynomial left when the search stopped;
    after a closed-form solve it is the constant leading coefficient.
    """

    roots: tuple[Scalar, ...]
    steps: tuple[RuffiniStep, ...]
    remainder: Polynomial
    factored_form: str
