from ._constants import MAX_DENOMINATOR, ROOT_TOLERANCE
from ._factored_form import factored_form
from ._rational_root_candidates import divisors, rational_root_candidates
from ._rationalize import rationalize
from ._result_types import (
    RuffiniResult,
    RuffiniStep,
    SyntheticDivisionResult,
    SyntheticDivisionTable,
)
from ._solve_polynomial import solve_polynomial
from ._synthetic_division import synthetic_division

__all__ = [
    "MAX_DENOMINATOR",
    "ROOT_TOLERANCE",
    "RuffiniResult",
    "RuffiniStep",
    "SyntheticDivisionResult",
    "SyntheticDivisionTable",
    "divisors",
    "factored_form",
    "rational_root_candidates",
    "rationalize",
    "solve_polynomial",
    "synthetic_division",
]
