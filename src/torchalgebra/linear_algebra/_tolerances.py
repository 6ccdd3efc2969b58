"""Default tolerances and input handling for the matrix engines."""

import torch
from torch import Tensor


def default_tolerances(dtype: torch.dtype) -> dict[str, float]:
    """Return dtype-appropriate default tolerances.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype.

    Returns
    -------
    dict[str, float]
        Dictionary with keys:

        - ``'epsilon'``: zero threshold for row reduction and rank.
        - ``'singular_value'``: absolute floor below which a singular
          value counts as zero.
    """
    if dtype in (torch.float16, torch.bfloat16):
        eps = torch.finfo(dtype).eps
        return {"epsilon": 1e-3, "singular_value": 16 * eps}
    elif dtype in (torch.float32, torch.complex64):
        eps = torch.finfo(torch.float32).eps
        return {"epsilon": 1e-6, "singular_value": 16 * eps}
    else:  # float64 and others
        eps = torch.finfo(torch.float64).eps
        return {"epsilon": 1e-12, "singular_value": 16 * eps}


def as_matrix(a, name: str) -> Tensor:
    """Convert ``a`` to a 2D floating-point or complex tensor.

    Integer and boolean inputs are promoted to float64. Nested Python
    sequences are accepted and converted at double precision.

    Raises
    ------
    ValueError
        If ``a`` is not 2D.
    """
    if not isinstance(a, Tensor):
        converted = torch.as_tensor(a)
        if converted.is_complex():
            a = torch.tensor(a, dtype=torch.complex128)
        elif converted.is_floating_point():
            a = torch.tensor(a, dtype=torch.float64)
        else:
            a = converted

    if a.dim() != 2:
        raise ValueError(f"{name}: a must be 2D, got {a.dim()}D")

    if not (a.is_floating_point() or a.is_complex()):
        a = a.to(torch.float64)

    return a
