from typing import Optional, Tuple

import hypothesis.extra.numpy
import hypothesis.strategies
import numpy
import torch

from ._matrix_shapes import matrix_shapes


@hypothesis.strategies.composite
def matrices(
    draw: hypothesis.strategies.DrawFn,
    dtype: torch.dtype = torch.float64,
    shape: Optional[Tuple[int, int]] = None,
    min_side: int = 1,
    max_side: int = 8,
    square: bool = False,
    elements: Optional[hypothesis.strategies.SearchStrategy[float]] = None,
) -> torch.Tensor:
    """Generate small dense matrices with bounded entries."""
    if shape is None:
        shape = draw(matrix_shapes(min_side, max_side, square))

    if elements is None:
        elements = hypothesis.strategies.floats(
            min_value=-10.0,
            max_value=10.0,
            allow_nan=False,
            allow_infinity=False,
        )

    real = draw(
        hypothesis.extra.numpy.arrays(numpy.float64, shape, elements=elements)
    )

    if dtype in (torch.complex64, torch.complex128):
        imag = draw(
            hypothesis.extra.numpy.arrays(
                numpy.float64, shape, elements=elements
            )
        )

        return torch.complex(
            torch.tensor(real, dtype=torch.float64),
            torch.tensor(imag, dtype=torch.float64),
        ).to(dtype)

    return torch.tensor(real, dtype=dtype)
