from typing import Tuple

import hypothesis.strategies


@hypothesis.strategies.composite
def matrix_shapes(
    draw: hypothesis.strategies.DrawFn,
    min_side: int = 1,
    max_side: int = 8,
    square: bool = False,
) -> Tuple[int, int]:
    """Strategy for (m, n) matrix shapes."""
    m = draw(
        hypothesis.strategies.integers(min_value=min_side, max_value=max_side)
    )

    if square:
        return m, m

    n = draw(
        hypothesis.strategies.integers(min_value=min_side, max_value=max_side)
    )

    return m, n
