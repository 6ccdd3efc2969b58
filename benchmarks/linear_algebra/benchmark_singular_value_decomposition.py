"""Benchmark the Gram-matrix SVD against torch.linalg.svd.

Covers the small matrix sizes the calculator works with, for both full
rank and rank-deficient inputs (the latter exercise basis completion).
"""

import time

import torch

from torchalgebra.linear_algebra.decomposition import (
    singular_value_decomposition,
)


def benchmark_svd(
    n: int, n_iterations: int = 100, rank_deficient: bool = False
) -> tuple[float, float]:
    """Benchmark singular_value_decomposition on an (n, n) matrix.

    Returns
    -------
    tuple of float
        Average time per call in milliseconds for this package and for
        torch.linalg.svd.
    """
    generator = torch.Generator().manual_seed(n)
    a = torch.randn(n, n, dtype=torch.float64, generator=generator)

    if rank_deficient:
        a[-1] = 0.0

    for _ in range(3):
        _ = singular_value_decomposition(a)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = singular_value_decomposition(a)
    ours = (time.perf_counter() - start) / n_iterations * 1000

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = torch.linalg.svd(a, full_matrices=False)
    reference = (time.perf_counter() - start) / n_iterations * 1000

    return ours, reference


def main():
    """Run SVD benchmarks across sizes."""
    sizes = [2, 3, 4, 6, 8]

    print("Singular Value Decomposition Benchmark")
    print("=" * 62)
    print(
        f"{'Size':>6} {'Full rank (ms)':>16} {'Deficient (ms)':>16} "
        f"{'torch (ms)':>16}"
    )
    print("-" * 62)

    for n in sizes:
        full, reference = benchmark_svd(n)
        deficient, _ = benchmark_svd(n, rank_deficient=True)

        print(f"{n:>6} {full:>16.4f} {deficient:>16.4f} {reference:>16.4f}")

    print()
    print("Notes:")
    print("- Singular values come from eigh of A^T A, O(n^3)")
    print("- Rank-deficient inputs add an orthonormal completion of U")


if __name__ == "__main__":
    main()
