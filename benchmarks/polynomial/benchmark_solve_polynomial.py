"""Benchmark the Ruffini solver.

Polynomials are built from random small integer roots, so every round of
the rational root search succeeds and the timing reflects the full
search-and-divide loop at each degree.
"""

import random
import time

from torchalgebra.polynomial import polynomial_from_roots, solve_polynomial


def benchmark_solve_polynomial(degree: int, n_iterations: int = 10) -> float:
    """Benchmark solve_polynomial at a given degree.

    Parameters
    ----------
    degree : int
        Degree of the polynomial (number of integer roots).
    n_iterations : int
        Number of iterations for timing.

    Returns
    -------
    float
        Average time per solve in milliseconds.
    """
    rng = random.Random(degree)
    roots = [float(rng.randint(-5, 5)) for _ in range(degree)]

    p = polynomial_from_roots(roots)
    coefficients = [int(round(c)) for c in p.coeffs.tolist()]

    # Warmup
    for _ in range(3):
        _ = solve_polynomial(coefficients)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = solve_polynomial(coefficients)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run solver benchmarks across degrees."""
    degrees = [2, 3, 4, 6, 8, 10]

    print("Ruffini Solver Benchmark")
    print("=" * 30)
    print(f"{'Degree':>8} {'Time (ms)':>16}")
    print("-" * 30)

    for degree in degrees:
        ms = benchmark_solve_polynomial(degree)

        print(f"{degree:>8} {ms:>16.4f}")


if __name__ == "__main__":
    main()
