"""Tests for divisors, rational root candidates and rationalize."""

import math
from fractions import Fraction

import hypothesis
import pytest

from torchalgebra.polynomial import (
    divisors,
    rational_root_candidates,
    rationalize,
)
from torchalgebra.testing.strategies import integer_polynomials


class TestDivisors:
    """Tests for divisors."""

    def test_negative(self):
        """Test divisors of a negative number."""
        assert divisors(-6) == [-6, -3, -2, -1, 1, 2, 3, 6]

    def test_one(self):
        """Test divisors of 1."""
        assert divisors(1) == [-1, 1]

    def test_zero(self):
        """Test that 0 has the single candidate 0."""
        assert divisors(0) == [0]

    def test_square(self):
        """Test that a square divisor is listed once."""
        assert divisors(4.0) == [-4, -2, -1, 1, 2, 4]


class TestRationalRootCandidates:
    """Tests for rational_root_candidates."""

    def test_ordering(self):
        """Test ordering by magnitude, negative first."""
        assert rational_root_candidates(1, 2) == [
            Fraction(-1, 2),
            Fraction(1, 2),
            Fraction(-1),
            Fraction(1),
        ]

    def test_deduplicated(self):
        """Test that equal fractions appear once."""
        candidates = rational_root_candidates(2, 2)

        assert len(candidates) == len(set(candidates))
        assert candidates == [
            Fraction(-1, 2),
            Fraction(1, 2),
            Fraction(-1),
            Fraction(1),
            Fraction(-2),
            Fraction(2),
        ]

    def test_zero_constant(self):
        """Test a zero constant term."""
        assert rational_root_candidates(0, 3) == [Fraction(0)]

    @hypothesis.given(case=integer_polynomials(max_degree=4))
    @hypothesis.settings(deadline=None)
    def test_contains_every_rational_root(self, case):
        """Test the rational root theorem on generated polynomials."""
        coefficients, roots = case
        hypothesis.assume(coefficients[-1] != 0)

        candidates = set(
            rational_root_candidates(coefficients[-1], coefficients[0])
        )

        assert set(roots) <= candidates


class TestRationalize:
    """Tests for rationalize."""

    @pytest.mark.parametrize(
        "x,expected",
        [
            (0.75, (3, 4)),
            (-1 / 3, (-1, 3)),
            (2.0, (2, 1)),
            (0.0, (0, 1)),
        ],
    )
    def test_values(self, x, expected):
        """Test exact fractions."""
        assert rationalize(x) == expected

    def test_max_denominator(self):
        """Test the denominator bound."""
        assert rationalize(math.pi, max_denominator=7) == (22, 7)
