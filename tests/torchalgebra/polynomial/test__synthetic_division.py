"""Tests for synthetic division."""

import math

import hypothesis
import hypothesis.strategies
import pytest
import torch
import torch.testing

from torchalgebra.polynomial import (
    InvalidPolynomialError,
    SyntheticDivisionResult,
    polynomial,
    polynomial_evaluate,
    synthetic_division,
)
from torchalgebra.testing.strategies import integers_as_floats


class TestSyntheticDivision:
    """Tests for synthetic_division."""

    def test_exact_root(self):
        """Test division by a root leaves no remainder."""
        result = synthetic_division([1.0, -6.0, 11.0, -6.0], 1.0)

        assert isinstance(result, SyntheticDivisionResult)
        torch.testing.assert_close(
            result.quotient,
            torch.tensor([1.0, -5.0, 6.0], dtype=torch.float64),
        )
        assert result.remainder == 0.0

    def test_table(self):
        """Test the three rows of the division table."""
        table = synthetic_division([1.0, -6.0, 11.0, -6.0], 1.0).table

        torch.testing.assert_close(
            table.top_row,
            torch.tensor([1.0, -6.0, 11.0, -6.0], dtype=torch.float64),
        )
        assert math.isnan(table.products[0].item())
        torch.testing.assert_close(
            table.products[1:],
            torch.tensor([1.0, -5.0, 6.0], dtype=torch.float64),
        )
        torch.testing.assert_close(
            table.result_row,
            torch.tensor([1.0, -5.0, 6.0, 0.0], dtype=torch.float64),
        )

    def test_non_root(self):
        """Test the quotient and remainder for a non-root."""
        result = synthetic_division([1.0, -6.0, 11.0, -6.0], 4.0)

        assert result.remainder == 6.0
        torch.testing.assert_close(
            result.quotient,
            torch.tensor([1.0, -2.0, 3.0], dtype=torch.float64),
        )

    def test_fractional_root(self):
        """Test division by a fractional root."""
        # 2x^2 - 3x + 1 = (x - 1/2)(2x - 2)
        result = synthetic_division([2.0, -3.0, 1.0], 0.5)

        assert result.remainder == pytest.approx(0.0)
        torch.testing.assert_close(
            result.quotient, torch.tensor([2.0, -2.0], dtype=torch.float64)
        )

    def test_constant(self):
        """Test that a constant has an empty quotient."""
        result = synthetic_division([5.0], 3.0)

        assert result.quotient.shape == (0,)
        assert result.remainder == 5.0

    def test_tensor_input(self):
        """Test integer tensor input."""
        result = synthetic_division(torch.tensor([1, 0, -4]), -2)

        assert result.remainder == 0.0
        torch.testing.assert_close(
            result.quotient, torch.tensor([1.0, -2.0], dtype=torch.float64)
        )

    def test_empty(self):
        """Test that no coefficients raises."""
        with pytest.raises(InvalidPolynomialError):
            synthetic_division([], 1.0)

    @hypothesis.given(
        coefficients=hypothesis.strategies.lists(
            integers_as_floats(), min_size=1, max_size=6
        ),
        root=integers_as_floats(-3, 3),
    )
    def test_remainder_is_value(self, coefficients, root):
        """Test that the remainder is p(r)."""
        result = synthetic_division(coefficients, root)

        expected = polynomial_evaluate(polynomial(coefficients), root).item()
        assert result.remainder == pytest.approx(expected)
