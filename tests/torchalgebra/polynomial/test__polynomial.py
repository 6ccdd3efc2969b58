"""Tests for the Polynomial tensorclass and its helpers."""

import pytest
import torch
import torch.testing

from torchalgebra.polynomial import (
    InvalidPolynomialError,
    Polynomial,
    polynomial,
    polynomial_degree,
    polynomial_evaluate,
    polynomial_from_roots,
)


class TestPolynomial:
    """Tests for the polynomial constructor."""

    def test_from_list(self):
        """Test construction from a list of integers."""
        p = polynomial([1, 0, -4])

        assert isinstance(p, Polynomial)
        assert p.coeffs.dtype == torch.float64
        torch.testing.assert_close(
            p.coeffs, torch.tensor([1.0, 0.0, -4.0], dtype=torch.float64)
        )

    def test_complex_list(self):
        """Test that complex coefficients give complex128."""
        p = polynomial([1.0, 1j])

        assert p.coeffs.dtype == torch.complex128

    def test_tensor_kept(self):
        """Test that tensor dtypes are kept."""
        coeffs = torch.tensor([1.0, 2.0], dtype=torch.float32)

        assert polynomial(coeffs).coeffs.dtype == torch.float32

    def test_empty(self):
        """Test that an empty coefficient list raises."""
        with pytest.raises(InvalidPolynomialError, match="non-empty"):
            polynomial([])

    def test_not_1d(self):
        """Test that a matrix of coefficients raises."""
        with pytest.raises(InvalidPolynomialError):
            polynomial(torch.ones(2, 2))

    def test_call(self):
        """Test that a polynomial is callable."""
        p = polynomial([1.0, 0.0, -4.0])

        assert p(3.0).item() == pytest.approx(5.0)


class TestPolynomialDegree:
    """Tests for polynomial_degree."""

    @pytest.mark.parametrize(
        "coeffs,expected", [([5.0], 0), ([1.0, 2.0], 1), ([1, -6, 11, -6], 3)]
    )
    def test_degree(self, coeffs, expected):
        """Test the degree."""
        assert polynomial_degree(polynomial(coeffs)) == expected


class TestPolynomialEvaluate:
    """Tests for polynomial_evaluate."""

    def test_tensor_points(self):
        """Test evaluation at several points."""
        p = polynomial([1.0, 0.0, -4.0])
        x = torch.tensor([0.0, 2.0, -3.0], dtype=torch.float64)

        result = polynomial_evaluate(p, x)

        torch.testing.assert_close(
            result, torch.tensor([-4.0, 0.0, 5.0], dtype=torch.float64)
        )

    def test_complex_point(self):
        """Test evaluation at a complex root."""
        p = polynomial([1.0, 0.0, 1.0])

        result = polynomial_evaluate(p, 1j)

        assert result.is_complex()
        assert abs(result.item()) < 1e-12

    def test_constant(self):
        """Test a constant polynomial."""
        p = polynomial([7.0])
        x = torch.tensor([1.0, 2.0], dtype=torch.float64)

        torch.testing.assert_close(
            polynomial_evaluate(p, x),
            torch.tensor([7.0, 7.0], dtype=torch.float64),
        )


class TestPolynomialFromRoots:
    """Tests for polynomial_from_roots."""

    def test_real(self):
        """Test a monic polynomial from real roots."""
        p = polynomial_from_roots([1.0, 2.0])

        torch.testing.assert_close(
            p.coeffs, torch.tensor([1.0, -3.0, 2.0], dtype=torch.float64)
        )

    def test_leading(self):
        """Test the leading coefficient."""
        p = polynomial_from_roots([1.0], leading=2.0)

        torch.testing.assert_close(
            p.coeffs, torch.tensor([2.0, -2.0], dtype=torch.float64)
        )

    def test_complex_pair(self):
        """Test a conjugate pair of roots."""
        p = polynomial_from_roots([1j, -1j])

        torch.testing.assert_close(
            p.coeffs,
            torch.tensor([1.0, 0.0, 1.0], dtype=torch.complex128),
        )

    def test_no_roots(self):
        """Test that no roots give the constant polynomial."""
        p = polynomial_from_roots([], leading=3.0)

        torch.testing.assert_close(
            p.coeffs, torch.tensor([3.0], dtype=torch.float64)
        )

    def test_roots_are_zeros(self):
        """Test that the polynomial vanishes at its roots."""
        roots = torch.tensor([-1.0, 0.5, 3.0], dtype=torch.float64)

        p = polynomial_from_roots(roots)

        torch.testing.assert_close(
            polynomial_evaluate(p, roots),
            torch.zeros(3, dtype=torch.float64),
        )
