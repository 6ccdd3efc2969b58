"""Tests for polynomial exception hierarchy."""

import pytest

from torchalgebra.polynomial import InvalidPolynomialError, PolynomialError


class TestExceptionHierarchy:
    def test_invalid_polynomial_error_is_polynomial_error(self):
        with pytest.raises(PolynomialError):
            raise InvalidPolynomialError("test")

    def test_polynomial_error_is_exception(self):
        assert issubclass(PolynomialError, Exception)


class TestExceptionMessages:
    def test_invalid_polynomial_error_message(self):
        with pytest.raises(InvalidPolynomialError, match="cannot be zero"):
            raise InvalidPolynomialError("leading coefficient cannot be zero")
