"""Tests for the symmetric eigensolver."""

import pytest
import torch
import torch.testing

from torchalgebra.linear_algebra.decomposition import (
    SymmetricEigenvalueResult,
    symmetric_eigenvalue,
)


class TestSymmetricEigenvalue:
    """Tests for symmetric_eigenvalue."""

    def test_basic(self):
        """Test eigenvalues of a 2x2 symmetric matrix in ascending order."""
        a = torch.tensor([[2.0, 1.0], [1.0, 2.0]], dtype=torch.float64)

        result = symmetric_eigenvalue(a)

        assert isinstance(result, SymmetricEigenvalueResult)
        torch.testing.assert_close(
            result.eigenvalues, torch.tensor([1.0, 3.0], dtype=torch.float64)
        )

    def test_reconstruction(self):
        """Test that A = V diag(w) V^T."""
        torch.manual_seed(1)
        x = torch.randn(4, 4, dtype=torch.float64)
        a = x + x.T

        values, vectors = symmetric_eigenvalue(a)

        torch.testing.assert_close(
            vectors @ torch.diag(values) @ vectors.T, a
        )

    def test_not_square(self):
        """Test that a rectangular input raises ValueError."""
        with pytest.raises(ValueError, match="square"):
            symmetric_eigenvalue(torch.ones(2, 3))
