"""
Unit tests for CacheMatrix.

Covers construction, the matrix and inverse accessors, and invalidation on
matrix replacement.
"""

import numpy as np
import pytest
from cachematrix import CacheMatrix


class TestConstruction:
    """Test CacheMatrix initialization."""

    def test_get_matrix_round_trip(self):
        """Test that the matrix comes back unchanged."""
        M = np.array([[1.0, 2.0], [3.0, 4.0]])
        cm = CacheMatrix(M)

        assert np.array_equal(cm.get_matrix(), M)

    def test_accepts_nested_lists(self):
        """Test that list input is stored as an array."""
        cm = CacheMatrix([[1, 2], [3, 4]])

        assert isinstance(cm.get_matrix(), np.ndarray)
        assert np.array_equal(cm.get_matrix(), [[1, 2], [3, 4]])

    def test_cache_starts_empty(self):
        """Test that no inverse is cached after construction."""
        cm = CacheMatrix(np.eye(3))

        assert cm.get_inverse() is None
        assert not cm.has_inverse()

    def test_default_matrix(self):
        """Test that the default matrix is a single missing value."""
        cm = CacheMatrix()

        assert cm.shape == (1, 1)
        assert np.isnan(cm.get_matrix()[0, 0])

    def test_no_validation_at_construction(self):
        """Test that non-square and singular matrices are accepted."""
        CacheMatrix(np.ones((2, 3)))
        CacheMatrix(np.zeros((2, 2)))

    def test_input_is_copied(self):
        """Test that later writes to the caller's array do not leak in."""
        M = np.array([[1.0, 2.0], [3.0, 4.0]])
        cm = CacheMatrix(M)

        M[0, 0] = 100.0

        assert cm.get_matrix()[0, 0] == 1.0

    def test_repr(self):
        """Test string representation."""
        cm = CacheMatrix(np.eye(2))

        assert repr(cm) == "CacheMatrix(shape=(2, 2), cached=False)"


class TestAccessors:
    """Test get/set of the matrix and the cached inverse."""

    def test_matrix_is_read_only(self):
        """Test that the returned matrix cannot be written through."""
        cm = CacheMatrix(np.eye(2))

        with pytest.raises(ValueError):
            cm.get_matrix()[0, 0] = 5.0

    def test_set_inverse_stores_value(self):
        """Test that set_inverse populates the cache."""
        cm = CacheMatrix(np.eye(2))
        cm.set_inverse(np.eye(2))

        assert cm.has_inverse()
        assert np.array_equal(cm.get_inverse(), np.eye(2))

    def test_set_inverse_overwrites(self):
        """Test that set_inverse replaces any previous value."""
        cm = CacheMatrix(np.eye(2))
        cm.set_inverse(np.eye(2))
        cm.set_inverse(2 * np.eye(2))

        assert np.array_equal(cm.get_inverse(), 2 * np.eye(2))

    def test_set_inverse_is_not_validated(self):
        """Test that any value is accepted as the cached inverse."""
        cm = CacheMatrix(np.eye(2))
        cm.set_inverse(np.zeros((3, 3)))

        assert cm.get_inverse().shape == (3, 3)

    def test_set_inverse_none(self):
        """Test that storing None leaves the cache empty."""
        cm = CacheMatrix(np.eye(2))
        cm.set_inverse(np.eye(2))
        cm.set_inverse(None)

        assert cm.get_inverse() is None

    def test_inverse_is_read_only(self):
        """Test that the cached inverse cannot be written through."""
        cm = CacheMatrix(np.eye(2))
        cm.set_inverse(np.eye(2))

        with pytest.raises(ValueError):
            cm.get_inverse()[1, 1] = 0.0

    def test_get_inverse_has_no_side_effects(self):
        """Test that reading the inverse does not change state."""
        cm = CacheMatrix(np.eye(2))

        assert cm.get_inverse() is None
        assert cm.get_inverse() is None
        assert not cm.has_inverse()


class TestInvalidation:
    """Test that replacing the matrix clears the cache."""

    def test_set_matrix_replaces_matrix(self):
        """Test that set_matrix stores the new matrix."""
        cm = CacheMatrix(np.eye(2))
        N = np.array([[5.0, 6.0], [7.0, 8.0]])
        cm.set_matrix(N)

        assert np.array_equal(cm.get_matrix(), N)

    @pytest.mark.parametrize("N", [
        np.array([[5.0, 6.0], [7.0, 8.0]]),
        np.zeros((2, 2)),
        np.ones((3, 4)),
        np.eye(2),
    ])
    def test_set_matrix_clears_cache(self, N):
        """Test that the cache is empty after set_matrix, whatever N is."""
        cm = CacheMatrix(np.eye(2))
        cm.set_inverse(np.eye(2))

        cm.set_matrix(N)

        assert cm.get_inverse() is None

    def test_shape_follows_matrix(self):
        """Test that shape reflects the current matrix."""
        cm = CacheMatrix(np.eye(2))
        cm.set_matrix(np.eye(4))

        assert cm.shape == (4, 4)
