"""
Cache Matrix: A matrix paired with a single-slot cache of its inverse.

The matrix may be replaced at any time; replacing it empties the cache so the
inverse is recomputed on the next request. Both the matrix and the cached
inverse are handed out as read-only arrays, so the cache cannot drift out of
sync through an aliased write.
"""

import numpy as np
from typing import Optional, Tuple


def _frozen(value) -> np.ndarray:
    """Private read-only copy of value."""
    array = np.array(value)
    array.flags.writeable = False
    return array


class CacheMatrix:
    """
    Matrix holder with a cached inverse.

    Attributes:
        _matrix (np.ndarray): Current matrix (read-only)
        _inverse (np.ndarray or None): Inverse of _matrix, None until computed
    """

    def __init__(self, matrix=None):
        """
        Initialize with a matrix and an empty cache.

        No shape or invertibility check is made here; an unsuitable matrix
        only fails once inversion is attempted.

        Args:
            matrix: Two-dimensional numeric array. Defaults to a 1x1 matrix
                holding nan.
        """
        if matrix is None:
            matrix = np.full((1, 1), np.nan)

        self._matrix = _frozen(matrix)
        self._inverse = None

    def get_matrix(self) -> np.ndarray:
        """
        Get the current matrix.

        Returns:
            np.ndarray: Stored matrix (read-only)
        """
        return self._matrix

    def set_matrix(self, matrix):
        """
        Replace the matrix and clear the cached inverse.

        Args:
            matrix: New two-dimensional numeric array
        """
        self._matrix = _frozen(matrix)
        self._inverse = None

    def get_inverse(self) -> Optional[np.ndarray]:
        """
        Get the cached inverse.

        Returns:
            np.ndarray or None: Read-only cached inverse, None if not computed
        """
        return self._inverse

    def set_inverse(self, inverse: Optional[np.ndarray]):
        """
        Store an inverse in the cache, overwriting any previous value.

        The value is not checked against the current matrix; cache_solve()
        is the caller that keeps the two consistent.

        Args:
            inverse: Inverse of the current matrix, or None
        """
        self._inverse = None if inverse is None else _frozen(inverse)

    def has_inverse(self) -> bool:
        """Check if an inverse is cached."""
        return self._inverse is not None

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._matrix.shape

    def __repr__(self):
        return f"CacheMatrix(shape={self.shape}, cached={self.has_inverse()})"
