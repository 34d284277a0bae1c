"""
Matrix generators for experiments and tests.

Provides seeded factories for the matrices the cache is exercised with:
integer sequences, Gaussian noise, guaranteed-invertible and guaranteed-
singular square matrices.
"""

import numpy as np
from typing import Optional


def _check_dim(n: int, name: str = "n"):
    if n < 1:
        raise ValueError(f"{name} must be a positive integer, got {n}")


def sequence_matrix(nrow: int, ncol: Optional[int] = None) -> np.ndarray:
    """
    Matrix of the integers 1..nrow*ncol filled column by column.

    sequence_matrix(2) is [[1, 3], [2, 4]].

    Args:
        nrow: Number of rows
        ncol: Number of columns (defaults to nrow)

    Returns:
        np.ndarray: Shape (nrow, ncol) float matrix
    """
    ncol = nrow if ncol is None else ncol
    _check_dim(nrow, "nrow")
    _check_dim(ncol, "ncol")

    values = np.arange(1, nrow * ncol + 1, dtype=float)
    return values.reshape((nrow, ncol), order='F')


def random_matrix(n: int, random_seed: Optional[int] = None) -> np.ndarray:
    """
    Square matrix of standard normal samples.

    Args:
        n: Matrix dimension
        random_seed: Optional seed for reproducibility

    Returns:
        np.ndarray: Shape (n, n)
    """
    _check_dim(n)
    rng = np.random.RandomState(random_seed)
    return rng.randn(n, n)


def invertible_matrix(n: int, random_seed: Optional[int] = None) -> np.ndarray:
    """
    Random strictly diagonally dominant matrix, hence always invertible.

    Args:
        n: Matrix dimension
        random_seed: Optional seed for reproducibility

    Returns:
        np.ndarray: Shape (n, n) well-conditioned matrix
    """
    matrix = random_matrix(n, random_seed)
    # Each diagonal entry exceeds the absolute sum of its row
    row_sums = np.sum(np.abs(matrix), axis=1)
    matrix[np.diag_indices(n)] = row_sums + 1.0
    return matrix


def singular_matrix(n: int, random_seed: Optional[int] = None) -> np.ndarray:
    """
    Random square matrix whose last row is zero.

    A zero row stays exactly zero through LU elimination, so inversion
    always fails with a singular-matrix error.

    Args:
        n: Matrix dimension
        random_seed: Optional seed for reproducibility

    Returns:
        np.ndarray: Shape (n, n) rank-deficient matrix
    """
    matrix = random_matrix(n, random_seed)
    matrix[-1] = 0.0
    return matrix
