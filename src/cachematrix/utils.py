"""
Utility functions for checking cached inverses.

Includes residual computation, an inverse predicate and a metrics summary
used by the experiments.
"""

import numpy as np
from typing import Dict

from cachematrix.matrix import CacheMatrix


def inverse_residual(matrix: np.ndarray, inverse: np.ndarray) -> float:
    """
    Compute the residual ||A @ A_inv - I|| in the Frobenius norm.

    Args:
        matrix: Shape (n, n) - matrix A
        inverse: Shape (n, n) - candidate inverse of A

    Returns:
        float: Residual norm (0 for an exact inverse)
    """
    matrix = np.asarray(matrix)
    inverse = np.asarray(inverse)
    if matrix.shape != inverse.shape:
        raise ValueError(f"Shape mismatch: matrix {matrix.shape}, inverse {inverse.shape}")

    identity = np.eye(matrix.shape[0])
    return float(np.linalg.norm(matrix @ inverse - identity))


def is_inverse(matrix: np.ndarray, inverse: np.ndarray, atol: float = 1e-8) -> bool:
    """
    Check that inverse is the inverse of matrix within tolerance.

    Args:
        matrix: Shape (n, n) - matrix A
        inverse: Shape (n, n) - candidate inverse
        atol: Absolute tolerance on each entry of A @ A_inv - I

    Returns:
        bool: True if A @ inverse is the identity within atol
    """
    matrix = np.asarray(matrix)
    inverse = np.asarray(inverse)
    if matrix.shape != inverse.shape:
        return False
    return bool(np.allclose(matrix @ inverse, np.eye(matrix.shape[0]), atol=atol))


def compute_metrics(x: CacheMatrix) -> Dict[str, float]:
    """
    Summarize a CacheMatrix for monitoring.

    Metrics include:
    - dimension: number of rows (0 for a scalar)
    - condition: 2-norm condition number of the matrix, nan unless the
      matrix is two-dimensional and finite
    - cached: 1.0 if an inverse is cached, else 0.0
    - residual: inverse residual, nan when nothing is cached

    Reading the metrics never populates the cache and never raises on a
    matrix the container accepts.

    Args:
        x: CacheMatrix to summarize

    Returns:
        dict: Computed metrics
    """
    matrix = x.get_matrix()
    inverse = x.get_inverse()

    measurable = matrix.ndim == 2 and matrix.size > 0 and bool(np.all(np.isfinite(matrix)))

    residual = float('nan')
    if (inverse is not None and measurable
            and matrix.shape[0] == matrix.shape[1] and inverse.shape == matrix.shape):
        residual = inverse_residual(matrix, inverse)

    metrics = {
        'dimension': float(matrix.shape[0] if matrix.ndim else 0),
        'condition': float(np.linalg.cond(matrix)) if measurable else float('nan'),
        'cached': 1.0 if inverse is not None else 0.0,
        'residual': residual
    }

    return metrics
