"""
Compute-or-fetch resolution of a cached inverse.

cache_solve() returns the inverse held by a CacheMatrix, running the
inversion routine only on a cache miss. Inversion is O(n^3) in the matrix
dimension; a hit is a single attribute read.

Options other than `solver` and `verbose` are passed straight through to the
inversion routine. They are not part of the cache identity: a hit returns the
stored inverse whatever options the current call carries.

`solver` and `verbose` are reserved by cache_solve() itself, so an inversion
routine option with either name can never be forwarded. Bind such options
beforehand, e.g. solver=functools.partial(routine, verbose=True).
"""

import numpy as np
from typing import Callable

from cachematrix.matrix import CacheMatrix


def cache_solve(x: CacheMatrix, *args,
                solver: Callable[..., np.ndarray] = np.linalg.inv,
                verbose: bool = False, **kwargs) -> np.ndarray:
    """
    Return the inverse of x's matrix, computing and caching it on a miss.

    Errors raised by the solver (np.linalg.LinAlgError for singular or
    non-square input) propagate unchanged and leave the cache empty, so the
    next call tries again.

    Args:
        x: CacheMatrix holding the matrix to invert
        *args: Extra positional arguments for the solver
        solver: Inversion routine, called as solver(matrix, *args, **kwargs)
        verbose: Whether to report cache hits
        **kwargs: Extra keyword arguments for the solver

    Returns:
        np.ndarray: Cached inverse (read-only)
    """
    inverse = x.get_inverse()

    if inverse is not None:
        if verbose:
            print("getting cached data")
        return inverse

    x.set_inverse(solver(x.get_matrix(), *args, **kwargs))

    return x.get_inverse()
