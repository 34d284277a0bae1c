"""
cachematrix: Memoized matrix inversion.

A CacheMatrix holds a matrix together with a single cache slot for its
inverse. cache_solve() computes the inverse on the first request, stores it
in the slot and returns the stored value on every later request. Replacing
the matrix with set_matrix() empties the slot, so the next request
recomputes:

    m = CacheMatrix(np.array([[1.0, 2.0], [3.0, 4.0]]))
    cache_solve(m)          # computed
    cache_solve(m)          # returned from the cache
    m.set_matrix(other)     # cache cleared
"""

__version__ = "0.1.0"

from cachematrix.matrix import CacheMatrix
from cachematrix.solve import cache_solve

__all__ = ["CacheMatrix", "cache_solve"]
