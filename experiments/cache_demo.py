"""
Walkthrough of the cached inverse.

Builds a 2x2 matrix from the integers 1..4, inverts it through the cache,
shows that the second request is served without computation, then replaces
the matrix with a 10x10 Gaussian matrix and shows the cache being rebuilt.
"""

import os
import numpy as np
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / '.env')

from cachematrix import CacheMatrix, cache_solve
from cachematrix.generators import sequence_matrix, random_matrix
from cachematrix.utils import compute_metrics


def run_demo(size: int = 10, random_seed: int = 42, verbose: bool = True):
    """
    Run the cache walkthrough.

    Args:
        size: Dimension of the replacement matrix
        random_seed: Seed for the replacement matrix
        verbose: Whether to print progress

    Returns:
        dict: Final CacheMatrix and its metrics
    """
    m1 = sequence_matrix(2)
    m2 = CacheMatrix(m1)

    if verbose:
        print("="*70)
        print("CACHEMATRIX - Walkthrough")
        print("="*70)
        print(f"\n[1/3] Constructed {m2}")
        print(f"  Matrix unchanged: {np.array_equal(m1, m2.get_matrix())}")

    i1 = np.linalg.inv(m1)
    first = cache_solve(m2)
    second = cache_solve(m2, verbose=verbose)

    if verbose:
        print("\n[2/3] Solved inverse")
        print(first)
        print(f"  Matches np.linalg.inv: {np.allclose(i1, first)}")
        print(f"  Second call served from cache: {second is first}")

    m2.set_matrix(random_matrix(size, random_seed=random_seed))

    if verbose:
        print(f"\n[3/3] Replaced matrix with {size}x{size} Gaussian matrix")
        print(f"  Cached inverse after replacement: {m2.get_inverse()}")

    inverse = cache_solve(m2)
    metrics = compute_metrics(m2)

    if verbose:
        print(f"  Matches np.linalg.inv: {np.allclose(np.linalg.inv(m2.get_matrix()), inverse)}")
        print(f"  Condition number: {metrics['condition']:.2f}")
        print(f"  Residual ||A A^-1 - I||: {metrics['residual']:.2e}")
        print("="*70)

    return {'matrix': m2, 'metrics': metrics}


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description='Cached matrix inverse walkthrough')
    parser.add_argument('--size', '-n', type=int,
                       default=int(os.getenv('CACHEMATRIX_SIZE', '10')),
                       help='Dimension of the replacement matrix (default: 10)')
    parser.add_argument('--seed', type=int,
                       default=int(os.getenv('CACHEMATRIX_SEED', '42')),
                       help='Random seed (default: 42)')
    parser.add_argument('--quiet', '-q', action='store_true',
                       help='Suppress output')

    args = parser.parse_args()

    return run_demo(size=args.size, random_seed=args.seed, verbose=not args.quiet)


if __name__ == '__main__':
    main()
