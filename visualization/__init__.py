"""
Visualization tools for cachematrix.

Provides matplotlib plots of the cache latency benchmark.
"""

from visualization.latency_plots import plot_latency

__all__ = [
    'plot_latency',
]
