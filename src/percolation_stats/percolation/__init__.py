"""Site percolation model and Monte Carlo threshold statistics."""

from .grid import Percolation
from .statistics import PercolationStats, run_trial

__all__ = ['Percolation', 'PercolationStats', 'run_trial']
