"""
Monte Carlo estimation of the percolation threshold.

Each trial opens uniformly random sites on a fresh grid until it percolates
and records the fraction of open sites at that moment. Trials share nothing
but the random generator, so run_trial can be scheduled independently per
task given one generator per task (see numpy.random.Generator.spawn).
"""

from typing import Dict, Optional

import numpy as np

from ..errors import require_positive
from .grid import Percolation


CONFIDENCE_95 = 1.96


def uniform_int(rng: np.random.Generator, lo: int, hi: int) -> int:
    """Draw an integer uniformly from [lo, hi], both ends inclusive."""
    return int(rng.integers(lo, hi + 1))


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Run a single percolation trial on an n-by-n grid.

    Args:
        n: Grid size
        rng: Source of randomness for choosing sites

    Returns:
        Fraction of sites open when the grid first percolated, in (0, 1]
    """
    perc = Percolation(n)

    # Repeated picks of an open site are no-ops
    while not perc.percolates():
        row = uniform_int(rng, 1, n)
        col = uniform_int(rng, 1, n)
        perc.open(row, col)

    return perc.number_of_open_sites() / (n * n)


class PercolationStats:
    """
    Percolation threshold statistics over independent trials.

    All trials run when the object is constructed; the accessors only
    summarize the stored results.

    Example:
        stats = PercolationStats(200, 100, seed=0)
        print(stats.mean(), stats.confidence_lo(), stats.confidence_hi())
    """

    def __init__(self, n: int, trials: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Perform independent trials on an n-by-n grid.

        Args:
            n: Grid size, must be positive
            trials: Number of trials, must be positive
            seed: Seed for a new numpy Generator (ignored when rng is given)
            rng: Generator to draw sites from
        """
        self._n = require_positive('n', n)
        self._trials = require_positive('trials', trials)

        if rng is None:
            rng = np.random.default_rng(seed)

        results = np.array([run_trial(self._n, rng) for _ in range(self._trials)], dtype=np.float64)
        results.setflags(write=False)
        self._results = results

        self._mean = float(np.mean(results))
        if self._trials > 1:
            self._stddev = float(np.std(results, ddof=1))
        else:
            # Sample standard deviation is undefined for a single trial
            self._stddev = float('nan')
        self._half_width = float(CONFIDENCE_95 * self._stddev / np.sqrt(self._trials))

    @property
    def n(self) -> int:
        return self._n

    @property
    def trials(self) -> int:
        return self._trials

    @property
    def results(self) -> np.ndarray:
        """Per-trial thresholds (read-only copy)."""
        return self._results.copy()

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return self._mean

    def stddev(self) -> float:
        """Sample standard deviation of the percolation threshold (nan for one trial)."""
        return self._stddev

    def confidence_lo(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return self._mean - self._half_width

    def confidence_hi(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return self._mean + self._half_width

    def summary(self) -> Dict[str, float]:
        return {
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }
