"""
Percolation Stats - Monte Carlo estimation of the site percolation threshold.

This package provides tools for:
- Modelling an n-by-n grid of open/blocked sites with union-find connectivity
- Running independent randomized trials until the grid percolates
- Summarizing thresholds with a mean, standard deviation and 95% confidence interval
"""

__version__ = "1.0.0"
