"""
Site percolation on an n-by-n grid.

Sites are addressed one-indexed as (row, col) with (1, 1) in the upper-left
corner. Connectivity is tracked with a union-find over n*n + 2 ids: one per
site plus a virtual source above row 1 and a virtual sink below row n, so
that the percolation test reduces to a single connectivity query.
"""

from typing import Tuple

import numpy as np

from ..errors import InvalidArgument, require_index, require_positive
from .connectivity import SiteConnectivity


SOURCE_ID = 0


class Percolation:
    """
    An n-by-n grid of sites, all initially blocked.

    Example:
        perc = Percolation(3)
        perc.open(1, 2)
        perc.open(2, 2)
        perc.open(3, 2)
        perc.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with all sites blocked.

        Args:
            n: Grid size, must be a positive integer
        """
        n = require_positive('n', n)

        self._n = n
        self._sink_id = n * n + 1
        self._grid = np.zeros((n, n), dtype=bool)
        self._uf = SiteConnectivity(n * n + 2)
        self._open_sites = 0

    @property
    def n(self) -> int:
        return self._n

    @property
    def sink_id(self) -> int:
        return self._sink_id

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        The opened site is joined to the source (row 1), the sink (row n)
        and to each of its four neighbours that is currently open.

        Args:
            row: Row index, one-indexed
            col: Column index, one-indexed
        """
        row, col = self._validate(row, col)
        if self._grid[row - 1, col - 1]:
            return

        self._grid[row - 1, col - 1] = True
        self._open_sites += 1
        site_id = self._site_id(row, col)

        if row == 1:
            self._uf.union(site_id, SOURCE_ID)
        if row == self._n:
            self._uf.union(site_id, self._sink_id)

        for nrow, ncol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if 1 <= nrow <= self._n and 1 <= ncol <= self._n and self._grid[nrow - 1, ncol - 1]:
                self._uf.union(site_id, self._site_id(nrow, ncol))

    def is_open(self, row: int, col: int) -> bool:
        """Is site (row, col) open?"""
        row, col = self._validate(row, col)
        return bool(self._grid[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """
        Is site (row, col) full?

        A full site is an open site connected to the top row through a
        chain of open neighbouring sites.
        """
        row, col = self._validate(row, col)
        return self._uf.find(self._site_id(row, col)) == self._uf.find(SOURCE_ID)

    def number_of_open_sites(self) -> int:
        return self._open_sites

    def percolates(self) -> bool:
        """Does the system percolate, i.e. is the source connected to the sink?"""
        return self._uf.find(SOURCE_ID) == self._uf.find(self._sink_id)

    def _site_id(self, row: int, col: int) -> int:
        # Sites occupy 1..n*n, leaving 0 and n*n+1 for the source and sink
        return (row - 1) * self._n + col

    def _validate(self, row, col) -> Tuple[int, int]:
        row = require_index('row', row)
        col = require_index('col', col)
        if not 1 <= row <= self._n:
            raise InvalidArgument(f"row must be between 1 and {self._n}, provided: {row}")
        if not 1 <= col <= self._n:
            raise InvalidArgument(f"col must be between 1 and {self._n}, provided: {col}")
        return row, col

    def __repr__(self) -> str:
        return f"Percolation(n={self._n}, open_sites={self._open_sites})"
