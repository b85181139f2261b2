"""
Union-find connectivity for grid sites.

Thin adapter over scipy's DisjointSet (union by size, path halving) exposing
the union/find operations the percolation model relies on.
"""

from scipy.cluster.hierarchy import DisjointSet


class SiteConnectivity:
    """
    Disjoint-set over the integer ids 0..size-1.

    Every id starts in its own component.
    """

    def __init__(self, size: int):
        self.size = size
        self._ds = DisjointSet(range(size))

    def union(self, a: int, b: int) -> bool:
        """Merge the components of a and b. Returns False if already merged."""
        return self._ds.merge(a, b)

    def find(self, a: int) -> int:
        """Return the representative of the component containing a."""
        return self._ds[a]

    def connected(self, a: int, b: int) -> bool:
        return self._ds.connected(a, b)

    @property
    def n_components(self) -> int:
        return self._ds.n_subsets
