import numpy as np

from union_find import WeightedQuickUnionUF


def is_positive_int(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return value > 0


class Percolation:
    """
    n-by-n grid of sites, all blocked at construction.

    Two union-find structures share the site ids row * n + col:

    - wqfGrid has a virtual top (n*n) and a virtual bottom (n*n + 1) and
      answers percolates() with a single connected() call.
    - wqfFull has only the virtual top and answers isFull(). Without a
      virtual bottom, an open bottom-row site can never look full through
      another branch that happens to reach the bottom (backwash).
    """

    def __init__(self, n: int):
        if not is_positive_int(n):
            raise ValueError("n must be a positive integer")

        self.gridSize = int(n)
        self.gridSquare = self.gridSize * self.gridSize
        self.grid = np.zeros((self.gridSize, self.gridSize), dtype=bool)

        self.wqfGrid = WeightedQuickUnionUF(self.gridSquare + 2)  # top and bottom
        self.wqfFull = WeightedQuickUnionUF(self.gridSquare + 1)  # top only

        self.virtualTop = self.gridSquare
        self.virtualBottom = self.gridSquare + 1

        self.openSite = 0

    # open site (row, col) if it's not open yet
    def open_site(self, row: int, col: int):
        self.validState(row, col)

        if self.isOpen(row, col):
            return

        self.grid[row][col] = True
        self.openSite += 1

        flatIndex = self.flattenGrid(row, col)

        ## neighbours: up, down, left, right
        for nRow, nCol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self.isOnGrid(nRow, nCol) and self.grid[nRow][nCol]:
                neighbour = self.flattenGrid(nRow, nCol)
                self.wqfGrid.union(flatIndex, neighbour)
                self.wqfFull.union(flatIndex, neighbour)

        ## top row
        if row == 0:
            self.wqfGrid.union(self.virtualTop, flatIndex)
            self.wqfFull.union(self.virtualTop, flatIndex)

        ## bottom row, percolation structure only
        if row == self.gridSize - 1:
            self.wqfGrid.union(self.virtualBottom, flatIndex)

    # is site (row, col) open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row][col])

    # is site (row, col) connected to the top row through open sites?
    def isFull(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return self.wqfFull.connected(self.virtualTop, self.flattenGrid(row, col))

    def percolates(self) -> bool:
        return self.wqfGrid.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def open_fraction(self) -> float:
        return self.openSite / self.gridSquare

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise IndexError(
                f"site ({row}, {col}) is out of bounds for a {self.gridSize}x{self.gridSize} grid"
            )

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * row + col

    def isOnGrid(self, row: int, col: int) -> bool:
        return 0 <= row < self.gridSize and 0 <= col < self.gridSize

    def __repr__(self):
        return f"Percolation(n={self.gridSize}, open={self.openSite})"
