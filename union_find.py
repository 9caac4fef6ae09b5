class WeightedQuickUnionUF:
    """
    Disjoint sets over the element ids 0 .. n-1.

    Unions hang the smaller tree under the bigger root, and find() flattens
    the path it walks, so a long run of open/connected calls stays close to
    constant time per call. Grid geometry lives in the caller; this class
    only sees integers.
    """

    def __init__(self, n: int):
        """
        :param n: size of the universe, every id starts as a singleton.
        """
        if n <= 0:
            raise ValueError("n must be > 0")

        self.parent = list(range(n))
        self.sz = [1] * n   # only meaningful at roots
        self.count = n

    def __len__(self) -> int:
        return len(self.parent)

    def get_count(self) -> int:
        return self.count

    def _validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """
        Representative of the set holding 'p'. Nodes visited on the way up
        are relinked straight to it.
        """
        self._validate(p)

        path = []
        while p != self.parent[p]:
            path.append(p)
            p = self.parent[p]

        for node in path:
            self.parent[node] = p
        return p

    def connected(self, p: int, q: int) -> bool:
        self._validate(q)
        return self.find(p) == self.find(q)

    def size(self, p: int) -> int:
        """Number of ids sharing a set with 'p'."""
        return self.sz[self.find(p)]

    def union(self, p: int, q: int):
        self._validate(p)
        self._validate(q)

        big, small = self.find(p), self.find(q)
        if big == small:
            return
        if self.sz[big] < self.sz[small]:
            big, small = small, big

        self.parent[small] = big
        self.sz[big] += self.sz[small]
        self.count -= 1

    def __repr__(self):
        return f"WeightedQuickUnionUF(n={len(self.parent)}, count={self.count})"
