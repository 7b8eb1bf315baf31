"""Union-Find (Disjoint Set Union) forest over point indices."""


class DisjointSetForest:
    """Union-Find over ``0..n-1`` with path compression and union by size.

    Nodes are plain integer indices into flat ``parent`` and ``size``
    lists; there are no node objects.

    Attributes
    ----------
    parent : list[int]
        Parent pointer of each index; roots point to themselves.
    size : list[int]
        Tree size, meaningful only at roots.
    num_components : int
        Number of distinct roots.
    """

    __slots__ = ("parent", "size", "num_components")

    def __init__(self, n: int) -> None:
        """Create ``n`` singleton sets.

        Parameters
        ----------
        n : int
            Number of elements.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self.parent: list[int] = list(range(n))
        self.size: list[int] = [1] * n
        self.num_components = n

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self.parent):
            raise IndexError(f"index {i} out of range for forest of {len(self.parent)}")

    def find(self, i: int) -> int:
        """Find root of the set containing ``i`` with path compression.

        Walks up to the root, then walks the same path again pointing every
        visited index straight at the root. No recursion, so depth is not
        bounded by the interpreter stack.

        Parameters
        ----------
        i : int
            Element index.

        Returns
        -------
        int
            Root of the set containing ``i``.

        Raises
        ------
        IndexError
            If ``i`` is outside ``[0, n)``.
        """
        self._check(i)
        parent = self.parent

        root = i
        while parent[root] != root:
            root = parent[root]

        while parent[i] != root:
            next_i = parent[i]
            parent[i] = root
            i = next_i

        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the sets containing ``i`` and ``j`` using union by size.

        The smaller tree is attached under the larger tree's root; on equal
        sizes ``j``'s root goes under ``i``'s root.

        Parameters
        ----------
        i : int
            First element.
        j : int
            Second element.

        Returns
        -------
        bool
            True if two sets were merged, False if already joined.
        """
        root_i = self.find(i)
        root_j = self.find(j)

        if root_i == root_j:
            return False

        if self.size[root_i] < self.size[root_j]:
            root_i, root_j = root_j, root_i

        self.parent[root_j] = root_i
        self.size[root_i] += self.size[root_j]
        self.num_components -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        """Whether ``i`` and ``j`` are in the same set."""
        return self.find(i) == self.find(j)

    def component_size(self, i: int) -> int:
        """Size of the set containing ``i``."""
        return self.size[self.find(i)]

    def roots(self) -> list[int]:
        """Distinct roots in ascending index order."""
        return [i for i in range(len(self.parent)) if self.find(i) == i]

    def component_sizes(self) -> list[int]:
        """Size of every set, one entry per root, in root order."""
        return [self.size[root] for root in self.roots()]

    def get_components(self) -> list[list[int]]:
        """Get all connected components.

        Returns
        -------
        list[list[int]]
            Members of each component in ascending order, components
            ordered by their smallest member.
        """
        components_dict: dict[int, list[int]] = {}

        for element in range(len(self.parent)):
            root = self.find(element)
            if root not in components_dict:
                components_dict[root] = []
            components_dict[root].append(element)

        return list(components_dict.values())
