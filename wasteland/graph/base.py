from enum import IntEnum

import numpy as np

UNRESOLVED = -1


class Direction(IntEnum):
    """Instruction direction. The value is the successor column in the arena."""

    LEFT = 0
    RIGHT = 1

    @classmethod
    def from_char(cls, c):
        if c == "L":
            return cls.LEFT
        if c == "R":
            return cls.RIGHT
        raise ValueError(f"Invalid direction character: {c!r}")


class NodeMap:
    """
    Parsed puzzle: the instruction cycle plus every node stored in an arena.

    Nodes are identified by their integer index. ``names[i]`` is the name of
    node ``i`` and ``successors[i, Direction.LEFT]`` / ``successors[i, Direction.RIGHT]``
    are the indices of its left and right successors.
    """

    def __init__(self, directions, names, successors, start_nodes, aaa=None):
        if len(directions) == 0:
            raise ValueError("Instruction sequence must not be empty")
        self.directions = list(directions)
        self.direction_array = np.array(self.directions, dtype=np.int8)
        self.names = list(names)
        self.index = {name: i for i, name in enumerate(self.names)}
        self.successors = np.asarray(successors, dtype=np.int64).reshape(-1, 2)
        self.start_nodes = list(start_nodes)
        self.aaa = aaa
        self.n = len(self.names)

        # Read-only once built
        self.successors.setflags(write=False)
        self.direction_array.setflags(write=False)

    def __len__(self):
        return self.n

    def __contains__(self, name):
        return name in self.index

    def get_index(self, node):
        """Return the arena index for a node given by name or index."""
        if isinstance(node, str):
            try:
                return self.index[node]
            except KeyError:
                raise ValueError(f"Unknown node: {node!r}") from None
        node = int(node)
        if not 0 <= node < self.n:
            raise ValueError(f"Node index out of range: {node}")
        return node

    def get_name(self, node):
        return self.names[int(node)]

    def nodes_with_suffix(self, suffix):
        """Indices of every node whose name ends with ``suffix``, in arena order."""
        return [i for i, name in enumerate(self.names) if name.endswith(suffix)]

    def unresolved_nodes(self):
        """Names of nodes whose successors were never defined."""
        rows = np.where((self.successors == UNRESOLVED).any(axis=1))[0]
        return [self.names[i] for i in rows]

    def __repr__(self):
        return (
            f"NodeMap(n={self.n}, directions={len(self.directions)}, "
            f"start_nodes={len(self.start_nodes)}, has_aaa={self.aaa is not None})"
        )
