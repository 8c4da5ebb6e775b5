"""
Structural summary of a parsed puzzle map.
"""

import numpy as np
from collections import Counter
from typing import Any, Dict

from ..config import PUZZLE_CONFIG
from ..graph.base import Direction


class MapMetadata:
    """
    Metadata about the node map and its instruction cycle.
    """

    def __init__(self, node_map, config=None):
        config = config or PUZZLE_CONFIG
        self.n_nodes = node_map.n
        self.n_directions = len(node_map.directions)
        self.direction_counts = self._count_directions(node_map)
        self.n_start_nodes = len(node_map.start_nodes)
        self.n_end_nodes = sum(1 for name in node_map.names if name.endswith(config["end_suffix"]))
        self.has_start_node = node_map.aaa is not None
        self.has_end_node = config["end_node"] in node_map

        successors = node_map.successors
        nodes = np.arange(node_map.n)
        self.n_self_loops = int(np.sum(np.all(successors == nodes[:, None], axis=1)))
        self.n_identical_branches = int(np.sum(successors[:, Direction.LEFT] == successors[:, Direction.RIGHT]))
        self.n_without_predecessor = node_map.n - len(np.unique(successors)) if node_map.n else 0

    def _count_directions(self, node_map):
        counts = Counter(node_map.directions)
        return {
            'L': counts.get(Direction.LEFT, 0),
            'R': counts.get(Direction.RIGHT, 0),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            'n_nodes': self.n_nodes,
            'n_directions': self.n_directions,
            'direction_counts': self.direction_counts,
            'n_start_nodes': self.n_start_nodes,
            'n_end_nodes': self.n_end_nodes,
            'has_start_node': self.has_start_node,
            'has_end_node': self.has_end_node,
            'n_self_loops': self.n_self_loops,
            'n_identical_branches': self.n_identical_branches,
            'n_without_predecessor': self.n_without_predecessor,
        }

    def print_summary(self):
        print("\n" + "=" * 60)
        print("MAP SUMMARY")
        print("=" * 60)
        for key, value in self.to_dict().items():
            print(f"  {key:.<30} {value}")
