"""
Part 1 and part 2 solvers for the Haunted Wasteland puzzle.
"""

import math
from functools import reduce
from typing import Iterable, Tuple

from .config import PUZZLE_CONFIG
from .graph.base import NodeMap
from .graph.parsing import parse_map
from .graph.rules import ExactName, SuffixMatch
from .graph.walk import count_steps, count_steps_from_each


def lcm_reduce(values: Iterable[int]) -> int:
    """Least common multiple of all values, using Python ints so nothing overflows."""
    values = [int(v) for v in values]
    if not values:
        raise ValueError("Cannot take the LCM of no values")
    if any(v <= 0 for v in values):
        raise ValueError(f"LCM reduction expects positive step counts, got {values}")
    return reduce(math.lcm, values)


def solve_part1(node_map: NodeMap, config=None) -> int:
    """Steps from the configured start node to the configured end node."""
    config = config or PUZZLE_CONFIG
    start = node_map.index.get(config["start_node"])
    if start is None:
        raise ValueError(f"Input has no {config['start_node']} node")
    return count_steps(node_map, start, ExactName(config["end_node"]), config["max_steps"])


def solve_part2(node_map: NodeMap, config=None, verbose=False) -> int:
    """
    Steps until every start node's walk sits on an end node at once.

    Each start node is walked independently to its first end node and the
    counts are combined by LCM. This only holds for inputs where each walk
    revisits that end node with a period equal to its first-hit count, which
    the puzzle inputs guarantee.
    """
    config = config or PUZZLE_CONFIG
    starts = node_map.nodes_with_suffix(config["start_suffix"])
    if not starts:
        raise ValueError(f"Input has no start nodes ending in {config['start_suffix']!r}")
    counts = count_steps_from_each(
        node_map,
        starts,
        SuffixMatch(config["end_suffix"]),
        max_steps=config["max_steps"],
        verbose=verbose,
    )
    return lcm_reduce(counts)


class HauntedWastelandSolver:
    """Entry points for a harness that feeds raw puzzle text."""

    @staticmethod
    def parse_input(text: str) -> NodeMap:
        return parse_map(text)

    @staticmethod
    def solve_part1(node_map: NodeMap) -> int:
        return solve_part1(node_map)

    @staticmethod
    def solve_part2(node_map: NodeMap) -> int:
        return solve_part2(node_map)

    @classmethod
    def solve(cls, text: str) -> Tuple[int, int]:
        node_map = cls.parse_input(text)
        return cls.solve_part1(node_map), cls.solve_part2(node_map)
