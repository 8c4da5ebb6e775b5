from typing import List, Optional

from tqdm import tqdm

from .rules import Matcher


def _walk(node_map, start, matcher, max_steps):
    """Yield (step, node) pairs until the matcher accepts a node."""
    successors = node_map.successors.tolist()
    directions = node_map.direction_array.tolist()
    names = node_map.names
    num_directions = len(directions)

    current = node_map.get_index(start)
    step = 0
    while True:
        if max_steps is not None and step >= max_steps:
            raise RuntimeError(
                f"No node matching {matcher!r} reached from {names[node_map.get_index(start)]!r} "
                f"within {max_steps} steps"
            )
        current = successors[current][directions[step % num_directions]]
        step += 1
        yield step, current
        if matcher.is_satisfied_by(names[current]):
            return


def count_steps(node_map, start, matcher: Matcher, max_steps: Optional[int] = None) -> int:
    """
    Count the steps needed to walk from ``start`` to a node accepted by ``matcher``.

    The instruction at position ``step % len(directions)`` picks the successor
    at each step. The start node itself is never tested, so at least one step
    is always taken. Without ``max_steps`` the walk never ends if no accepted
    node is reachable.

    Args:
        node_map: Parsed NodeMap
        start: Start node, by name or arena index
        matcher: Termination matcher (ExactName or SuffixMatch)
        max_steps: Optional step limit; exceeding it raises RuntimeError

    Returns:
        int: Number of steps taken
    """
    steps = 0
    for steps, _ in _walk(node_map, start, matcher, max_steps):
        pass
    return steps


def generate_walk(node_map, start, matcher: Matcher, max_steps: Optional[int] = None) -> List[str]:
    """Return the names of every node visited, start node included."""
    walk = [node_map.get_name(node_map.get_index(start))]
    for _, node in _walk(node_map, start, matcher, max_steps):
        walk.append(node_map.names[node])
    return walk


def count_steps_from_each(node_map, starts, matcher: Matcher, max_steps=None, verbose=False) -> List[int]:
    """
    Walk independently from each start node.

    Returns:
        List of step counts, in the order of ``starts``
    """
    iterator = tqdm(starts, desc="Walking start nodes", unit="node") if verbose else starts
    counts = []
    for start in iterator:
        steps = count_steps(node_map, start, matcher, max_steps)
        counts.append(steps)
        if verbose:
            name = node_map.get_name(node_map.get_index(start))
            tqdm.write(f"  {name} -> {matcher!r} in {steps} steps")
    return counts
