import re

from .base import UNRESOLVED, Direction, NodeMap
from ..config import PUZZLE_CONFIG


def node_line_pattern(name_length=PUZZLE_CONFIG["name_length"]):
    name = rf"(\w{{{name_length}}})"
    return re.compile(rf"^{name}\s*=\s*\(\s*{name}\s*,\s*{name}\s*\)$")


NODE_LINE_RE = node_line_pattern()


def parse_directions(line):
    """
    Parse the instruction line into a list of directions.

    Args:
        line: Instruction line such as "LLR"

    Returns:
        List of Direction values, one per character
    """
    line = line.strip()
    if not line:
        raise ValueError("Instruction line is empty")
    return [Direction.from_char(c) for c in line]


def parse_node_line(line, line_number=None, pattern=NODE_LINE_RE):
    """
    Split a ``NAME = (LEFT, RIGHT)`` line into its three names.

    Returns:
        tuple: (name, left_name, right_name)
    """
    match = pattern.match(line.strip())
    if match is None:
        where = f" on line {line_number}" if line_number is not None else ""
        raise ValueError(f"Malformed node line{where}: {line.strip()!r}")
    return match.group(1), match.group(2), match.group(3)


def insert_node(name, index, names, successors):
    """Fetch the arena index for ``name``, registering a placeholder if it is new."""
    if name not in index:
        index[name] = len(names)
        names.append(name)
        successors.append([UNRESOLVED, UNRESOLVED])
    return index[name]


def parse_map(text, config=None, verbose=False):
    """
    Parse puzzle text into a NodeMap.

    The first non-empty line holds the instructions; the remaining non-empty
    lines each define one node. Targets may be referenced before their own
    line, in which case a placeholder entry is filled in later.

    Args:
        text: Full puzzle input
        config: Puzzle configuration (defaults to PUZZLE_CONFIG)
        verbose: Whether to print a parsing summary

    Returns:
        NodeMap: The parsed, fully resolved map
    """
    config = config or PUZZLE_CONFIG
    pattern = NODE_LINE_RE
    if config["name_length"] != PUZZLE_CONFIG["name_length"]:
        pattern = node_line_pattern(config["name_length"])

    lines = [(i, line.strip()) for i, line in enumerate(text.strip().splitlines(), start=1)]
    lines = [(i, line) for i, line in lines if line]
    if not lines:
        raise ValueError("Puzzle input is empty")

    directions = parse_directions(lines[0][1])

    index = {}
    names = []
    successors = []
    start_nodes = []

    for line_number, line in lines[1:]:
        name, left_name, right_name = parse_node_line(line, line_number, pattern)
        left = insert_node(left_name, index, names, successors)
        right = insert_node(right_name, index, names, successors)
        current = insert_node(name, index, names, successors)
        if successors[current][Direction.LEFT] != UNRESOLVED:
            raise ValueError(f"Node {name!r} defined twice (line {line_number})")
        successors[current][Direction.LEFT] = left
        successors[current][Direction.RIGHT] = right
        if name.endswith(config["start_suffix"]):
            start_nodes.append(current)

    node_map = NodeMap(
        directions=directions,
        names=names,
        successors=successors,
        start_nodes=start_nodes,
        aaa=index.get(config["start_node"]),
    )

    undefined = node_map.unresolved_nodes()
    if undefined:
        raise ValueError(f"Nodes referenced but never defined: {', '.join(sorted(undefined))}")

    if verbose:
        print(f"  Parsed {len(directions)} instructions and {node_map.n} nodes")
        print(f"  Start nodes (*{config['start_suffix']}): {[names[i] for i in start_nodes]}")
        if node_map.aaa is None:
            print(f"  ⚠ No {config['start_node']} node in input")

    return node_map
