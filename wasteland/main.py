import sys

from .analysis.metadata import MapMetadata
from .config import get_config, validate_puzzle_config
from .graph.parsing import parse_map
from .solve import solve_part1, solve_part2


def run(text, verbose=False, max_steps=None):
    """
    Parse puzzle text and solve both parts.

    Returns:
        tuple: (part1, part2); part1 is None when the input has no start node
    """
    config = get_config(max_steps=max_steps)
    validation = validate_puzzle_config(config)
    if not validation["valid"]:
        raise ValueError("; ".join(validation["errors"]))

    if verbose:
        print("\n" + "=" * 60)
        print("HAUNTED WASTELAND")
        print("=" * 60)

    node_map = parse_map(text, config=config, verbose=verbose)
    if verbose:
        MapMetadata(node_map, config).print_summary()

    part1 = None
    if config["start_node"] in node_map:
        part1 = solve_part1(node_map, config=config)
    elif verbose:
        print(f"  ⚠ Skipping part 1: no {config['start_node']} node")

    part2 = solve_part2(node_map, config=config, verbose=verbose)
    return part1, part2


def main(argv=None):
    """Solve a puzzle input file and print both answers."""
    import argparse

    parser = argparse.ArgumentParser(description="Solve the Haunted Wasteland puzzle")
    parser.add_argument("input", help="Path to the puzzle input file")
    parser.add_argument("--verbose", action="store_true", help="Print map summary and walk progress")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="Give up on a walk after this many steps")
    args = parser.parse_args(argv)

    with open(args.input, encoding="utf-8") as f:
        text = f.read()

    part1, part2 = run(text, verbose=args.verbose, max_steps=args.max_steps)
    print(f"Part 1: {part1 if part1 is not None else 'n/a'}")
    print(f"Part 2: {part2}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
