from .graph import Direction, ExactName, NodeMap, SuffixMatch, parse_map
from .solve import HauntedWastelandSolver, lcm_reduce, solve_part1, solve_part2

__version__ = "1.0.0"
