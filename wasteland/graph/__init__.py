from .base import Direction, NodeMap
from .parsing import parse_directions, parse_map, parse_node_line
from .rules import ExactName, Matcher, SuffixMatch
from .walk import count_steps, count_steps_from_each, generate_walk
