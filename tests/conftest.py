import os

import pytest

from wasteland.graph.parsing import parse_map

EXAMPLE_PART1 = """LLR

AAA = (BBB, BBB)
BBB = (AAA, ZZZ)
ZZZ = (ZZZ, ZZZ)
"""

EXAMPLE_PART1_BRANCHING = """RL

AAA = (BBB, CCC)
BBB = (DDD, EEE)
CCC = (ZZZ, GGG)
DDD = (DDD, DDD)
EEE = (EEE, EEE)
GGG = (GGG, GGG)
ZZZ = (ZZZ, ZZZ)
"""

EXAMPLE_PART2 = """LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""

CHALLENGE_PATH = os.path.join(os.path.dirname(__file__), "..", "challenge.txt")


@pytest.fixture
def part1_map():
    return parse_map(EXAMPLE_PART1)


@pytest.fixture
def part2_map():
    return parse_map(EXAMPLE_PART2)
