import numpy as np
import pytest

from wasteland.graph.base import Direction, NodeMap
from wasteland.graph.parsing import parse_directions, parse_map, parse_node_line

from conftest import EXAMPLE_PART1, EXAMPLE_PART2


def test_parse_directions():
    """Test that each instruction character maps to one direction."""
    assert parse_directions("LLR") == [Direction.LEFT, Direction.LEFT, Direction.RIGHT]
    assert parse_directions("  RL \n") == [Direction.RIGHT, Direction.LEFT]


def test_parse_directions_rejects_unknown_character():
    with pytest.raises(ValueError, match="Invalid direction"):
        parse_directions("LXR")


def test_parse_directions_rejects_empty_line():
    with pytest.raises(ValueError):
        parse_directions("   ")


def test_parse_node_line():
    assert parse_node_line("AAA = (BBB, CCC)") == ("AAA", "BBB", "CCC")
    assert parse_node_line("  11A=(11B,XXX)  ") == ("11A", "11B", "XXX")


@pytest.mark.parametrize("line", [
    "AAA = BBB, CCC",
    "AAAA = (BBB, CCC)",
    "AAA = (BB, CCC)",
    "AAA -> (BBB, CCC)",
    "AAA = (BBB)",
])
def test_parse_node_line_rejects_malformed(line):
    with pytest.raises(ValueError, match="Malformed node line on line 7"):
        parse_node_line(line, 7)


def test_parse_map_builds_resolved_arena(part1_map):
    """Test that every node is registered once and wired to its successors."""
    assert isinstance(part1_map, NodeMap)
    assert part1_map.n == 3
    assert sorted(part1_map.names) == ["AAA", "BBB", "ZZZ"]
    assert part1_map.unresolved_nodes() == []

    aaa = part1_map.get_index("AAA")
    bbb = part1_map.get_index("BBB")
    zzz = part1_map.get_index("ZZZ")
    assert part1_map.successors[aaa].tolist() == [bbb, bbb]
    assert part1_map.successors[bbb].tolist() == [aaa, zzz]
    assert part1_map.successors[zzz, Direction.LEFT] == zzz
    assert part1_map.successors[zzz, Direction.RIGHT] == zzz


def test_parse_map_directions(part1_map):
    assert part1_map.directions == [Direction.LEFT, Direction.LEFT, Direction.RIGHT]
    np.testing.assert_array_equal(part1_map.direction_array, [0, 0, 1])


def test_parse_map_start_nodes_and_aaa(part1_map, part2_map):
    assert part1_map.aaa == part1_map.get_index("AAA")
    assert [part1_map.get_name(i) for i in part1_map.start_nodes] == ["AAA"]

    assert part2_map.aaa is None
    assert [part2_map.get_name(i) for i in part2_map.start_nodes] == ["11A", "22A"]


def test_parse_map_accepts_indented_input():
    """Test that indentation and surrounding blank lines are ignored."""
    text = "\n\n        LLR\n\n        AAA = (BBB, BBB)\n        BBB = (AAA, ZZZ)\n        ZZZ = (ZZZ, ZZZ)\n\n"
    node_map = parse_map(text)
    assert node_map.n == 3
    assert len(node_map.directions) == 3


def test_parse_map_forward_references_are_filled_in():
    """Test that a node referenced before its own line gets its successors later."""
    text = "L\n\nAAA = (ZZZ, ZZZ)\nZZZ = (AAA, ZZZ)\n"
    node_map = parse_map(text)
    zzz = node_map.get_index("ZZZ")
    assert node_map.successors[zzz].tolist() == [node_map.get_index("AAA"), zzz]


def test_parse_map_rejects_undefined_nodes():
    text = "LR\n\nAAA = (BBB, ZZZ)\nZZZ = (ZZZ, ZZZ)\n"
    with pytest.raises(ValueError, match="BBB"):
        parse_map(text)


def test_parse_map_rejects_duplicate_definition():
    text = "L\n\nAAA = (AAA, AAA)\nAAA = (AAA, AAA)\n"
    with pytest.raises(ValueError, match="defined twice"):
        parse_map(text)


def test_parse_map_rejects_bad_instruction_line():
    with pytest.raises(ValueError):
        parse_map(EXAMPLE_PART1.replace("LLR", "LLQ"))


def test_parse_map_rejects_empty_input():
    with pytest.raises(ValueError):
        parse_map("   \n  ")


def test_node_map_is_read_only(part2_map):
    """Test that the arena cannot be mutated after parsing."""
    with pytest.raises(ValueError):
        part2_map.successors[0, 0] = 1


def test_get_index_rejects_unknown_node(part2_map):
    with pytest.raises(ValueError, match="Unknown node"):
        part2_map.get_index("QQQ")
    with pytest.raises(ValueError):
        part2_map.get_index(part2_map.n)


def test_parse_map_verbose_prints_summary(capsys):
    parse_map(EXAMPLE_PART2, verbose=True)
    out = capsys.readouterr().out
    assert "Parsed 2 instructions and 8 nodes" in out
    assert "No AAA node" in out


def test_nodes_with_suffix(part2_map):
    names = [part2_map.get_name(i) for i in part2_map.nodes_with_suffix("Z")]
    assert sorted(names) == ["11Z", "22Z"]
    assert part2_map.nodes_with_suffix("Q") == []


def test_unresolved_nodes_lists_placeholders():
    node_map = NodeMap([Direction.LEFT], ["AAA", "BBB"], [[1, 1], [-1, -1]], start_nodes=[0])
    assert node_map.unresolved_nodes() == ["BBB"]
