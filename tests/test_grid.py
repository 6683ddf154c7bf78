import dataclasses

import pytest

from astar_maze.core.grid import CellKind, Grid
from astar_maze.core.types import (
    DuplicateFinish,
    DuplicateStart,
    IllegalCharacter,
    MalformedInput,
    MissingFinish,
    MissingStart,
)


def test_construction_basics():
    g = Grid.from_lines(["s #", "   ", "# f"])
    assert (g.width, g.height) == (3, 3)
    assert g.start_index == 0 and g.finish_index == 8
    assert g.start == (0, 0) and g.goal == (2, 2)
    assert len(g.cells) == 9
    assert g.classify(2) is CellKind.WALL
    assert g.classify(4) is CellKind.OPEN
    assert g.classify(0) is CellKind.START
    assert g.classify(8) is CellKind.FINISH


def test_line_terminators_not_counted_in_width():
    g = Grid.from_lines(["s #\n", "  f\r\n"])
    assert g.width == 3
    assert g.glyphs == ("s", " ", "#", " ", " ", "f")


def test_short_rows_padded_with_open_cells():
    g = Grid.from_lines(["s###", "f"])
    assert g.width == 4
    assert [g.classify(i) for i in range(4, 8)] == [CellKind.FINISH] + [CellKind.OPEN] * 3


def test_dot_is_open():
    g = Grid.from_lines(["s.f"])
    assert g.classify(1) is CellKind.OPEN
    assert g.glyphs[1] == "."


def test_grid_is_frozen():
    g = Grid.from_lines(["sf"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        g.start_index = 1


@pytest.mark.parametrize("lines, error, line", [
    (["s  ", " s ", "  f"], DuplicateStart, 2),
    (["s f", "  f"], DuplicateFinish, 2),
    (["   ", "  f"], MissingStart, None),
    (["s  ", "   "], MissingFinish, None),
    (["s f", " x "], IllegalCharacter, 2),
    ([], MissingStart, None),
])
def test_malformed_input(lines, error, line):
    with pytest.raises(error) as info:
        Grid.from_lines(lines)
    assert isinstance(info.value, MalformedInput)
    assert isinstance(info.value, ValueError)
    assert info.value.line == line


def test_malformed_reasons_are_distinct():
    reasons = set()
    for lines in (["s", "s", "f"], ["s  "], ["sxf"]):
        with pytest.raises(MalformedInput) as info:
            Grid.from_lines(lines)
        reasons.add(type(info.value))
    assert reasons == {DuplicateStart, MissingFinish, IllegalCharacter}


def test_illegal_character_reports_char():
    with pytest.raises(IllegalCharacter) as info:
        Grid.from_lines(["s\tf"])
    assert info.value.char == "\t"
    assert "line 1" in str(info.value)


def test_first_offending_character_wins():
    with pytest.raises(IllegalCharacter):
        Grid.from_lines(["sx", "s f"])


def test_neighbors_order_up_right_down_left():
    g = Grid.from_lines(["s  ", "   ", "  f"])
    assert g.neighbors(4) == [1, 5, 7, 3]


def test_neighbors_skip_walls_and_out_of_range():
    g = Grid.from_lines(["s #", "   ", "# f"])
    assert g.neighbors(0) == [1, 3]
    assert g.neighbors(1) == [4, 0]
    assert g.neighbors(8) == [5, 7]


def test_neighbors_do_not_wrap_rows():
    g = Grid.from_lines(["   s", "f## ", "### ", "    "])
    # index 3 is the last column of row 0, index 4 the first column of row 1
    assert 4 not in g.neighbors(3)
    assert 3 not in g.neighbors(4)
    assert g.neighbors(3) == [7, 2]
    assert g.neighbors(4) == [0]


def test_heuristic_is_manhattan():
    g = Grid.from_lines(["s   ", "    ", "   f"])
    assert g.heuristic(0, 11) == 5
    assert g.heuristic(11, 0) == 5
    assert g.heuristic(5, 5) == 0
    assert g.heuristic(3, 4) == 4


def test_index_helpers():
    g = Grid.from_lines(["s  ", "  f"])
    assert g.coords(4) == (1, 1)
    assert g.index_of(2, 1) == 5
    with pytest.raises(IndexError):
        g.index_of(3, 0)
    with pytest.raises(IndexError):
        g.classify(6)
    with pytest.raises(IndexError):
        g.classify(-1)
    assert not g.is_passable(-1)


def test_trailing_empty_rows_dropped():
    g = Grid.from_lines(["s#f", "", "\r\n"])
    assert (g.width, g.height) == (3, 1)
    assert g.glyphs == ("s", "#", "f")
