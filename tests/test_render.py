import pytest

from astar_maze.core.astar import solve
from astar_maze.core.grid import Grid
from astar_maze.core.render import UNSOLVABLE_MESSAGE, render, render_text
from astar_maze.core.types import Solved, Unsolvable


@pytest.fixture
def small():
    return Grid.from_lines(["s #", "   ", "# f"])


def test_render_without_path_is_original(small):
    assert render(small) == ["s #", "   ", "# f"]


def test_render_marks_path_but_keeps_endpoints(small):
    assert render(small, [0, 1, 4, 5, 8]) == ["s+#", " ++", "# f"]


def test_render_custom_marker(small):
    assert render(small, [0, 3, 4, 7, 8], marker="*") == ["s #", "** ", "#*f"]


def test_render_keeps_dot_floor_off_path():
    grid = Grid.from_lines(["s..", "..f"])
    assert render(grid, [0, 1, 2, 5]) == ["s++", "..f"]


def test_render_preserves_walls(small):
    rows = render(small, solve(small).path)
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if small.glyphs[r * small.width + c] == "#":
                assert ch == "#"


@pytest.mark.parametrize("marker", ["", "++", "#", "s", "f", " ", ".", "\n"])
def test_render_rejects_bad_marker(small, marker):
    with pytest.raises(ValueError):
        render(small, marker=marker)


def test_render_text_solved(small):
    assert render_text(small, Solved((0, 1, 4, 5, 8))) == "s+#\n ++\n# f"


def test_render_text_unsolvable(small):
    assert render_text(small, Unsolvable()) == UNSOLVABLE_MESSAGE == "Unsolvable puzzle"
