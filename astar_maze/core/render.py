# astar_maze/core/render.py
#!/usr/bin/env python3
from typing import Iterable, List, Optional

from astar_maze.core.grid import SYMBOLS, Grid
from astar_maze.core.types import Solved, SolveResult

UNSOLVABLE_MESSAGE = "Unsolvable puzzle"
PATH_MARKER = "+"


def check_marker(marker: str) -> str:
    if len(marker) != 1 or marker in SYMBOLS or marker in "\r\n":
        raise ValueError(f"path marker must be one non-maze character, got {marker!r}")
    return marker


def render(grid: Grid, path: Optional[Iterable[int]] = None, marker: str = PATH_MARKER) -> List[str]:
    """
    Rows of the maze with path cells replaced by `marker`.
    Start and finish keep their own symbols; every other cell keeps its original glyph.
    """
    check_marker(marker)
    glyphs = list(grid.glyphs)
    for i in path or ():
        if i not in (grid.start_index, grid.finish_index):
            glyphs[i] = marker

    w = grid.width
    return ["".join(glyphs[r * w:(r + 1) * w]) for r in range(grid.height)]


def render_text(grid: Grid, result: SolveResult, marker: str = PATH_MARKER) -> str:
    check_marker(marker)
    if isinstance(result, Solved):
        return "\n".join(render(grid, result.path, marker))
    return UNSOLVABLE_MESSAGE
