# astar_maze/core/grid.py
#!/usr/bin/env python3
"""
Grid Model — flat-indexed maze storage.

Cells are stored row-major in one tuple, index = row * width + col.
The grid is frozen after construction; search bookkeeping lives elsewhere
so one grid can back any number of solves.

Symbols:
    '#'        wall
    ' ' / '.'  open
    's'        start (exactly one)
    'f'        finish (exactly one)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from astar_maze.core.types import (
    Cell,
    DuplicateFinish,
    DuplicateStart,
    IllegalCharacter,
    MissingFinish,
    MissingStart,
)

logger = logging.getLogger(__name__)


class CellKind(Enum):
    WALL = "wall"
    OPEN = "open"
    START = "start"
    FINISH = "finish"


WALL_CHAR = "#"
OPEN_CHARS = (" ", ".")
START_CHAR = "s"
FINISH_CHAR = "f"

SYMBOLS = {WALL_CHAR: CellKind.WALL, START_CHAR: CellKind.START, FINISH_CHAR: CellKind.FINISH}
SYMBOLS.update({c: CellKind.OPEN for c in OPEN_CHARS})


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: Tuple[CellKind, ...]   # [row * width + col]
    glyphs: Tuple[str, ...]       # original character of every cell
    start_index: int
    finish_index: int

    # -------------------- construction --------------------

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """Build a grid from text rows. Raises a MalformedInput subclass on bad input."""
        rows: List[str] = [line.rstrip("\r\n") for line in lines]
        while rows and not rows[-1]:
            rows.pop()   # trailing blank lines are not maze rows
        width = max((len(r) for r in rows), default=0)

        cells: List[CellKind] = []
        glyphs: List[str] = []
        start = finish = None

        for lineno, row in enumerate(rows, start=1):
            for ch in row.ljust(width):
                kind = SYMBOLS.get(ch)
                if kind is None:
                    raise IllegalCharacter(f"unallowed character {ch!r} on line {lineno}", ch, lineno)
                if kind is CellKind.START:
                    if start is not None:
                        raise DuplicateStart(f"more than one start specified on line {lineno}", lineno)
                    start = len(cells)
                elif kind is CellKind.FINISH:
                    if finish is not None:
                        raise DuplicateFinish(f"more than one finish specified on line {lineno}", lineno)
                    finish = len(cells)
                cells.append(kind)
                glyphs.append(ch)

        if start is None:
            raise MissingStart("no start location")
        if finish is None:
            raise MissingFinish("no finish location")

        logger.debug("grid %dx%d start=%d finish=%d", width, len(rows), start, finish)
        return cls(width, len(rows), tuple(cells), tuple(glyphs), start, finish)

    # -------------------- geometry --------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def start(self) -> Cell:
        return self.coords(self.start_index)

    @property
    def goal(self) -> Cell:
        return self.coords(self.finish_index)

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.size

    def coords(self, index: int) -> Cell:
        row, col = divmod(index, self.width)
        return (col, row)

    def index_of(self, col: int, row: int) -> int:
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"cell ({col}, {row}) outside {self.width}x{self.height} grid")
        return row * self.width + col

    def classify(self, index: int) -> CellKind:
        if not self.in_bounds(index):
            raise IndexError(f"cell index {index} outside [0, {self.size})")
        return self.cells[index]

    def is_passable(self, index: int) -> bool:
        return self.in_bounds(index) and self.cells[index] is not CellKind.WALL

    def neighbors(self, index: int) -> List[int]:
        """Passable 4-neighbors in order up, right, down, left."""
        col = index % self.width
        candidates = [
            index - self.width,
            index + 1 if col < self.width - 1 else -1,   # no wrap onto next row
            index + self.width,
            index - 1 if col > 0 else -1,                # no wrap onto previous row
        ]
        return [n for n in candidates if self.is_passable(n)]

    def heuristic(self, a: int, b: int) -> int:
        """Manhattan distance between two cells."""
        (ax, ay), (bx, by) = self.coords(a), self.coords(b)
        return abs(ax - bx) + abs(ay - by)
