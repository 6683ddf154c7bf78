# astar_maze/core/astar.py
#!/usr/bin/env python3
"""
A* over a maze Grid — one expansion per step() for animation, or solve() to finish.

Implements the Algorithm API expected by the viewer:
- init(grid) - reset() - step() -> StepResult
plus solve() -> Solved | Unsolvable for batch use.

Search state (fresh on every reset):
- visit_status: index -> parent index (NO_PARENT for the start). Absent = unvisited.
- frontier: heap of (f, h, -g, seq, index, parent). Not deduplicated; an entry
  whose index is already visited is skipped when popped (first pop wins).

Tie-breaking in the PQ:
- lower f, then lower h, then deeper g, then FIFO by seq.

Each entry carries its own path cost g, so f = g + Manhattan(index, finish)
is exact per path and the first time finish is popped its path is shortest.
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from astar_maze.core.grid import Grid
from astar_maze.core.types import NO_PARENT, Solved, SolveResult, StepResult, Unsolvable

logger = logging.getLogger(__name__)

Entry = Tuple[int, int, int, int, int, int]  # (f, h, -g, seq, index, parent)


@dataclass
class AStarAlgo:
    name: str = "A*"

    # Internal state
    grid: Optional[Grid] = None
    frontier: List[Entry] = field(default_factory=list)
    open_set: set = field(default_factory=set)         # for overlay
    visit_status: Dict[int, int] = field(default_factory=dict)
    g: Dict[int, int] = field(default_factory=dict)    # settled cost per visited cell
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    seq: int = 0  # monotonic counter for PQ stability

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        """Attach to a grid and seed the search."""
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        """Drop all search state and push the start cell."""
        if self.grid is None:
            return
        self.frontier.clear()
        self.open_set.clear()
        self.visit_status.clear()
        self.g.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.seq = 0

        s = self.grid.start_index
        self._push(s, 0, NO_PARENT)

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _h(self, index: int) -> int:
        return self.grid.heuristic(index, self.grid.finish_index)

    def _push(self, index: int, g: int, parent: int) -> None:
        h = self._h(index)
        heapq.heappush(self.frontier, (g + h, h, -g, self._bump(), index, parent))
        self.open_set.add(index)

    def visited(self, index: int) -> bool:
        return index in self.visit_status

    def _reconstruct_path(self, end: int) -> List[int]:
        path: List[int] = []
        cur = end
        while cur != NO_PARENT:
            path.append(cur)
            cur = self.visit_status[cur]
        path.reverse()
        return path

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE expansion:
          - Pop the lowest-f entry; skip it if its cell is already visited.
          - Visit it with the parent that pushed it.
          - If it is the finish, reconstruct and finish.
          - Else push every unvisited neighbor at g + 1.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.grid.finish_index)
            return StepResult(status="done", path=path, metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            logger.debug("%s: frontier exhausted after %d pops", self.name, self.popped_count)
            return StepResult(status="no_path", metrics=self._metrics())

        _, _, neg_g, _, u, parent = heapq.heappop(self.frontier)

        # Ignore stale pops
        if self.visited(u):
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.visit_status[u] = parent
        self.g[u] = -neg_g

        if u == self.grid.finish_index:
            self.done = True
            path = self._reconstruct_path(u)
            logger.debug("%s: solved in %d pops, path of %d cells", self.name, self.popped_count, len(path))
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[int] = []
        for v in self.grid.neighbors(u):
            if self.visited(v):
                continue
            if v not in self.open_set:
                opened_now.append(v)
            self._push(v, self.g[u] + 1, u)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def solve(self) -> SolveResult:
        """Step until the search terminates. Continues from the current state."""
        if self.grid is None:
            raise RuntimeError("solve() called before init(grid)")
        while True:
            res = self.step()
            if res.status == "done":
                return Solved(tuple(res.path))
            if res.status == "no_path":
                return Unsolvable()

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.visit_status),
            "path_len": path_len,
            "total_cost": path_len - 1 if path_len else None,
        }


def solve(grid: Grid) -> SolveResult:
    """Fresh A* search over grid."""
    algo = AStarAlgo()
    algo.init(grid)
    return algo.solve()
