# astar_maze/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Union

Cell = Tuple[int, int]  # (col, row)

NO_PARENT = -1


# -------------------- construction errors --------------------

class MalformedInput(ValueError):
    """The maze text cannot become a Grid. Raised before any search starts."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line


class DuplicateStart(MalformedInput):
    pass


class DuplicateFinish(MalformedInput):
    pass


class MissingStart(MalformedInput):
    pass


class MissingFinish(MalformedInput):
    pass


class IllegalCharacter(MalformedInput):
    def __init__(self, message: str, char: str, line: Optional[int] = None):
        super().__init__(message, line)
        self.char = char


# -------------------- search outcomes --------------------

@dataclass(frozen=True)
class Solved:
    path: Tuple[int, ...]         # linear indices, start..finish inclusive

    @property
    def steps(self) -> int:
        return len(self.path) - 1

    def __len__(self) -> int:
        return len(self.path)


@dataclass(frozen=True)
class Unsolvable:
    pass


SolveResult = Union[Solved, Unsolvable]


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[int] = field(default_factory=list)
    closed: List[int] = field(default_factory=list)
    current: Optional[int] = None
    path: Optional[List[int]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
