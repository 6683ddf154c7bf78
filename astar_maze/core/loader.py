# astar_maze/core/loader.py
#!/usr/bin/env python3
import logging
from pathlib import Path
from typing import Union

from astar_maze.core.grid import Grid
from astar_maze.core.types import IllegalCharacter

logger = logging.getLogger(__name__)


def parse_maze(text: str) -> Grid:
    """Build a Grid from maze text, one row per '\\n'-terminated line."""
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return Grid.from_lines(lines)


def load_maze(path: Union[str, Path]) -> Grid:
    """Read a UTF-8 maze file. OSError and MalformedInput propagate to the caller."""
    path = Path(path)
    with open(path, "rb") as f:
        raw = f.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as ex:
        bad = raw[ex.start:ex.start + 1]
        lineno = raw.count(b"\n", 0, ex.start) + 1
        raise IllegalCharacter(f"undecodable byte 0x{bad[0]:02x} on line {lineno}",
                               bad.decode("latin-1"), lineno) from ex
    logger.debug("loaded %s (%d bytes)", path, len(raw))
    return parse_maze(text)
