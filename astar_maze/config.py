# astar_maze/config.py
#!/usr/bin/env python3
"""
Runtime settings, resolved once at import.

- ASTAR_MAZE_MAPS       directory scanned for *.txt mazes (default: <repo>/maps)
- ASTAR_MAZE_MARKER     path marker used when rendering (default: '+')
- ASTAR_MAZE_LOG_LEVEL  logging level name (default: WARNING)
"""

import os
from pathlib import Path
from typing import List, Union

from astar_maze.core.render import PATH_MARKER as DEFAULT_MARKER

REPO_ROOT = Path(__file__).resolve().parents[1]

MAP_DIR = Path(os.getenv("ASTAR_MAZE_MAPS", str(REPO_ROOT / "maps")))
PATH_MARKER = os.getenv("ASTAR_MAZE_MARKER", DEFAULT_MARKER)
LOG_LEVEL = os.getenv("ASTAR_MAZE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def discover_maps(directory: Union[str, Path] = MAP_DIR) -> List[Path]:
    """Maze files in `directory`, sorted by name. Missing directory -> []."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.glob("*.txt") if p.is_file())
