# astar_maze/cli.py
#!/usr/bin/env python3
"""
Solve a maze file and print the result.

    astar-maze maps/01_open_room.txt
    astar-maze maps/03_dead_end.txt --marker=* -v
    astar-maze maps/02_corridors.txt --view

Exit status: 0 solved, 1 unsolvable, 2 unreadable or malformed maze.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from astar_maze import config
from astar_maze.core.astar import solve
from astar_maze.core.loader import load_maze
from astar_maze.core.render import check_marker, render_text
from astar_maze.core.types import MalformedInput, Solved

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVABLE = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="astar-maze", description="Shortest path through a text maze (A*).")
    parser.add_argument("maze", help="maze file: '#' walls, ' ' or '.' open, one 's' start, one 'f' finish")
    parser.add_argument("--marker", default=config.PATH_MARKER, help="character drawn on the path (default: %(default)s)")
    parser.add_argument("--view", action="store_true", help="animate the search in the pygame viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def resolve_level(name: str) -> int:
    """Numeric level for a level name; unknown names fall back to WARNING."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else resolve_level(config.LOG_LEVEL)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        check_marker(args.marker)
    except ValueError as ex:
        parser.error(str(ex))

    try:
        grid = load_maze(args.maze)
    except (OSError, MalformedInput) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.view:
        from astar_maze.app.viewer import Viewer
        Viewer(grid, map_path=Path(args.maze)).run()
        return EXIT_SOLVED

    result = solve(grid)
    print(render_text(grid, result, args.marker))
    logger.info("%s: %s", args.maze, "solved" if isinstance(result, Solved) else "unsolvable")
    return EXIT_SOLVED if isinstance(result, Solved) else EXIT_UNSOLVABLE


if __name__ == "__main__":
    sys.exit(main())
