# astar_maze/app/viewer.py
#!/usr/bin/env python3
"""
Maze Viewer — animated A* over text mazes

- Keyboard:
    [ / ]        -> previous / next map in the maps directory
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Maps:
- ENV: ASTAR_MAZE_MAPS=<dir>   (default: <repo>/maps)
- CLI: python -m astar_maze.app.viewer [maze.txt]
"""

# --- bootstrap import path so `from astar_maze...` works when run as a script ---
import sys, time
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------

import logging
from typing import List, Tuple, Optional
import pygame

from astar_maze import config
from astar_maze.core.astar import AStarAlgo
from astar_maze.core.grid import Grid, CellKind
from astar_maze.core.loader import load_maze
from astar_maze.core.types import MalformedInput

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
WALL_GRAY   = ( 52, 56, 66)
FLOOR_GRAY  = (200,200,200)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


def empty_metrics() -> dict:
    return {
        "algo": "A*",
        "popped": 0,
        "open_size": 0,
        "closed_count": 0,
        "path_len": 0,
        "total_cost": None,
    }


def cell_rect(origin: Tuple[int, int], cs: int, grid: Grid, index: int) -> Tuple[int, int, int, int]:
    """Screen rectangle (x, y, w, h) of a linear cell index."""
    col, row = grid.coords(index)
    ox, oy = origin
    return (ox + col*cs, oy + row*cs, cs, cs)


def next_map(maps: List[Path], current: Optional[Path], delta: int) -> Path:
    """Map `delta` places after `current` (wrapping). Unknown current starts from the list head."""
    resolved = [p.resolve() for p in maps]
    here = current.resolve() if current is not None else None
    pos = resolved.index(here) if here in resolved else -1
    return maps[(pos + delta) % len(maps)]


def fit_cell_size(grid: Grid, avail_w: int, avail_h: int) -> int:
    """Largest integer cell size that fits, never below 8px."""
    cs_by_w = avail_w // max(1, grid.width)
    cs_by_h = avail_h // max(1, grid.height)
    return int(max(8, min(cs_by_w, cs_by_h)))


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, maps: Optional[List[Path]] = None, map_path: Optional[Path] = None):
        pygame.init()

        self.grid = grid
        self.maps = list(maps) if maps is not None else config.discover_maps()
        self.map_path = map_path
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        cs = max(14, min(CELL_SIZE_DEFAULT, (720 - GRID_MARGIN*2) // max(1, grid.height)))
        win_w = GRID_MARGIN*2 + grid.width * cs + PANEL_W
        win_h = max(GRID_MARGIN*2 + grid.height * cs, 520)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(self._caption())

        self._buttons: list[UIButton] = []
        self._layout(win_w, win_h)

        self.open_set: set[int] = set()
        self.closed_set: set[int] = set()
        self.path: List[int] = []

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 8
        self.state = "Idle"
        self._last_step_t = 0.0

        self.algo = AStarAlgo()
        self.algo.init(self.grid)
        self._last_metrics = empty_metrics()

    def _caption(self) -> str:
        name = self.map_path.stem if self.map_path else "custom"
        return f"A* Maze — {name}"

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = fit_cell_size(self.grid, avail_w, avail_h)

        plate_w = self.grid.width  * self.cell_size + 2 * GRID_MARGIN
        plate_h = self.grid.height * self.cell_size + 2 * GRID_MARGIN

        left_x = max(0, min((win_w - (plate_w + PANEL_W)) // 2, win_w - PANEL_W - plate_w))
        top_y  = max(0, (win_h - plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, plate_w, plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self.algo.step()
        self.open_set.update(res.opened)
        for c in res.closed:
            self.closed_set.add(c)
            self.open_set.discard(c)
        if res.path is not None: self.path = res.path
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "no_path":
            self.state = "Unsolvable"; self.running = False
        elif res.status in ("running","idle"):
            self.state = "Running" if self.running else "Idle"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key == pygame.K_LEFTBRACKET:
                    self._cycle_map(-1)
                elif e.key == pygame.K_RIGHTBRACKET:
                    self._cycle_map(+1)
            elif e.type == pygame.VIDEORESIZE:
                w, h = max(480, e.w), max(360, e.h)
                self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                self._layout(w, h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _cycle_map(self, delta: int):
        if not self.maps:
            return
        self._switch_map(next_map(self.maps, self.map_path, delta))

    def _switch_map(self, path: Path):
        try:
            grid = load_maze(path)
        except (OSError, MalformedInput) as ex:
            print(f"Failed to load map {path.name}: {ex}")
            return
        self.grid = grid
        self.map_path = path
        pygame.display.set_caption(self._caption())
        self.algo.init(self.grid)
        self._reset_overlays()
        self._layout(*self.screen.get_size())
        self.running = False; self.state = "Idle"
        self._refresh_active_states()
        logger.debug("switched to %s (%dx%d)", path, grid.width, grid.height)

    def _reset_overlays(self):
        self.open_set.clear()
        self.closed_set.clear()
        self.path = []
        self._last_metrics = empty_metrics()

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._reset_overlays()
        self._refresh_active_states()

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        cs = self.cell_size
        origin = self._grid_origin

        for i, kind in enumerate(self.grid.cells):
            rect = pygame.Rect(cell_rect(origin, cs, self.grid, i))
            pygame.draw.rect(self.screen, WALL_GRAY if kind is CellKind.WALL else FLOOR_GRAY, rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        # overlays
        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
        overlay.fill(NEON_MAG_A)
        for i in self.closed_set:
            self.screen.blit(overlay, cell_rect(origin, cs, self.grid, i)[:2])
        overlay.fill(NEON_CYAN_A)
        for i in self.open_set:
            self.screen.blit(overlay, cell_rect(origin, cs, self.grid, i)[:2])

        # path
        if len(self.path) >= 2:
            pts = []
            for i in self.path:
                x, y, _, _ = cell_rect(origin, cs, self.grid, i)
                pts.append((x + cs//2, y + cs//2))
            glow = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            pygame.draw.lines(glow, (0, 255, 220, 60), False, pts, 7)
            self.screen.blit(glow, (0,0), special_flags=pygame.BLEND_ADD)
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, 5)

        self._draw_badge(self.grid.start_index, "S", BLUE)
        self._draw_badge(self.grid.finish_index, "F", RED)

    def _draw_badge(self, index: int, label: str, color: Tuple[int,int,int]):
        cs = self.cell_size
        x, y, _, _ = cell_rect(self._grid_origin, cs, self.grid, index)
        center = (x + cs//2, y + cs//2)
        pygame.draw.circle(self.screen, color, center, max(4, cs//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 38
        gap = 10

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset);       y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Speed −", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+1)))
        y += h + gap

        self._buttons.append(UIButton("◀ Map", pygame.Rect(x, y, half, h), lambda: self._cycle_map(-1)))
        self._buttons.append(UIButton("Map ▶", pygame.Rect(x + half + 8, y, half, h), lambda: self._cycle_map(+1)))

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "running", False))

    def _toggle_run(self):
        if self.state in ("Done", "Unsolvable"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(60, self.steps_per_sec + dv)))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 210), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line(f"A* — {self.state}", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("total_cost") is not None:
            line(f"Steps: {m['total_cost']}")
        line("-" * 26)
        line(f"Map: {self.map_path.name if self.map_path else 'custom'}")
        line(f"Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    maps = config.discover_maps()
    if argv:
        path = Path(argv[0])
    elif maps:
        path = maps[0]
    else:
        print(f"No maze given and no *.txt maps in {config.MAP_DIR}")
        sys.exit(1)
    try:
        grid = load_maze(path)
    except (OSError, MalformedInput) as ex:
        print(f"Failed to load map {path}: {ex}")
        sys.exit(2)
    Viewer(grid, maps=maps, map_path=path).run()

if __name__ == "__main__":
    main()
