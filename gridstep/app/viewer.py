# gridstep/app/viewer.py
#!/usr/bin/env python3
"""
Grid search step viewer.

- Keyboard:
    [P]          -> toggle automatic stepping
    [SPACE]      -> single step (switches to manual)
    [ / ]        -> shorter / longer step interval
    [A]          -> cycle algorithm (A* / Dijkstra)
    [G]          -> toggle diagonal movement
    [H]          -> cycle heuristic (A* only)
    [M]          -> next bundled map
    [R]          -> restart
    [Q]/[ESC]    -> quit

Settings: see gridstep.app.config (GRIDSTEP_* env vars or --key=value flags).
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pygame

from gridstep.app.config import Settings, resolve_settings
from gridstep.app.session import Executor
from gridstep.core.maps import bundled_maps, load_map
from gridstep.core.types import Cell, Found, Grid, InProgress, NoPath

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 260
INFO_H = 28
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 40
FONT_NAME = None  # default pygame font
SPEED_STEP = 0.05

# Colors
WHITE       = (255, 255, 255)
BLACK       = (  0,   0,   0)
BG          = ( 24,  26,  32)
FLOOR       = ( 60,  64,  76)
GRID_LINE   = ( 90,  94, 106)
OPEN_A      = (128, 128, 178, 204)
CLOSED_A    = ( 76,  76, 128, 204)
PATH_A      = (128, 255, 128, 230)
START_C     = (128, 255, 128)
TARGET_C    = (128, 128, 255)
RED         = (255,   0,   0)
CARD_BG     = ( 24,  28,  36, 220)
TEXT_LIGHT  = (230, 235, 240)
ACCENT_GOLD = (255, 210,   0)


class Viewer:
    def __init__(self, executor: Executor, maps: Dict[str, Path]):
        pygame.init()

        self.executor = executor
        self.maps = maps
        self.font_small = pygame.font.Font(FONT_NAME, 18)
        self.font = pygame.font.Font(FONT_NAME, 22)
        self.font_huge = pygame.font.Font(FONT_NAME, 64)

        self.cell_size = self._auto_cell_size(executor.grid)
        self._open_window()
        self.clock = pygame.time.Clock()

    @property
    def grid(self) -> Grid:
        return self.executor.grid

    # ---------- layout ----------
    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN * 2 - INFO_H
        return max(14, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    def _open_window(self):
        cs = self.cell_size
        grid_px_w = GRID_MARGIN * 2 + self.grid.width * cs
        grid_px_h = GRID_MARGIN * 2 + self.grid.height * cs + INFO_H
        self.screen = pygame.display.set_mode((grid_px_w + PANEL_W, max(grid_px_h, 360)))
        self._grid_origin = (GRID_MARGIN, INFO_H + GRID_MARGIN)
        self._panel_x = grid_px_w
        self._free_cells = self.grid.free_cells()
        pygame.display.set_caption(f"gridstep - {self.grid.name}")

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        col, row = cell
        return pygame.Rect(ox + col * cs, oy + row * cs, cs, cs)

    # ---------- loop ----------
    def run(self):
        while True:
            self._handle_events()
            self.executor.update(pygame.time.get_ticks() / 1000.0)
            self._draw()
            self.clock.tick(60)

    def _handle_events(self):
        ex = self.executor
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_p:
                    ex.toggle_auto()
                elif e.key == pygame.K_SPACE:
                    ex.step_once()
                elif e.key == pygame.K_LEFTBRACKET:
                    ex.adjust_speed(-SPEED_STEP)
                elif e.key == pygame.K_RIGHTBRACKET:
                    ex.adjust_speed(+SPEED_STEP)
                elif e.key == pygame.K_r:
                    ex.restart()
                elif e.key == pygame.K_a:
                    self._rebuild(algo_kind=ex.algo_kind.next())
                elif e.key == pygame.K_g:
                    self._rebuild(movement=ex.movement.toggled())
                elif e.key == pygame.K_h and ex.algo_kind.supports_heuristics:
                    self._rebuild(heuristic=ex.heuristic.next())
                elif e.key == pygame.K_m:
                    self._next_map()

    def _rebuild(self, grid: Optional[Grid] = None, **changes):
        """Replace the executor with a fresh one, keeping pacing settings."""
        ex = self.executor
        self.executor = Executor(
            grid or ex.grid,
            algo_kind=changes.get("algo_kind", ex.algo_kind),
            movement=changes.get("movement", ex.movement),
            heuristic=changes.get("heuristic", ex.heuristic),
            auto_advance=ex.auto_advance,
            update_speed=ex.update_speed,
        )

    def _next_map(self):
        keys: List[str] = list(self.maps)
        if not keys:
            return
        cur = self.grid.name
        nxt = keys[(keys.index(cur) + 1) % len(keys)] if cur in keys else keys[0]
        try:
            grid = load_map(self.maps[nxt])
        except (ValueError, OSError) as ex:
            logger.error(f"Failed to load map {nxt}: {ex}")
            return
        self._rebuild(grid=grid)
        self.cell_size = self._auto_cell_size(grid)
        self._open_window()

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BG)
        self._draw_grid()
        self._draw_info_text()
        self._draw_metrics()
        if isinstance(self.executor.algo.status(), NoPath):
            self._draw_no_path_banner()
        pygame.display.flip()

    def _fill_alpha(self, cells, rgba: Tuple[int, int, int, int]):
        cs = self.cell_size
        s = pygame.Surface((cs, cs), pygame.SRCALPHA)
        s.fill(rgba)
        for c in cells:
            self.screen.blit(s, self._cell_rect(c).topleft)

    def _draw_grid(self):
        cs = self.cell_size
        shade = pygame.Surface((cs, cs), pygame.SRCALPHA)
        for row in range(self.grid.height):
            for col in range(self.grid.width):
                rect = self._cell_rect((col, row))
                cost = self.grid.cells[row][col]
                if cost < 0:
                    pygame.draw.rect(self.screen, BLACK, rect)
                    continue
                pygame.draw.rect(self.screen, FLOOR, rect)
                if cost > 0:
                    shade.fill((255, 255, 255, int(255 * min(1.0, cost / 10.0))))
                    self.screen.blit(shade, rect.topleft)
                pygame.draw.rect(self.screen, GRID_LINE, rect, 1)

        st = self.executor.algo.status()
        if isinstance(st, InProgress):
            self._fill_alpha(st.opened, OPEN_A)
            self._fill_alpha(st.closed, CLOSED_A)
        elif isinstance(st, Found):
            self._fill_alpha(st.path, PATH_A)

        if not isinstance(st, NoPath):
            pygame.draw.rect(self.screen, START_C, self._cell_rect(self.grid.start), 2)
            for t in self.grid.targets:
                pygame.draw.rect(self.screen, TARGET_C, self._cell_rect(t), 2)

    def _draw_info_text(self):
        surf = self.font_small.render(self.executor.info_text(), True, WHITE)
        self.screen.blit(surf, (8, 6))

    def _draw_metrics(self):
        x0 = self._panel_x + 10
        y0 = INFO_H + GRID_MARGIN
        card = pygame.Surface((PANEL_W - 20, 200), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        self.screen.blit(card, (x0, y0))

        x0 += 14
        y0 += 10

        def line(text, color=TEXT_LIGHT):
            nonlocal y0
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        m = self.executor.algo.metrics()
        line("Metrics", color=ACCENT_GOLD)
        line(f"Popped: {m['popped']}")
        line(f"Open: {m['open_size']}")
        line(f"Closed: {m['closed_count']} / {self._free_cells}")
        line(f"Path Len: {m['path_len']}")
        if m["total_cost"] is not None:
            line(f"Total Cost: {m['total_cost']:.2f}")

    def _draw_no_path_banner(self):
        w, h = self.screen.get_size()
        pygame.draw.rect(self.screen, BLACK, pygame.Rect(0, int(h * 0.44), w, int(h * 0.12)))
        text = self.font_huge.render("No path found", True, RED)
        self.screen.blit(text, text.get_rect(center=(w // 2, h // 2)))


# ---------- main ----------
def _load_initial_map(settings: Settings, maps: Dict[str, Path]) -> Grid:
    if settings.map in maps:
        return load_map(maps[settings.map])
    return load_map(settings.map)


def main():
    try:
        settings = resolve_settings(sys.argv[1:])
    except ValueError as ex:
        print(f"gridstep: {ex}", file=sys.stderr)
        sys.exit(2)
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    maps = bundled_maps()
    try:
        grid = _load_initial_map(settings, maps)
    except (ValueError, OSError) as ex:
        logger.error(f"Failed to load map {settings.map}: {ex}")
        sys.exit(1)

    executor = Executor(grid, algo_kind=settings.algo, movement=settings.movement,
                        heuristic=settings.heuristic, update_speed=settings.update_speed)
    Viewer(executor, maps).run()


if __name__ == "__main__":
    main()
