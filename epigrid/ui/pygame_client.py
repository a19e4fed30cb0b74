"""Pygame 2D visualization for the epigrid simulation.

Renders the visible part of the unbounded grid, grid lines and a stats
panel.  The simulation steps at a configurable tick rate while the
display refreshes at the Pygame frame rate.  Keyboard shortcuts adjust
the epidemic rules live; the mouse paints cells and pans the view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import pygame

if TYPE_CHECKING:
    from epigrid.simulation.session import Simulation

from epigrid.simulation.config import FocusPolicy
from epigrid.ui.camera import Camera
from epigrid.world.cell import CellState, Coordinate
from epigrid.world.neighbourhood import Neighbourhood

# Colour palette
_BG = (220, 220, 220)
_GRID_LINE = (150, 150, 150)
_TEXT = (20, 20, 20)

_STATE_COLOURS: dict[CellState, tuple[int, int, int]] = {
    CellState.HEALTHY: (0, 200, 0),
    CellState.INFECTED: (255, 0, 0),
    CellState.DEAD: (60, 40, 20),
    CellState.RECOVERED: (0, 150, 255),
}

_CHANCE_STEP = 0.05
_FOCUS_CYCLE = (FocusPolicy.CENTER, FocusPolicy.RANDOM, FocusPolicy.BRUSH)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class PygameRenderer:
    """Renders a Simulation into a Pygame window and feeds input back.

    Attributes:
        simulation: The simulation being driven.
        camera: Viewport onto the world.
        screen: The Pygame display surface.
    """

    # Speed presets: ticks per second
    _SPEED_STEPS: ClassVar[list[float]] = [
        1.0,
        2.0,
        5.0,
        10.0,
        15.0,
        30.0,
        60.0,
    ]

    def __init__(self, simulation: Simulation) -> None:
        """Initialise the renderer.

        Args:
            simulation: The simulation to render; its session settings
                give the viewport size, cell size and tick rate.
        """
        settings = simulation.settings
        self.simulation = simulation
        self.camera = Camera(
            cols=settings.visible_cols,
            rows=settings.visible_rows,
            cell_size=settings.cell_size,
        )
        self.ticks_per_second = settings.ticks_per_second
        self._speed_index = self._nearest_speed(self.ticks_per_second)
        self._tick_accumulator = 0.0
        self._drag_anchor: tuple[int, int] | None = None

        self._view_w = settings.visible_cols * settings.cell_size
        self._view_h = settings.visible_rows * settings.cell_size
        self._panel_width = 240
        self._win_w = self._view_w + self._panel_width
        self._win_h = self._view_h

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("epigrid")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        best = 0
        best_diff = abs(self._SPEED_STEPS[0] - tps)
        for i, s in enumerate(self._SPEED_STEPS):
            diff = abs(s - tps)
            if diff < best_diff:
                best, best_diff = i, diff
        return best

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            if not self.simulation.paused:
                self._tick_accumulator += self.ticks_per_second * dt
                steps = int(self._tick_accumulator)
                self._tick_accumulator -= steps
                for _ in range(steps):
                    self.simulation.advance()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self._paint(event.pos)
                elif event.button == 3:
                    self._drag_anchor = event.pos
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 3:
                self._drag_anchor = None
            elif event.type == pygame.MOUSEMOTION:
                if event.buttons[0]:
                    self._paint(event.pos)
                elif event.buttons[2] and self._drag_anchor is not None:
                    ax, ay = self._drag_anchor
                    mx, my = event.pos
                    self.camera.pan(mx - ax, my - ay)
                    self._drag_anchor = event.pos

    def _handle_key(self, key: int) -> None:
        """Apply a keyboard shortcut."""
        sim = self.simulation
        cfg = sim.config
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            sim.toggle_pause()
        elif key == pygame.K_r:
            sim.reset()
            self.camera.centre_on(Coordinate(0, 0))
        elif key == pygame.K_f:
            idx = _FOCUS_CYCLE.index(sim.focus)
            sim.set_focus(_FOCUS_CYCLE[(idx + 1) % len(_FOCUS_CYCLE)])
            self.camera.centre_on(Coordinate(0, 0))
        elif key == pygame.K_n:
            other = (
                Neighbourhood.VON_NEUMANN
                if cfg.neighbourhood is Neighbourhood.MOORE
                else Neighbourhood.MOORE
            )
            sim.update_rules(neighbourhood=other)
        elif key == pygame.K_b:
            sim.toggle_brush()
        elif key in (pygame.K_LEFTBRACKET, pygame.K_RIGHTBRACKET):
            delta = _CHANCE_STEP if key == pygame.K_RIGHTBRACKET else -_CHANCE_STEP
            sim.update_rules(
                infection_chance=round(
                    _clamp(cfg.infection_chance + delta, 0.0, 1.0),
                    2,
                ),
            )
        elif key in (pygame.K_SEMICOLON, pygame.K_QUOTE):
            delta = _CHANCE_STEP if key == pygame.K_QUOTE else -_CHANCE_STEP
            sim.update_rules(
                death_chance=round(_clamp(cfg.death_chance + delta, 0.0, 1.0), 2),
            )
        elif key in (pygame.K_COMMA, pygame.K_PERIOD):
            delta = 1 if key == pygame.K_PERIOD else -1
            sim.update_rules(
                infection_duration=max(0, cfg.infection_duration + delta),
            )
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self._speed_index = min(
                len(self._SPEED_STEPS) - 1,
                self._speed_index + 1,
            )
            self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
        elif key == pygame.K_MINUS:
            self._speed_index = max(0, self._speed_index - 1)
            self.ticks_per_second = self._SPEED_STEPS[self._speed_index]

    def _paint(self, pos: tuple[int, int]) -> None:
        """Apply the brush at a window pixel, if brush mode is on."""
        px, py = pos
        if not self.simulation.brush_enabled:
            return
        if not (0 <= px < self._view_w and 0 <= py < self._view_h):
            return
        self.simulation.paint_at(self.camera.to_world(px, py))

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_cells()
        self._draw_grid_lines()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_cells(self) -> None:
        """Fill every visible cell with its state colour."""
        cs = self.camera.cell_size
        origin = self.camera.visible_origin
        for coord, state in self.simulation.world.region(
            origin.x,
            origin.y,
            self.camera.cols,
            self.camera.rows,
        ):
            x, y = self.camera.to_screen(coord)
            pygame.draw.rect(self.screen, _STATE_COLOURS[state], (x, y, cs, cs))

    def _draw_grid_lines(self) -> None:
        """Draw the cell grid over the viewport."""
        cs = self.camera.cell_size
        for i in range(self.camera.cols + 1):
            pygame.draw.line(
                self.screen,
                _GRID_LINE,
                (i * cs, 0),
                (i * cs, self._view_h),
            )
        for j in range(self.camera.rows + 1):
            pygame.draw.line(
                self.screen,
                _GRID_LINE,
                (0, j * cs),
                (self._view_w, j * cs),
            )

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        sim = self.simulation
        cfg = sim.config
        counts = sim.counts()
        origin = self.camera.visible_origin
        panel_x = self._view_w + 10
        y = 10

        lines = [
            f"Tick: {sim.tick}",
            f"Speed: {self.ticks_per_second:.1f} t/s",
            f"{'PAUSED' if sim.paused else 'RUNNING'}",
            "",
            "--- Population ---",
            f"Infected: {counts[CellState.INFECTED]}",
            f"Dead: {counts[CellState.DEAD]}",
            f"Recovered: {counts[CellState.RECOVERED]}",
            "",
            "--- Rules ---",
            f"Infection: {cfg.infection_chance:.2f}",
            f"Duration: {cfg.infection_duration}",
            f"Death: {cfg.death_chance:.2f}",
            f"Neighbours: {cfg.neighbourhood.value}",
            f"Focus: {sim.focus.value}",
            f"Brush: {'infect' if sim.brush_infecting else 'heal'}",
            f"View: ({origin.x}, {origin.y})",
            "",
            "--- Controls ---",
            "SPACE: pause",
            "R: restart  F: focus",
            "N: neighbourhood",
            "B: brush infect/heal",
            "[ ]: infection chance",
            "; ': death chance",
            ", .: duration",
            "+/-: speed",
            "LMB: paint  RMB: pan",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
