"""Simulation — the live state an interactive front end drives.

Bundles the current world, the rules snapshot, the pause flag and the
brush so that input handlers and the frame loop have one object to talk
to.  Everything here happens between engine steps, never during one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from epigrid.simulation.config import FocusPolicy, SessionConfig, SimulationConfig
from epigrid.simulation.engine import SimulationEngine
from epigrid.world.cell import CellState, Coordinate
from epigrid.world.world import SparseWorld

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """Driver state for one interactive run.

    Attributes:
        settings: Session settings (seeding, viewport, speed).
        engine: Steps the world; owns the random stream.
        config: Rules applied on the next tick.
        focus: Seeding policy used by ``reset``.
        world: Current generation.
        tick: Generations computed since the last reset.
        paused: When True, ``advance`` does nothing.
        brush_infecting: Brush paints infections when True, heals when False.
    """

    settings: SessionConfig = field(default_factory=SessionConfig)
    engine: SimulationEngine = field(init=False)
    config: SimulationConfig = field(init=False)
    focus: FocusPolicy = field(init=False)
    world: SparseWorld = field(init=False)
    tick: int = field(init=False, default=0)
    paused: bool = False
    brush_infecting: bool = True

    def __post_init__(self) -> None:
        """Create the engine from the session seed and seed the first world."""
        self.engine = SimulationEngine.seeded(self.settings.seed)
        self.config = self.settings.rules
        self.focus = self.settings.initial_focus
        self.reset()

    @property
    def brush_enabled(self) -> bool:
        """Return True when manual painting is allowed (brush focus only)."""
        return self.focus is FocusPolicy.BRUSH

    def reset(
        self,
        config: SimulationConfig | None = None,
        focus: FocusPolicy | None = None,
    ) -> None:
        """Start over with an empty world seeded per the focus policy.

        Args:
            config: Replacement rules (keeps the current ones if None).
            focus: Replacement focus policy (keeps the current one if None).
        """
        if config is not None:
            self.config = config
        if focus is not None:
            self.focus = focus
        self.world = self.engine.reset(
            self.config,
            self.focus,
            seed_radius=self.settings.seed_radius,
            seed_count=self.settings.random_seed_count,
        )
        self.tick = 0
        logger.info("Reset with %s focus, %s", self.focus.value, self.config)

    def advance(self) -> bool:
        """Step the world once unless paused.

        Returns:
            True if a generation was computed.
        """
        if self.paused:
            return False
        self.world = self.engine.step(self.world, self.config)
        self.tick += 1
        return True

    def run(self, ticks: int) -> None:
        """Call ``advance`` a fixed number of times.

        Args:
            ticks: Number of ticks to attempt (all skipped while paused).
        """
        for _ in range(ticks):
            self.advance()

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return the new value."""
        self.paused = not self.paused
        return self.paused

    def update_rules(self, **changes: Any) -> SimulationConfig:
        """Replace the rules snapshot for subsequent ticks.

        Args:
            **changes: Field overrides for ``SimulationConfig``.

        Returns:
            The new config.

        Raises:
            ValueError: If an override is out of range.
        """
        self.config = self.config.replace(**changes)
        logger.debug("Rules updated: %s", self.config)
        return self.config

    def set_focus(self, focus: FocusPolicy) -> None:
        """Switch the focus policy and restart the run with it."""
        self.reset(focus=focus)

    def toggle_brush(self) -> bool:
        """Switch the brush between infecting and healing.

        Returns:
            True if the brush now infects.
        """
        self.brush_infecting = not self.brush_infecting
        return self.brush_infecting

    def paint_at(self, coord: Coordinate) -> None:
        """Apply the brush to one cell.

        Infecting paints a fresh infection lasting the current
        ``infection_duration``; healing restores the cell to healthy.
        """
        if self.brush_infecting:
            self.world.paint(coord, CellState.INFECTED, self.config.infection_duration)
        else:
            self.world.paint(coord, CellState.HEALTHY)

    def counts(self) -> dict[CellState, int]:
        """Return the tally of non-healthy cells in the current world."""
        return self.world.counts_by_state()
