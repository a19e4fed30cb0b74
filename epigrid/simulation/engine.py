"""SimulationEngine — advances the world one generation at a time.

Each step is double-buffered:

1. Collect candidates: every stored cell plus all of its neighbours,
   taken from the previous generation only.  A healthy cell with no
   infected neighbour cannot change, so nothing outside this set needs
   evaluating and the cost of a step follows the outbreak's perimeter
   rather than the (infinite) plane.
2. Evaluate each candidate against the previous generation.
3. Write non-healthy results into a brand-new world and return it.

Nothing is read from the world being built, so the order in which
candidates are visited cannot change the outcome's distribution.
Candidates are still visited in sorted order so that a seeded run
replays exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from epigrid.simulation.config import FocusPolicy, SimulationConfig
from epigrid.simulation.rules import transition
from epigrid.simulation.seeding import seed_world
from epigrid.world.cell import CellState, Coordinate
from epigrid.world.world import SparseWorld

logger = logging.getLogger(__name__)


def candidate_coordinates(
    world: SparseWorld,
    config: SimulationConfig,
) -> set[Coordinate]:
    """Return every coordinate that could change state this tick.

    Args:
        world: Previous generation.
        config: Supplies the neighbourhood topology.

    Returns:
        Active coordinates together with all of their neighbours.
    """
    candidates: set[Coordinate] = set()
    neighbourhood = config.neighbourhood
    for coord in world.state_of:
        candidates.add(coord)
        candidates.update(neighbourhood.neighbours(coord))
    return candidates


@dataclass
class SimulationEngine:
    """Computes generation N+1 from generation N.

    Attributes:
        rng: The single random stream shared by every infection and
            resolution draw.  Inject a seeded generator for replay.
    """

    rng: Generator = field(default_factory=np.random.default_rng)

    @classmethod
    def seeded(cls, seed: int | None) -> SimulationEngine:
        """Create an engine whose random stream starts from ``seed``."""
        return cls(rng=np.random.default_rng(seed))

    def step(self, world: SparseWorld, config: SimulationConfig) -> SparseWorld:
        """Advance ``world`` by exactly one generation.

        Args:
            world: Current generation; left untouched.
            config: Rules in force for this tick.

        Returns:
            The next generation as a new world.
        """
        new_world = SparseWorld()
        new_state, new_timer = new_world.state_of, new_world.timer_of
        for coord in sorted(candidate_coordinates(world, config)):
            state, timer = transition(world, coord, config, self.rng)
            if state is not CellState.HEALTHY:
                new_state[coord] = state
                new_timer[coord] = timer
        logger.debug("Step: %d -> %d active cells", len(world), len(new_world))
        return new_world

    def reset(
        self,
        config: SimulationConfig,
        focus: FocusPolicy,
        *,
        seed_radius: int = 70,
        seed_count: tuple[int, int] = (5, 15),
    ) -> SparseWorld:
        """Build an empty world seeded according to ``focus``.

        Args:
            config: Rules in force (infection duration of the seeds).
            focus: Initial-focus policy.
            seed_radius: Sampling half-width for random seeding.
            seed_count: Seed count range for random seeding.

        Returns:
            The freshly seeded world.
        """
        return seed_world(
            focus,
            config,
            self.rng,
            radius=seed_radius,
            count_range=seed_count,
        )

    def run(
        self,
        world: SparseWorld,
        config: SimulationConfig,
        ticks: int,
    ) -> SparseWorld:
        """Advance ``world`` by a fixed number of generations.

        Args:
            world: Starting generation.
            config: Rules in force for every tick.
            ticks: Number of generations to compute.

        Returns:
            The generation reached after ``ticks`` steps.
        """
        for _ in range(ticks):
            world = self.step(world, config)
        return world
