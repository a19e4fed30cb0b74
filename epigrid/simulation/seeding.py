"""Initial-focus seeding, applied when the simulation is reset."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from epigrid.simulation.config import FocusPolicy
from epigrid.world.cell import CellState, Coordinate
from epigrid.world.world import SparseWorld

if TYPE_CHECKING:
    from numpy.random import Generator

    from epigrid.simulation.config import SimulationConfig

logger = logging.getLogger(__name__)

ORIGIN = Coordinate(0, 0)


def seed_center(world: SparseWorld, config: SimulationConfig) -> None:
    """Infect the origin."""
    world.paint(ORIGIN, CellState.INFECTED, config.infection_duration)


def seed_random(
    world: SparseWorld,
    config: SimulationConfig,
    rng: Generator,
    *,
    radius: int = 70,
    count_range: tuple[int, int] = (5, 15),
) -> None:
    """Scatter a handful of infections around the origin.

    Draws ``n`` from ``[low, high)`` and then ``n`` coordinates whose
    ``x`` and ``y`` are independently uniform over ``[-radius, radius)``.
    Repeated coordinates simply overwrite, so fewer than ``n`` distinct
    cells may end up infected.

    Args:
        world: World to seed (edited in place).
        config: Supplies the infection duration.
        rng: Seeded random generator.
        radius: Half-width of the square sampling window.
        count_range: Half-open range for the number of draws.
    """
    low, high = count_range
    n = int(rng.integers(low, high))
    for _ in range(n):
        x = int(rng.integers(-radius, radius))
        y = int(rng.integers(-radius, radius))
        world.paint(Coordinate(x, y), CellState.INFECTED, config.infection_duration)


def seed_world(
    policy: FocusPolicy,
    config: SimulationConfig,
    rng: Generator,
    *,
    radius: int = 70,
    count_range: tuple[int, int] = (5, 15),
) -> SparseWorld:
    """Build a fresh world seeded according to ``policy``.

    ``BRUSH`` leaves the world fully healthy; infections then come only
    from manual painting.

    Args:
        policy: Focus policy to apply.
        config: Rules in force (infection duration).
        rng: Seeded random generator.
        radius: Sampling half-width for ``RANDOM``.
        count_range: Seed count range for ``RANDOM``.

    Returns:
        The newly seeded world.
    """
    world = SparseWorld()
    if policy is FocusPolicy.CENTER:
        seed_center(world, config)
    elif policy is FocusPolicy.RANDOM:
        seed_random(world, config, rng, radius=radius, count_range=count_range)
    logger.info("Seeded world with %s focus: %d infected", policy.value, len(world))
    return world
