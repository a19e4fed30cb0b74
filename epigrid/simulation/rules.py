"""Per-cell transition rules for one generation.

These functions read a single cell of the *previous* generation and
decide what it becomes.  They never touch the world they read from; the
engine collects their results into a fresh world.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from epigrid.world.cell import CellState, Coordinate

if TYPE_CHECKING:
    from numpy.random import Generator

    from epigrid.simulation.config import SimulationConfig
    from epigrid.world.world import SparseWorld


def infection_probability(infection_chance: float, infected_neighbours: int) -> float:
    """Return the chance a healthy cell catches the infection this tick.

    Each infected neighbour is an independent exposure at
    ``infection_chance``, so the cell escapes only if every exposure
    fails: ``1 - (1 - c) ** k``.

    Args:
        infection_chance: Per-neighbour transmission probability.
        infected_neighbours: Number of infected neighbours ``k``.

    Returns:
        Probability in ``[0, 1]``; exactly 0 when ``k == 0``.
    """
    if infected_neighbours <= 0:
        return 0.0
    return 1.0 - (1.0 - infection_chance) ** infected_neighbours


def count_infected_neighbours(
    world: SparseWorld,
    coord: Coordinate,
    config: SimulationConfig,
) -> int:
    """Count infected cells adjacent to ``coord`` under the configured topology."""
    state_of = world.state_of
    return sum(
        1
        for n in config.neighbourhood.neighbours(coord)
        if state_of.get(n) is CellState.INFECTED
    )


def transition(
    world: SparseWorld,
    coord: Coordinate,
    config: SimulationConfig,
    rng: Generator,
) -> tuple[CellState, int]:
    """Compute the next state and timer of one cell.

    Healthy cells with at least one infected neighbour draw once against
    ``infection_probability``; healthy cells with none draw nothing.
    Infected cells count down and, on reaching zero, draw once against
    ``death_chance``.  Dead and recovered cells are left as they are.

    Args:
        world: Previous generation (read only).
        coord: Cell to evaluate.
        config: Rules in force for this tick.
        rng: Shared random stream.

    Returns:
        ``(state, timer)`` for the next generation.
    """
    state = world.cell_at(coord)
    timer = world.timer_at(coord)

    if state is CellState.HEALTHY:
        k = count_infected_neighbours(world, coord, config)
        if k > 0 and rng.random() < infection_probability(config.infection_chance, k):
            return CellState.INFECTED, config.infection_duration
        return CellState.HEALTHY, 0

    if state is CellState.INFECTED:
        timer -= 1
        if timer <= 0:
            if rng.random() < config.death_chance:
                return CellState.DEAD, 0
            return CellState.RECOVERED, 0
        return CellState.INFECTED, timer

    # Dead and recovered are terminal
    return state, timer
