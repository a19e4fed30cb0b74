"""Tests for epigrid.simulation.seeding — initial-focus policies."""

from numpy.random import Generator

from epigrid.simulation.config import FocusPolicy, SimulationConfig
from epigrid.simulation.seeding import seed_random, seed_world
from epigrid.world.cell import CellState, Coordinate
from epigrid.world.world import SparseWorld


class TestSeeding:
    """Tests for centre, random and brush seeding."""

    def test_center(self, rng: Generator) -> None:
        cfg = SimulationConfig(infection_duration=6)
        world = seed_world(FocusPolicy.CENTER, cfg, rng)
        assert world.active_coordinates() == {Coordinate(0, 0)}
        assert world.cell_at(Coordinate(0, 0)) is CellState.INFECTED
        assert world.timer_at(Coordinate(0, 0)) == 6

    def test_brush_starts_empty(self, rng: Generator) -> None:
        world = seed_world(FocusPolicy.BRUSH, SimulationConfig(), rng)
        assert len(world) == 0

    def test_brush_consumes_no_randomness(self, rng: Generator) -> None:
        before = rng.bit_generator.state
        seed_world(FocusPolicy.BRUSH, SimulationConfig(), rng)
        assert rng.bit_generator.state == before

    def test_random_count_and_extent(self, rng: Generator) -> None:
        cfg = SimulationConfig(infection_duration=4)
        for _ in range(50):
            world = seed_world(FocusPolicy.RANDOM, cfg, rng, radius=30)
            assert 1 <= len(world) < 15
            for coord in world.active_coordinates():
                assert -30 <= coord.x < 30
                assert -30 <= coord.y < 30
                assert world.cell_at(coord) is CellState.INFECTED
                assert world.timer_at(coord) == 4

    def test_random_reaches_at_least_five_without_collisions(
        self,
        rng: Generator,
    ) -> None:
        # A huge radius makes duplicate draws practically impossible
        sizes = {
            len(seed_world(FocusPolicy.RANDOM, SimulationConfig(), rng, radius=10**9))
            for _ in range(200)
        }
        assert min(sizes) == 5
        assert max(sizes) == 14

    def test_random_duplicates_overwrite(self, rng: Generator) -> None:
        world = SparseWorld()
        seed_random(world, SimulationConfig(), rng, radius=1, count_range=(10, 11))
        # Only four cells exist in [-1, 1) x [-1, 1)
        assert len(world) <= 4

