"""Shared fixtures for the epigrid test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from epigrid.simulation.config import SessionConfig, SimulationConfig
from epigrid.simulation.engine import SimulationEngine
from epigrid.world.cell import CellState, Coordinate
from epigrid.world.world import SparseWorld


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def engine(rng: Generator) -> SimulationEngine:
    """An engine drawing from the seeded ``rng`` fixture."""
    return SimulationEngine(rng=rng)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default epidemic rules (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def session_config() -> SessionConfig:
    """Seeded session settings with centre focus."""
    return SessionConfig(seed=7)


@pytest.fixture
def outbreak_world() -> SparseWorld:
    """A small world holding one cell of every non-healthy state."""
    world = SparseWorld()
    world.paint(Coordinate(0, 0), CellState.INFECTED, 5)
    world.paint(Coordinate(3, 0), CellState.DEAD)
    world.paint(Coordinate(-4, 2), CellState.RECOVERED)
    return world
