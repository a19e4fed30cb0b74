"""Config — epidemic rules and session settings loaded from YAML.

``SimulationConfig`` is the per-tick snapshot of tunable rules handed to
the engine.  ``SessionConfig`` wraps it with everything needed to start
an interactive run (seed, focus policy, viewport and speed).  Invalid
values are rejected here, at the boundary, so the stepping code can
assume a well-formed config.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from epigrid.world.neighbourhood import Neighbourhood

logger = logging.getLogger(__name__)


class FocusPolicy(Enum):
    """How the world is seeded with infections on reset."""

    CENTER = "center"
    RANDOM = "random"
    BRUSH = "brush"

    @classmethod
    def from_name(cls, name: str) -> FocusPolicy:
        """Look up a policy by its config name (case-insensitive).

        Raises:
            ValueError: If the name matches no policy.
        """
        key = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        msg = f"unknown focus policy {name!r}; expected one of " + ", ".join(
            m.value for m in cls
        )
        raise ValueError(msg)


def _check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        msg = f"{name} must lie in [0, 1], got {value!r}"
        raise ValueError(msg)


@dataclass(frozen=True)
class SimulationConfig:
    """Epidemic rules in force for one tick.

    Frozen: live UI changes build a new instance between ticks via
    ``replace`` instead of editing the one the engine is using.

    Attributes:
        infection_chance: Per infected neighbour probability of passing
            the infection on during one tick.
        infection_duration: Ticks an infection lasts before it resolves.
        death_chance: Probability that a resolving infection kills the
            cell rather than letting it recover.
        neighbourhood: Which cells count as neighbours.

    Raises:
        ValueError: If a chance is outside ``[0, 1]`` or the duration is
            negative.
    """

    infection_chance: float = 0.3
    infection_duration: int = 10
    death_chance: float = 0.5
    neighbourhood: Neighbourhood = Neighbourhood.MOORE

    def __post_init__(self) -> None:
        """Validate ranges; out-of-range values are rejected, not clamped."""
        _check_probability("infection_chance", self.infection_chance)
        _check_probability("death_chance", self.death_chance)
        if self.infection_duration < 0:
            msg = f"infection_duration must be >= 0, got {self.infection_duration!r}"
            raise ValueError(msg)
        if not isinstance(self.neighbourhood, Neighbourhood):
            object.__setattr__(
                self,
                "neighbourhood",
                Neighbourhood.from_name(str(self.neighbourhood)),
            )

    def replace(self, **changes: Any) -> SimulationConfig:
        """Return a copy with ``changes`` applied (and validated)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SimulationConfig:
        """Build a config from a plain mapping, using defaults for gaps.

        Args:
            data: Keys as in the YAML ``rules`` section.

        Returns:
            A validated SimulationConfig.
        """
        return cls(
            infection_chance=float(data.get("infection_chance", cls.infection_chance)),
            infection_duration=int(
                data.get("infection_duration", cls.infection_duration),
            ),
            death_chance=float(data.get("death_chance", cls.death_chance)),
            neighbourhood=Neighbourhood.from_name(
                data.get("neighbourhood", cls.neighbourhood.value),
            ),
        )


@dataclass
class SessionConfig:
    """Settings for an interactive run.

    Attributes:
        seed: RNG seed for deterministic replay (None for OS entropy).
        initial_focus: Seeding policy applied on every reset.
        seed_radius: Random seeding samples ``x`` and ``y`` from
            ``[-seed_radius, seed_radius)``.  Independent of the viewport.
        random_seed_count: Half-open ``(low, high)`` range for the number
            of random seeds.
        visible_cols: Viewport width in cells.
        visible_rows: Viewport height in cells.
        cell_size: Pixel size of one cell.
        ticks_per_second: Simulation speed.
        rules: Initial epidemic rules.
    """

    seed: int | None = None
    initial_focus: FocusPolicy = FocusPolicy.CENTER
    seed_radius: int = 70
    random_seed_count: tuple[int, int] = (5, 15)
    visible_cols: int = 70
    visible_rows: int = 70
    cell_size: int = 12
    ticks_per_second: float = 10.0
    rules: SimulationConfig = field(default_factory=SimulationConfig)

    def __post_init__(self) -> None:
        """Validate the viewport and seeding parameters."""
        if self.seed_radius <= 0:
            msg = f"seed_radius must be > 0, got {self.seed_radius!r}"
            raise ValueError(msg)
        low, high = self.random_seed_count
        if not 0 <= low < high:
            msg = (
                "random_seed_count must satisfy 0 <= low < high, "
                f"got {self.random_seed_count!r}"
            )
            raise ValueError(msg)
        if self.cell_size <= 0 or self.visible_cols <= 0 or self.visible_rows <= 0:
            msg = "cell_size, visible_cols and visible_rows must all be > 0"
            raise ValueError(msg)
        if self.ticks_per_second <= 0:
            msg = f"ticks_per_second must be > 0, got {self.ticks_per_second!r}"
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SessionConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SessionConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a value is out of range or names an unknown
                policy or neighbourhood.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        logger.info("Loaded config from %s", path)
        return cls(
            seed=data.get("seed"),
            initial_focus=FocusPolicy.from_name(
                data.get("initial_focus", cls.initial_focus.value),
            ),
            seed_radius=int(data.get("seed_radius", cls.seed_radius)),
            random_seed_count=tuple(
                data.get("random_seed_count", cls.random_seed_count),
            ),
            visible_cols=int(data.get("visible_cols", cls.visible_cols)),
            visible_rows=int(data.get("visible_rows", cls.visible_rows)),
            cell_size=int(data.get("cell_size", cls.cell_size)),
            ticks_per_second=float(
                data.get("ticks_per_second", cls.ticks_per_second),
            ),
            rules=SimulationConfig.from_dict(data.get("rules") or {}),
        )
