"""Entry point for ``python -m epigrid``.

Loads the default YAML config, applies command-line overrides, builds
the simulation and opens a Pygame window to watch the outbreak spread.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib

from epigrid.simulation.config import FocusPolicy, SessionConfig
from epigrid.simulation.session import Simulation
from epigrid.ui.pygame_client import PygameRenderer
from epigrid.world.neighbourhood import Neighbourhood

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="epigrid",
        description="epigrid - cellular-automaton epidemic simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed (overrides the config file)",
    )
    parser.add_argument(
        "--focus",
        choices=[p.value for p in FocusPolicy],
        default=None,
        help="Initial focus policy (overrides the config file)",
    )
    parser.add_argument(
        "--neighbourhood",
        choices=[n.value for n in Neighbourhood],
        default=None,
        help="Neighbourhood topology (overrides the config file)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def load_settings(args: argparse.Namespace) -> SessionConfig:
    """Read the config file and fold in command-line overrides."""
    settings = SessionConfig.from_yaml(args.config)
    if args.seed is not None:
        settings.seed = args.seed
    if args.focus is not None:
        settings.initial_focus = FocusPolicy.from_name(args.focus)
    if args.neighbourhood is not None:
        settings.rules = dataclasses.replace(
            settings.rules,
            neighbourhood=Neighbourhood.from_name(args.neighbourhood),
        )
    return settings


def main() -> None:
    """Parse CLI args, create the simulation, launch renderer."""
    args = build_parser().parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    simulation = Simulation(settings=load_settings(args))

    renderer = PygameRenderer(simulation)
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
