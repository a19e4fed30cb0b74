"""Smoke tests for the UI module and CLI (no display required)."""

from __future__ import annotations

from pathlib import Path

from epigrid.simulation.config import FocusPolicy
from epigrid.ui.pygame_client import PygameRenderer
from epigrid.world.neighbourhood import Neighbourhood


def test_pygame_renderer_importable() -> None:
    """PygameRenderer class is importable without initialising pygame."""
    assert PygameRenderer is not None


def test_main_module_importable() -> None:
    """The __main__ module is importable and exposes main()."""
    from epigrid.__main__ import main

    assert callable(main)


def test_cli_overrides_config(tmp_path: Path) -> None:
    """Command-line flags take precedence over the YAML file."""
    from epigrid.__main__ import build_parser, load_settings

    cfg = tmp_path / "run.yaml"
    cfg.write_text("seed: 1\ninitial_focus: center\n")
    args = build_parser().parse_args(
        [
            "-c",
            str(cfg),
            "--seed",
            "42",
            "--focus",
            "brush",
            "--neighbourhood",
            "von_neumann",
        ],
    )
    settings = load_settings(args)
    assert settings.seed == 42
    assert settings.initial_focus is FocusPolicy.BRUSH
    assert settings.rules.neighbourhood is Neighbourhood.VON_NEUMANN
