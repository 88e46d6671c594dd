#!/usr/bin/env python3
"""Puzzle OS — sliding-tile puzzle.

Usage::

    python main.py                  # Rich terminal, 4×4
    python main.py -f vanilla -s 3  # plain terminal, 3×3
    python main.py -f pygame        # Pygame GUI
    python main.py -f pyqt --seed 7 # PyQt GUI, reproducible shuffles
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from types import ModuleType
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tileboard.models.errors import SettingsError  # noqa: E402
from tileboard.settings import (  # noqa: E402
    DEFAULT_RESHUFFLE_DELAY,
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    PuzzleSettings,
)

logger = logging.getLogger("puzzle_os")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "tileboard_ui.cli.vanilla.app",
    Frontend.rich: "tileboard_ui.cli.rich.app",
    Frontend.pygame: "tileboard_ui.gui.pygame.app",
    Frontend.pyqt: "tileboard_ui.gui.pyqt.app",
}


def _load_frontend(frontend: Frontend) -> ModuleType:
    """Import a frontend lazily so GUI toolkits stay optional."""
    return importlib.import_module(_RUNNERS[frontend])


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="PUZZLE_OS_SIZE",
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="PUZZLE_OS_SEED",
        help="Seed the shuffle for reproducible boards.",
    ),
    shuffle_steps: Optional[int] = typer.Option(
        None, "--shuffle-steps",
        min=0,
        envvar="PUZZLE_OS_SHUFFLE_STEPS",
        help="Random moves per shuffle (default: size cubed).",
    ),
    reshuffle_delay: float = typer.Option(
        DEFAULT_RESHUFFLE_DELAY, "--reshuffle-delay",
        min=0.0,
        envvar="PUZZLE_OS_RESHUFFLE_DELAY",
        help="Seconds to wait after a solve before re-scrambling.",
    ),
    auto_reshuffle: bool = typer.Option(
        True, "--auto-reshuffle/--no-auto-reshuffle",
        help="Start the next round automatically after a solve.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        envvar="PUZZLE_OS_LOG_LEVEL",
        help="Logging verbosity.",
    ),
) -> None:
    """Puzzle OS sliding-tile puzzle."""
    _configure_logging(log_level)
    try:
        settings = PuzzleSettings(
            size=size,
            shuffle_steps=shuffle_steps,
            reshuffle_delay=reshuffle_delay,
            auto_reshuffle=auto_reshuffle,
            seed=seed,
        ).validate()
    except SettingsError as exc:
        raise typer.BadParameter(str(exc)) from exc

    logger.info("launching %s frontend with %s", frontend.value, settings)
    _load_frontend(frontend).run(settings)


if __name__ == "__main__":
    app()
