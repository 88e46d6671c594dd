"""Sliding-tile puzzle engine."""

from tileboard.engine.gameevents import EventBus
from tileboard.engine.gameplay import GameSession, PuzzleBoard
from tileboard.models import (
    BoardPhase,
    Direction,
    InvalidCell,
    InvalidDimension,
    InvalidState,
    PuzzleError,
)
from tileboard.settings import PuzzleSettings

__all__ = [
    "BoardPhase",
    "Direction",
    "EventBus",
    "GameSession",
    "InvalidCell",
    "InvalidDimension",
    "InvalidState",
    "PuzzleBoard",
    "PuzzleError",
    "PuzzleSettings",
]
