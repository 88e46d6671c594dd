from tileboard.models.board import DIRECTION_ORDER, BoardPhase, Direction
from tileboard.models.errors import (
    InvalidCell,
    InvalidDimension,
    InvalidState,
    PuzzleError,
    SettingsError,
)
from tileboard.models.events import (
    BoardEvent,
    MoveApplied,
    PlayFeedback,
    PuzzleSolved,
    ShuffleCompleted,
    ShuffleStarted,
)

__all__ = [
    "DIRECTION_ORDER",
    "BoardEvent",
    "BoardPhase",
    "Direction",
    "InvalidCell",
    "InvalidDimension",
    "InvalidState",
    "MoveApplied",
    "PlayFeedback",
    "PuzzleError",
    "PuzzleSolved",
    "SettingsError",
    "ShuffleCompleted",
    "ShuffleStarted",
]
