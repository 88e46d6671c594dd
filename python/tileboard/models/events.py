"""Notifications published by a ``PuzzleBoard``.

Each event carries only plain data a presentation layer needs to
redraw or announce something; none of them hold references to the
board itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class MoveApplied:
    """A user move was applied.  ``from_cell`` is where the tile was."""

    move_count: int
    from_cell: int
    to_cell: int


@dataclass(frozen=True, slots=True)
class PlayFeedback:
    """Cue for audio/haptics after a user move."""


@dataclass(frozen=True, slots=True)
class PuzzleSolved:
    pass


@dataclass(frozen=True, slots=True)
class ShuffleStarted:
    pass


@dataclass(frozen=True, slots=True)
class ShuffleCompleted:
    pass


BoardEvent = Union[MoveApplied, PlayFeedback, PuzzleSolved, ShuffleStarted, ShuffleCompleted]
