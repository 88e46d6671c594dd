"""Round timer driven by board notifications."""

from __future__ import annotations

import time
from typing import Callable

from tileboard.engine.gameevents import EventBus
from tileboard.models.events import PuzzleSolved, ShuffleCompleted, ShuffleStarted


class GameClock:
    """Measures how long the current round has been played.

    Idle until the first shuffle completes, then runs until the puzzle
    is solved.  A new shuffle stops and resets it.
    """

    def __init__(
        self, events: EventBus, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self._clock = clock
        self._start_time: float = 0.0
        self._elapsed_banked: float = 0.0
        self._running: bool = False
        events.subscribe(ShuffleStarted, self._on_shuffle_started)
        events.subscribe(ShuffleCompleted, self._on_shuffle_completed)
        events.subscribe(PuzzleSolved, self._on_solved)

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    @property
    def running(self) -> bool:
        return self._running

    def reset(self) -> None:
        self._elapsed_banked = 0.0
        self._running = False

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    # -- event hooks ----------------------------------------------------------

    def _on_shuffle_started(self, _event: ShuffleStarted) -> None:
        self.reset()

    def _on_shuffle_completed(self, _event: ShuffleCompleted) -> None:
        self.reset()
        self.resume()

    def _on_solved(self, _event: PuzzleSolved) -> None:
        self.pause()
