"""Round controller that sits between a frontend and the board."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable

from tileboard.engine.gamegenerator import scramble
from tileboard.engine.gameplay.board import PuzzleBoard
from tileboard.engine.gamestate import GameClock
from tileboard.models.board import BoardPhase, Direction
from tileboard.models.events import PuzzleSolved
from tileboard.settings import PuzzleSettings

logger = logging.getLogger(__name__)


class GameSession:
    """Orchestrates rounds of play on a single board.

    Frontends call :meth:`start` once, then feed input through
    :meth:`select_cell` / :meth:`slide` and call :meth:`tick` from
    their main loop so a solved board gets re-scrambled after
    ``settings.reshuffle_delay`` seconds.
    """

    def __init__(
        self,
        settings: PuzzleSettings | None = None,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = (settings or PuzzleSettings()).validate()
        self._clock = clock
        self.board = PuzzleBoard(
            self.settings.size,
            rng=rng if rng is not None else self.settings.make_rng(),
        )
        self.events = self.board.events
        self.timer = GameClock(self.events, clock)
        self.round_number = 0
        self._solved_at: float | None = None
        self.events.subscribe(PuzzleSolved, self._on_solved)

    # -- rounds ---------------------------------------------------------------

    def start(self) -> None:
        self.new_round()

    def new_round(self) -> None:
        """Scramble the board and begin a new round."""
        self._solved_at = None
        attempts = scramble(self.board, self.settings.shuffle_steps)
        self.round_number += 1
        logger.info(
            "round %d ready (%d×%d, %d shuffle pass(es))",
            self.round_number, self.board.size, self.board.size, attempts,
        )

    def tick(self) -> bool:
        """Start the next round if a solved board has waited long enough.

        Returns True if a new round was started.
        """
        solved_at = self._solved_at
        if solved_at is None or not self.settings.auto_reshuffle:
            return False
        if self._clock() - solved_at < self.settings.reshuffle_delay:
            return False
        self.new_round()
        return True

    # -- input ----------------------------------------------------------------

    @property
    def pending_reshuffle(self) -> bool:
        return self._solved_at is not None

    @property
    def accepting_input(self) -> bool:
        return not self.board.is_shuffling and not self.pending_reshuffle

    def select_cell(self, cell: int) -> bool:
        """Try to move the tile at *cell*.  Ignored between rounds."""
        if not self.accepting_input:
            logger.debug("input on cell %d ignored between rounds", cell)
            return False
        return self.board.attempt_move(cell)

    def slide(self, direction: Direction) -> bool:
        """Slide whichever tile can travel in *direction* into the blank."""
        cell = self.board.cell_for_slide(direction)
        if cell is None:
            return False
        return self.select_cell(cell)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.phase is BoardPhase.SOLVED

    @property
    def moves(self) -> int:
        return self.board.move_count

    @property
    def elapsed_time(self) -> float:
        return self.timer.elapsed_time

    # -- event hooks ----------------------------------------------------------

    def _on_solved(self, _event: PuzzleSolved) -> None:
        self._solved_at = self._clock()
