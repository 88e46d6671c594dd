"""Helpers for producing scrambled rounds."""

from __future__ import annotations

import logging

from tileboard.engine.gameplay.board import PuzzleBoard

logger = logging.getLogger(__name__)

MAX_SCRAMBLE_ATTEMPTS = 100


def default_shuffle_steps(size: int) -> int:
    """Number of random moves used to scramble a *size* board."""
    return size**3


def scramble(board: PuzzleBoard, steps: int | None = None) -> int:
    """Shuffle *board* until it is no longer solved.

    A walk can land back on the goal; on a 2×2 board the blank is forced
    round its 4-cycle, so any multiple of 12 steps always does.  Each
    retry therefore walks one step further than the last.  Returns the
    number of shuffles performed.  With ``steps == 0`` a single shuffle
    is done and the board is left as it is.
    """
    if steps is None:
        steps = default_shuffle_steps(board.size)

    for attempt in range(1, MAX_SCRAMBLE_ATTEMPTS + 1):
        board.shuffle(steps + attempt - 1)
        if steps == 0 or not board.is_solved():
            return attempt
        logger.debug("shuffle %d ended solved, shuffling again", attempt)

    raise RuntimeError(
        f"Board still solved after {MAX_SCRAMBLE_ATTEMPTS} shuffles of {steps}+ steps."
    )
