"""The sliding-tile state machine."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from tileboard.engine.gameevents import EventBus
from tileboard.engine.gamesolver.solvability import is_permutation, is_solvable
from tileboard.models.board import (
    DIRECTION_ORDER,
    BoardPhase,
    Direction,
    blank_tile,
    neighbor,
    solved_tiles,
)
from tileboard.models.errors import InvalidCell, InvalidDimension, InvalidState, PuzzleError
from tileboard.models.events import (
    MoveApplied,
    PlayFeedback,
    PuzzleSolved,
    ShuffleCompleted,
    ShuffleStarted,
)

logger = logging.getLogger(__name__)


class PuzzleBoard:
    """An ``size``×``size`` sliding puzzle.

    Cells are row-major indices ``0..size*size-1``.  Tile identities name
    a tile's home cell; identity ``size*size - 1`` is the blank.  The
    board starts solved and in the ``IDLE`` phase.

    User input goes through :meth:`attempt_move`.  Notifications are
    published on :attr:`events`.
    """

    def __init__(
        self,
        size: int,
        *,
        rng: random.Random | None = None,
        events: EventBus | None = None,
    ) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 2:
            raise InvalidDimension(size)
        self.size = size
        self.events = events if events is not None else EventBus()
        self._rng = rng if rng is not None else random.Random()
        self._tiles: list[int] = list(solved_tiles(size))
        self._blank = self.cell_count - 1
        self._moves = 0
        self._shuffling = False
        self._phase = BoardPhase.IDLE

    @classmethod
    def from_tiles(
        cls,
        size: int,
        tiles: Sequence[int],
        *,
        require_solvable: bool = False,
        rng: random.Random | None = None,
        events: EventBus | None = None,
    ) -> PuzzleBoard:
        """Create a board at an arbitrary arrangement.

        Example::

            PuzzleBoard.from_tiles(2, [0, 3, 2, 1])
        """
        board = cls(size, rng=rng, events=events)
        tiles = list(tiles)
        if not is_permutation(tiles, size):
            raise InvalidState(
                f"Expected a permutation of 0..{size * size - 1} for a "
                f"{size}×{size} board, got {tiles}."
            )
        if require_solvable and not is_solvable(tiles, size):
            raise InvalidState(f"Arrangement {tiles} cannot be reached by legal moves.")
        board._tiles = tiles
        board._blank = tiles.index(blank_tile(size))
        return board

    # -- queries --------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def state(self) -> tuple[int, ...]:
        return tuple(self._tiles)

    def current_state(self) -> tuple[int, ...]:
        return self.state

    @property
    def blank_cell(self) -> int:
        return self._blank

    @property
    def move_count(self) -> int:
        return self._moves

    @property
    def is_shuffling(self) -> bool:
        return self._shuffling

    @property
    def phase(self) -> BoardPhase:
        return self._phase

    def tile_at(self, cell: int) -> int:
        self._check_cell(cell)
        return self._tiles[cell]

    def is_blank(self, cell: int) -> bool:
        return self.tile_at(cell) == blank_tile(self.size)

    def is_tile_correct(self, cell: int) -> bool:
        """Check if the tile in *cell* is in its home position."""
        return self.tile_at(cell) == cell

    def is_solved(self) -> bool:
        return all(tile == cell for cell, tile in enumerate(self._tiles))

    def rows(self) -> list[list[int]]:
        """Return the tiles as a list of rows (a copy)."""
        n = self.size
        return [self._tiles[r * n : (r + 1) * n] for r in range(n)]

    def movable_cells(self) -> list[int]:
        """Cells whose tile can slide into the blank right now."""
        return [
            cell
            for cell in range(self.cell_count)
            if self._legal_direction(cell) is not None
        ]

    def cell_for_slide(self, direction: Direction) -> int | None:
        """Return the cell whose tile would travel in *direction*, if any.

        E.g. ``Direction.UP`` names the tile directly **below** the blank.
        """
        opposite = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }[direction]
        return neighbor(self._blank, opposite, self.size)

    # -- movement -------------------------------------------------------------

    def attempt_move(self, cell: int) -> bool:
        """Slide the tile at *cell* into the blank if they are adjacent.

        Returns True if a move was applied.  A non-adjacent cell (or the
        blank itself) is a normal miss and returns False.
        """
        self._check_cell(cell)
        direction = self._legal_direction(cell)
        if direction is None:
            logger.debug("no legal move from cell %d (blank at %d)", cell, self._blank)
            return False

        from_cell, to_cell = cell, self._blank
        self._swap(cell)
        if self._shuffling:
            return True

        self._moves += 1
        logger.debug(
            "move %d: tile %d %s from cell %d to %d",
            self._moves, self._tiles[to_cell], direction.value, from_cell, to_cell,
        )
        if self._phase is BoardPhase.SOLVED:
            self._phase = BoardPhase.IDLE
        solved = self.is_solved()
        if solved:
            self._phase = BoardPhase.SOLVED

        self.events.publish(MoveApplied(self._moves, from_cell, to_cell))
        self.events.publish(PlayFeedback())
        if solved:
            logger.info("puzzle solved in %d moves", self._moves)
            self.events.publish(PuzzleSolved())
        return True

    def shuffle(self, steps: int | None = None) -> None:
        """Scramble the board with *steps* random legal moves.

        The walk never moves the blank straight back to the cell it just
        left, and because only legal moves are applied the result is
        always solvable.  ``steps`` defaults to ``size ** 3``.
        """
        if steps is None:
            steps = self.size**3
        if isinstance(steps, bool) or not isinstance(steps, int):
            raise TypeError(f"Shuffle steps must be an int, got {steps!r}.")
        if steps < 0:
            raise ValueError(f"Shuffle steps must be >= 0, got {steps}.")
        if self._shuffling:
            raise PuzzleError("A shuffle is already in progress.")

        self._shuffling = True
        self._phase = BoardPhase.SHUFFLING
        self._moves = 0
        try:
            self.events.publish(ShuffleStarted())
            previous_blank = self._blank
            applied = draws = 0
            while applied < steps:
                candidate = self._rng.randrange(self.cell_count)
                draws += 1
                if candidate == previous_blank:
                    continue
                blank_before = self._blank
                if self.attempt_move(candidate):
                    previous_blank = blank_before
                    applied += 1
        finally:
            self._shuffling = False
            self._phase = BoardPhase.IDLE

        logger.debug("shuffle applied %d moves from %d draws", steps, draws)
        self.events.publish(ShuffleCompleted())

    # -- helpers --------------------------------------------------------------

    def _check_cell(self, cell: int) -> None:
        if (
            isinstance(cell, bool)
            or not isinstance(cell, int)
            or not 0 <= cell < self.cell_count
        ):
            raise InvalidCell(cell, self.cell_count)

    def _legal_direction(self, cell: int) -> Direction | None:
        for direction in DIRECTION_ORDER:
            if neighbor(cell, direction, self.size) == self._blank:
                return direction
        return None

    def _swap(self, cell: int) -> None:
        blank = self._blank
        self._tiles[blank], self._tiles[cell] = self._tiles[cell], self._tiles[blank]
        self._blank = cell

    def __repr__(self) -> str:
        return (
            f"PuzzleBoard(size={self.size}, state={self.state}, "
            f"moves={self._moves}, phase={self._phase.value})"
        )
