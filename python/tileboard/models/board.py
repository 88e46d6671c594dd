"""Grid primitives shared by the board engine and the frontends."""

from __future__ import annotations

import enum
from enum import StrEnum


class Direction(StrEnum):
    """Direction a *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Fixed order in which a picked cell is tested against the blank.
DIRECTION_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class BoardPhase(enum.Enum):
    IDLE = "idle"
    SHUFFLING = "shuffling"
    SOLVED = "solved"


# -- index helpers -------------------------------------------------------------


def blank_tile(size: int) -> int:
    """Return the tile identity reserved for the blank on a *size* board."""
    return size * size - 1


def solved_tiles(size: int) -> tuple[int, ...]:
    """Return the goal permutation: every tile sits in its home cell."""
    return tuple(range(size * size))


def to_row_col(cell: int, size: int) -> tuple[int, int]:
    return divmod(cell, size)


def to_cell(row: int, col: int, size: int) -> int:
    return row * size + col


def neighbor(cell: int, direction: Direction, size: int) -> int | None:
    """Return the cell a tile at *cell* would land on moving in *direction*.

    Returns ``None`` when the move would leave the grid.  Column checks
    are explicit so ``cell - 1`` never lands in the previous row's last
    column (and ``cell + 1`` never in the next row's first).
    """
    if direction is Direction.UP:
        target = cell - size
        return target if target >= 0 else None
    if direction is Direction.DOWN:
        target = cell + size
        return target if target < size * size else None
    if direction is Direction.LEFT:
        return cell - 1 if cell % size != 0 else None
    return cell + 1 if cell % size != size - 1 else None
