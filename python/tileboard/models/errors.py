"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by ``tileboard``."""


class InvalidDimension(PuzzleError, ValueError):
    """The grid dimension is not an integer >= 2."""

    def __init__(self, size: object) -> None:
        super().__init__(f"Grid dimension must be an integer >= 2, got {size!r}.")
        self.size = size


class InvalidCell(PuzzleError, IndexError):
    """A cell index outside ``[0, size*size)`` was supplied."""

    def __init__(self, cell: object, cell_count: int) -> None:
        super().__init__(
            f"Cell {cell!r} is outside the board (valid: 0..{cell_count - 1})."
        )
        self.cell = cell
        self.cell_count = cell_count


class InvalidState(PuzzleError, ValueError):
    """A tile sequence is not a usable board state."""


class SettingsError(PuzzleError, ValueError):
    """A configuration value is out of range."""
