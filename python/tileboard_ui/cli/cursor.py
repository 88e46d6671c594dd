"""Keyboard cursor that turns arrow presses into a cell index."""

from __future__ import annotations

from tileboard.models.board import Direction

_STEPS: dict[str, tuple[int, int]] = {
    "cursor_up": (-1, 0),
    "cursor_down": (1, 0),
    "cursor_left": (0, -1),
    "cursor_right": (0, 1),
}

SLIDE_DIRECTIONS: dict[str, Direction] = {
    "slide_up": Direction.UP,
    "slide_down": Direction.DOWN,
    "slide_left": Direction.LEFT,
    "slide_right": Direction.RIGHT,
}


class CellCursor:
    """Tracks the highlighted cell; clamps at the board edges."""

    def __init__(self, size: int, cell: int = 0) -> None:
        self.size = size
        self.row, self.col = divmod(cell, size)

    @property
    def cell(self) -> int:
        return self.row * self.size + self.col

    def handle(self, action: str) -> bool:
        """Apply a ``cursor_*`` action.  Returns False for other actions."""
        step = _STEPS.get(action)
        if step is None:
            return False
        dr, dc = step
        self.row = min(max(self.row + dr, 0), self.size - 1)
        self.col = min(max(self.col + dc, 0), self.size - 1)
        return True
