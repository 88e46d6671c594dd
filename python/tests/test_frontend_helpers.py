"""Display-free pieces of the frontends: text formatting and the cell cursor."""

from __future__ import annotations

import pytest

from tileboard.models.board import Direction
from tileboard_ui.cli.cursor import SLIDE_DIRECTIONS, CellCursor
from tileboard_ui.cli.input_handler import _resolve
from tileboard_ui.formatting import format_moves, format_time, tile_label


@pytest.mark.parametrize(
    ("seconds", "text"),
    [(0, "Time: 00:00"), (59.9, "Time: 00:59"), (61, "Time: 01:01"), (3600, "Time: 60:00")],
)
def test_format_time(seconds: float, text: str) -> None:
    assert format_time(seconds) == text


def test_format_moves_and_labels() -> None:
    assert format_moves(12) == "Moves: 12"
    assert tile_label(0) == "1"
    assert tile_label(14) == "15"


def test_cursor_moves_and_clamps() -> None:
    cursor = CellCursor(3, cell=4)

    assert cursor.handle("cursor_up")
    assert cursor.cell == 1
    assert cursor.handle("cursor_up")
    assert cursor.cell == 1
    cursor.handle("cursor_right")
    cursor.handle("cursor_right")
    assert cursor.cell == 2
    cursor.handle("cursor_down")
    cursor.handle("cursor_left")
    assert cursor.cell == 4


def test_cursor_ignores_other_actions() -> None:
    cursor = CellCursor(4, cell=15)

    assert cursor.handle("select") is False
    assert cursor.cell == 15


def test_key_mapping() -> None:
    assert _resolve("W") == "slide_up"
    assert _resolve(" ") == "select"
    assert _resolve("r") == "shuffle"
    assert _resolve("x") == ""
    assert SLIDE_DIRECTIONS[_resolve("d")] is Direction.RIGHT
