"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import sys

from tileboard.engine.gameplay import GameSession
from tileboard.models.events import PlayFeedback, PuzzleSolved, ShuffleCompleted
from tileboard.settings import PuzzleSettings
from tileboard_ui.cli.cursor import SLIDE_DIRECTIONS, CellCursor
from tileboard_ui.cli.input_handler import get_key_timeout
from tileboard_ui.formatting import format_moves, format_time, tile_label


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_REV = "\033[7m"     # reverse video (cursor)
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _stats_line(session: GameSession) -> str:
    """Return the formatted Moves + Time string (no newline)."""
    return (
        f"  {_Y}{format_moves(session.moves)}{_R}  |  "
        f"{_Y}{format_time(session.elapsed_time)}{_R}"
    )


# -- board rendering ----------------------------------------------------------


def _render_board(session: GameSession, cursor: CellCursor) -> str:
    """Return an ANSI-coloured text representation of the board."""
    board = session.board
    width = len(str(board.cell_count))
    cell_w = width + 2
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, tile in enumerate(row):
            cell = r * board.size + c
            if board.is_blank(cell):
                text, colour = f" {'·':>{width}} ", _DIM
            elif board.is_tile_correct(cell):
                text, colour = f" {tile_label(tile):>{width}} ", _G
            else:
                text, colour = f" {tile_label(tile):>{width}} ", ""
            if cell == cursor.cell:
                colour += _REV
            cells.append(f"{colour}{text}{_R}" if colour else text)
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _show_game(session: GameSession, cursor: CellCursor, status: str = "") -> None:
    """Draw the full game screen.

    The stats line is printed last, with no trailing newline, so
    ``_update_time`` can overwrite it in-place using ``\\r\\033[K``.
    """
    _clear()
    size = session.board.size
    print(f"  {_C}=== Puzzle OS ({size}×{size}) ==={_R}")
    print()
    print(_render_board(session, cursor))
    print()
    print(
        f"  {_C}Arrows{_R}: cursor  |  {_C}Enter{_R}: move tile  |  "
        f"{_C}WASD{_R}: slide  |  {_C}R{_R}: shuffle  |  {_C}Q{_R}: quit"
    )
    if status:
        print(f"  {status}")
    sys.stdout.write(f"\n{_stats_line(session)}")
    sys.stdout.flush()


def _update_time(session: GameSession) -> None:
    """Overwrite just the stats (last) line in-place."""
    sys.stdout.write(f"\r\033[K{_stats_line(session)}")
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession) -> None:
    cursor = CellCursor(session.board.size, session.board.blank_cell)
    status = ""

    def _on_feedback(_event: PlayFeedback) -> None:
        sys.stdout.write("\a")

    def _on_solved(_event: PuzzleSolved) -> None:
        nonlocal status
        if session.settings.auto_reshuffle:
            status = f"{_G}★ Solved in {session.moves} moves! ★{_R}  Reshuffling…"
        else:
            status = f"{_G}★ Solved in {session.moves} moves! ★{_R}  R: play again"

    def _on_shuffled(_event: ShuffleCompleted) -> None:
        nonlocal status
        status = f"{_Y}Shuffled!{_R}"

    session.events.subscribe(PlayFeedback, _on_feedback)
    session.events.subscribe(PuzzleSolved, _on_solved)
    session.events.subscribe(ShuffleCompleted, _on_shuffled)
    session.start()

    while True:
        _show_game(session, cursor, status)
        status = ""

        # Wait for input; update the time display every 0.5 s.
        while True:
            key = get_key_timeout(0.5)
            if key is not None:
                break
            if session.tick():
                break
            _update_time(session)
        if key is None:
            continue

        if cursor.handle(key):
            continue
        if key == "select":
            session.select_cell(cursor.cell)
        elif key in SLIDE_DIRECTIONS:
            session.slide(SLIDE_DIRECTIONS[key])
        elif key == "shuffle":
            session.new_round()
        elif key == "help":
            status = "Move the cursor onto a tile next to the gap and press Enter."
        elif key == "quit":
            _clear()
            print("  Goodbye!\n")
            return


# -- public entry point -------------------------------------------------------


def run(settings: PuzzleSettings) -> None:
    """Launch the vanilla terminal game."""
    _play(GameSession(settings))
