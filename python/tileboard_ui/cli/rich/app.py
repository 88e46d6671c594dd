"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and cursor as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tileboard.engine.gameplay import GameSession
from tileboard.models.events import PlayFeedback, PuzzleSolved, ShuffleCompleted
from tileboard.settings import PuzzleSettings
from tileboard_ui.cli.cursor import SLIDE_DIRECTIONS, CellCursor
from tileboard_ui.cli.input_handler import get_key_timeout
from tileboard_ui.formatting import format_moves, format_time, tile_label

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(session: GameSession, cursor: CellCursor) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    board = session.board
    width = len(str(board.cell_count))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[Text] = []
        for c, tile in enumerate(row):
            cell = r * board.size + c
            if board.is_blank(cell):
                text = Text("·", style="dim")
            elif board.is_tile_correct(cell):
                text = Text(tile_label(tile).rjust(width), style="bold green")
            else:
                text = Text(tile_label(tile).rjust(width), style="bold white")
            if cell == cursor.cell:
                text.stylize("reverse")
            cells.append(text)
        table.add_row(*cells)

    return table


def _draw_game(session: GameSession, cursor: CellCursor, status: str = "") -> None:
    console.clear()

    size = session.board.size
    board_table = _render_board(session, cursor)

    stats = Text()
    stats.append(format_moves(session.moves), style="bold yellow")
    stats.append("    ")
    stats.append(format_time(session.elapsed_time), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    solved = session.is_won
    panel = Panel(
        Group(Align.center(board_table), Text(""), Align.center(stats)),
        title=(
            f"[bold green]★ Solved  {size}×{size} ★[/bold green]"
            if solved
            else f"[bold cyan]Puzzle OS  {size}×{size}[/bold cyan]"
        ),
        border_style="bold green" if solved else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession) -> None:
    cursor = CellCursor(session.board.size, session.board.blank_cell)
    status = ""

    def _on_feedback(_event: PlayFeedback) -> None:
        console.bell()

    def _on_solved(_event: PuzzleSolved) -> None:
        nonlocal status
        follow_up = "Reshuffling…" if session.settings.auto_reshuffle else "R: play again"
        status = f"[bold green]Solved in {session.moves} moves![/bold green]  {follow_up}"

    def _on_shuffled(_event: ShuffleCompleted) -> None:
        nonlocal status
        status = "[yellow]Shuffled![/yellow]"

    session.events.subscribe(PlayFeedback, _on_feedback)
    session.events.subscribe(PuzzleSolved, _on_solved)
    session.events.subscribe(ShuffleCompleted, _on_shuffled)
    session.start()

    shown = ""
    while True:
        if status:
            shown = status
            status = ""
        _draw_game(session, cursor, shown)

        # A timeout refreshes the clock (and may trigger the reshuffle).
        key = get_key_timeout(1.0)
        if key is None:
            session.tick()
            continue
        shown = ""

        if cursor.handle(key):
            continue
        if key == "select":
            session.select_cell(cursor.cell)
        elif key in SLIDE_DIRECTIONS:
            session.slide(SLIDE_DIRECTIONS[key])
        elif key == "shuffle":
            session.new_round()
        elif key == "help":
            status = "Move the cursor onto a tile next to the gap and press [bold]Enter[/bold]."
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(settings: PuzzleSettings) -> None:
    """Launch the Rich terminal game."""
    _play(GameSession(settings))
