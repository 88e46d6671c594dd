"""PyQt6 GUI frontend.

One button per cell; a click hands that cell index to the session.
A ``QTimer`` refreshes the clock and drives the post-solve reshuffle.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tileboard.engine.gameplay import GameSession
from tileboard.models.board import Direction
from tileboard.models.events import (
    MoveApplied,
    PlayFeedback,
    PuzzleSolved,
    ShuffleCompleted,
)
from tileboard.settings import PuzzleSettings
from tileboard_ui.formatting import format_moves, format_time, tile_label

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_HINT = "Click a tile     Arrows / WASD  slide     R  shuffle     Esc  quit"

_KEY_DIRECTIONS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}


class _GamePage(QWidget):
    """The puzzle board with tile buttons and live stats."""

    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self.setObjectName("page")
        self.session = session
        size = session.board.size

        tile_px = max(40, min(96, 400 // size))
        f_sz = max(12, tile_px // 4)

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        t = QLabel(f"Puzzle OS  {size}×{size}")
        t.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        t.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(t)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        grid = QGridLayout(frame)
        grid.setSpacing(4)
        grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._btns: list[QPushButton] = []
        for cell in range(session.board.cell_count):
            b = QPushButton()
            b.setFixedSize(tile_px, tile_px)
            b.setFont(QFont("Helvetica", f_sz, QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, cc=cell: self.session.select_cell(cc))
            r, c = divmod(cell, size)
            grid.addWidget(b, r, c)
            self._btns.append(b)

        self._hint = QLabel(_HINT)
        self._hint.setFont(QFont("Helvetica", 11))
        self._hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._hint)

        events = session.events
        events.subscribe(MoveApplied, lambda _e: self._sync())
        events.subscribe(ShuffleCompleted, self._on_shuffled)
        events.subscribe(PuzzleSolved, self._on_solved)
        events.subscribe(PlayFeedback, lambda _e: QApplication.beep())

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(200)

    # -- rendering --

    def _sync(self) -> None:
        board = self.session.board
        for cell, tile in enumerate(board.state):
            b = self._btns[cell]
            if board.is_blank(cell):
                b.setText("")
                b.setStyleSheet(
                    f"QPushButton{{background:{_MANTLE};border:none;border-radius:8px;}}"
                )
                continue
            correct = board.is_tile_correct(cell)
            bg = _GREEN if correct else _BLUE
            hv = _GREEN_H if correct else _BLUE_H
            b.setText(tile_label(tile))
            b.setStyleSheet(
                f"QPushButton{{background:{bg};color:{_BASE};"
                f"border:none;border-radius:8px;font-weight:bold;}}"
                f"QPushButton:hover{{background:{hv};}}"
            )
        self._refresh_stats()

    def _refresh_stats(self) -> None:
        self._stats.setText(
            f"{format_moves(self.session.moves)}    "
            f"{format_time(self.session.elapsed_time)}"
        )

    def _tick(self) -> None:
        self.session.tick()
        self._refresh_stats()

    # -- event hooks --

    def _on_shuffled(self, _event: ShuffleCompleted) -> None:
        self._hint.setText(_HINT)
        self._hint.setStyleSheet(f"color:{_OVERLAY0};")
        self._sync()

    def _on_solved(self, _event: PuzzleSolved) -> None:
        self._hint.setText(f"Solved in {self.session.moves} moves!")
        self._hint.setStyleSheet(f"color:{_GREEN};font-weight:bold;")


class _MainWindow(QMainWindow):
    def __init__(self, settings: PuzzleSettings) -> None:
        super().__init__()
        self.setWindowTitle("Puzzle OS")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(480, 560)

        self._session = GameSession(settings)
        self._page = _GamePage(self._session)
        self.setCentralWidget(self._page)
        self._session.start()

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key in _KEY_DIRECTIONS:
            self._session.slide(_KEY_DIRECTIONS[key])
        elif key == Qt.Key.Key_R:
            self._session.new_round()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(settings: PuzzleSettings) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(settings)
    window.show()
    qapp.exec()
