"""Pygame GUI frontend.

Tiles are picked with the mouse: the click position is hit-tested
against each tile rect and the resulting cell index is handed to the
session.  Arrow keys / WASD slide tiles directly.
"""

from __future__ import annotations

import logging
import math
from array import array

import pygame

from tileboard.engine.gameplay import GameSession
from tileboard.models.board import Direction
from tileboard.models.events import PlayFeedback, PuzzleSolved, ShuffleCompleted
from tileboard.settings import PuzzleSettings
from tileboard_ui.formatting import format_moves, format_time, tile_label

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 600
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _make_click_sound() -> pygame.mixer.Sound | None:
    """Synthesize a short decaying tone matching the mixer's format."""
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        init = pygame.mixer.get_init()
        if not init:
            raise pygame.error("mixer did not initialise")
        freq, fmt, channels = init
        if fmt != -16:
            raise pygame.error(f"unsupported sample format {fmt}")
        length = int(freq * 0.05)
        samples = array("h")
        for i in range(length):
            envelope = 1.0 - i / length
            value = int(9000 * envelope * math.sin(2 * math.pi * 880 * i / freq))
            samples.extend([value] * channels)
        return pygame.mixer.Sound(buffer=samples.tobytes())
    except pygame.error as exc:
        logger.warning("move sound disabled: %s", exc)
        return None


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, settings: PuzzleSettings) -> None:
        pygame.mixer.pre_init(22050, -16, 1)
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Puzzle OS")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._session = GameSession(settings)
        self._sound = _make_click_sound()
        self._status_msg = ""
        sz = settings.size
        self._f_tile = pygame.font.SysFont(
            "Helvetica", max(14, self._tile_px(sz) // 3), bold=True
        )

        events = self._session.events
        events.subscribe(PlayFeedback, self._on_feedback)
        events.subscribe(PuzzleSolved, self._on_solved)
        events.subscribe(ShuffleCompleted, self._on_shuffled)

    # ── event hooks ─────────────────────────────────────────────────────────

    def _on_feedback(self, _event: PlayFeedback) -> None:
        if self._sound is not None:
            self._sound.play()

    def _on_solved(self, _event: PuzzleSolved) -> None:
        self._status_msg = f"Solved in {self._session.moves} moves!"

    def _on_shuffled(self, _event: ShuffleCompleted) -> None:
        self._status_msg = ""

    # ── layout ──────────────────────────────────────────────────────────────

    @staticmethod
    def _tile_px(size: int) -> int:
        return (BOARD_MAX - (size + 1) * TILE_GAP) // size

    def _tile_rect(self, cell: int) -> pygame.Rect:
        sz = self._session.board.size
        tpx = self._tile_px(sz)
        total = sz * tpx + (sz + 1) * TILE_GAP
        r, c = divmod(cell, sz)
        return pygame.Rect(
            _cx(total) + TILE_GAP + c * (tpx + TILE_GAP),
            BOARD_TOP + TILE_GAP + r * (tpx + TILE_GAP),
            tpx,
            tpx,
        )

    def _cell_at(self, pos: tuple[int, int]) -> int | None:
        """Resolve a pointer position to the cell under it."""
        for cell in range(self._session.board.cell_count):
            if self._tile_rect(cell).collidepoint(pos):
                return cell
        return None

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        session = self._session
        board = session.board
        sz = board.size

        title_col = COL_GREEN if session.is_won else COL_TEXT
        _blit_center(
            self._surf,
            self._f_title.render(f"Puzzle OS  {sz}×{sz}", True, title_col),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"{format_moves(session.moves)}    {format_time(session.elapsed_time)}",
                True,
                COL_PINK,
            ),
            44,
        )

        total = sz * self._tile_px(sz) + (sz + 1) * TILE_GAP
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(total), BOARD_TOP, total, total),
            border_radius=10,
        )

        for cell, tile in enumerate(board.state):
            if board.is_blank(cell):
                continue
            rect = self._tile_rect(cell)
            col = COL_GREEN if board.is_tile_correct(cell) else COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            lbl = self._f_tile.render(tile_label(tile), True, COL_BASE)
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )

        y = BOARD_TOP + total + 14
        if self._status_msg:
            _blit_center(
                self._surf, self._f_body.render(self._status_msg, True, COL_YELLOW), y
            )
            y += 28
        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tile     Arrows / WASD  slide     R  shuffle     Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            y,
        )

    # ── input ───────────────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        session = self._session
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            cell = self._cell_at(ev.pos)
            if cell is not None:
                session.select_cell(cell)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _KEY_DIRECTIONS:
                session.slide(_KEY_DIRECTIONS[ev.key])
            elif ev.key == pygame.K_r:
                session.new_round()
            elif ev.key in (pygame.K_ESCAPE, pygame.K_q):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        self._session.start()
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            self._session.tick()
            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(settings: PuzzleSettings) -> None:
    """Launch the Pygame GUI."""
    PygameApp(settings).run_loop()
