"""Text shared by every frontend's status line."""

from __future__ import annotations


def format_moves(moves: int) -> str:
    return f"Moves: {moves}"


def format_time(seconds: float) -> str:
    """Return ``Time: MM:SS`` for *seconds* (fractions are dropped)."""
    m, s = divmod(int(seconds), 60)
    return f"Time: {m:02d}:{s:02d}"


def tile_label(tile: int) -> str:
    """Tiles are numbered from 1 on screen; identity 0 is labelled "1"."""
    return str(tile + 1)
