"""Reachability test for arbitrary tile arrangements.

Every legal move swaps the blank with a neighbour, i.e. it applies one
transposition to the permutation *and* moves the blank one step on the
grid.  So a state is reachable from the goal exactly when the
permutation parity matches the parity of the blank's taxicab distance
from its home cell (bottom-right).
"""

from __future__ import annotations

from typing import Sequence

from tileboard.models.board import blank_tile, to_row_col


def is_permutation(tiles: Sequence[int], size: int) -> bool:
    """Return True if *tiles* holds each of ``0..size*size-1`` exactly once."""
    return len(tiles) == size * size and sorted(tiles) == list(range(size * size))


def permutation_parity(tiles: Sequence[int]) -> int:
    """Return 0 for an even permutation, 1 for an odd one."""
    seen = [False] * len(tiles)
    transpositions = 0
    for start in range(len(tiles)):
        if seen[start]:
            continue
        length = 0
        cell = start
        while not seen[cell]:
            seen[cell] = True
            cell = tiles[cell]
            length += 1
        transpositions += length - 1
    return transpositions % 2


def is_solvable(tiles: Sequence[int], size: int) -> bool:
    """Return True if *tiles* can be reached from the solved board."""
    if not is_permutation(tiles, size):
        return False
    blank = list(tiles).index(blank_tile(size))
    row, col = to_row_col(blank, size)
    distance = (size - 1 - row) + (size - 1 - col)
    return permutation_parity(tiles) == distance % 2
