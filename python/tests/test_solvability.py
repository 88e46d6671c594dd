"""Parity-based reachability check, cross-checked against BFS on 2×2."""

from __future__ import annotations

import itertools
from collections import deque

import pytest

from tileboard.engine.gamesolver import is_permutation, is_solvable, permutation_parity


def _reachable_2x2() -> set[tuple[int, ...]]:
    start = (0, 1, 2, 3)
    seen = {start}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        blank = state.index(3)
        r, c = divmod(blank, 2)
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < 2 and 0 <= nc < 2:
                nxt = list(state)
                other = nr * 2 + nc
                nxt[blank], nxt[other] = nxt[other], nxt[blank]
                if tuple(nxt) not in seen:
                    seen.add(tuple(nxt))
                    queue.append(tuple(nxt))
    return seen


def test_parity_matches_bfs_for_every_2x2_arrangement() -> None:
    reachable = _reachable_2x2()
    assert len(reachable) == 12

    for perm in itertools.permutations(range(4)):
        assert is_solvable(perm, 2) is (perm in reachable), perm


@pytest.mark.parametrize(
    ("tiles", "parity"),
    [
        ((0, 1, 2, 3), 0),
        ((1, 0, 2, 3), 1),
        ((1, 2, 0, 3), 0),
        ((3, 2, 1, 0), 0),
    ],
)
def test_permutation_parity(tiles: tuple[int, ...], parity: int) -> None:
    assert permutation_parity(tiles) == parity


def test_solved_3x3_and_swapped_pair() -> None:
    assert is_solvable(tuple(range(9)), 3)
    assert not is_solvable((1, 0, 2, 3, 4, 5, 6, 7, 8), 3)


def test_non_permutation_is_not_solvable() -> None:
    assert not is_permutation([0, 0, 1, 2], 2)
    assert not is_solvable([0, 0, 1, 2], 2)
