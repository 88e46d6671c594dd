"""Shuffle solvability, anti-undo walk, counting and notifications.

Reachability is checked independently of the board engine: a plain
breadth-first search over tile tuples walks from the shuffled state
until it meets the goal.
"""

from __future__ import annotations

import random
from collections import deque

import pytest

from tileboard.engine.gamegenerator import default_shuffle_steps, scramble
from tileboard.engine.gameplay.board import PuzzleBoard
from tileboard.models.board import BoardPhase
from tileboard.models.errors import PuzzleError
from tileboard.models.events import ShuffleCompleted, ShuffleStarted


# -- helpers ------------------------------------------------------------------


class _TrailBoard(PuzzleBoard):
    """Records where the blank sits after every shuffle move."""

    def shuffle(self, steps: int | None = None) -> None:
        self.trail = [self.blank_cell]
        super().shuffle(steps)

    def _swap(self, cell: int) -> None:
        super()._swap(cell)
        if self.is_shuffling:
            self.trail.append(self.blank_cell)


def _bfs_reaches_goal(start: tuple[int, ...], size: int) -> bool:
    goal = tuple(range(size * size))
    blank_id = size * size - 1
    seen = {start}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        if state == goal:
            return True
        blank = state.index(blank_id)
        r, c = divmod(blank, size)
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if not (0 <= nr < size and 0 <= nc < size):
                continue
            other = nr * size + nc
            nxt = list(state)
            nxt[blank], nxt[other] = nxt[other], nxt[blank]
            key = tuple(nxt)
            if key not in seen:
                seen.add(key)
                queue.append(key)
    return False


def _record(board: PuzzleBoard) -> list:
    seen: list = []
    board.events.subscribe_all(seen.append)
    return seen


# -- solvability --------------------------------------------------------------


@pytest.mark.parametrize("seed", range(20))
def test_shuffled_2x2_is_reachable(seed: int) -> None:
    board = PuzzleBoard(2, rng=random.Random(seed))
    board.shuffle()

    assert _bfs_reaches_goal(board.state, 2)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_shuffled_3x3_is_reachable(seed: int) -> None:
    board = PuzzleBoard(3, rng=random.Random(seed))
    board.shuffle()

    assert _bfs_reaches_goal(board.state, 3)


@pytest.mark.parametrize("steps", [0, 1, 5, 64])
def test_invariant_after_shuffle(steps: int) -> None:
    board = PuzzleBoard(4, rng=random.Random(steps))
    board.shuffle(steps)

    assert sorted(board.state) == list(range(16))
    assert board.state[board.blank_cell] == 15


# -- walk shape ---------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4])
def test_shuffle_applies_exactly_the_requested_moves(size: int) -> None:
    board = _TrailBoard(size, rng=random.Random(11))
    board.shuffle(30)

    assert len(board.trail) == 31


def test_default_steps_is_cube_of_size() -> None:
    board = _TrailBoard(3, rng=random.Random(3))
    board.shuffle()

    assert len(board.trail) == 27 + 1
    assert default_shuffle_steps(3) == 27


@pytest.mark.parametrize("seed", range(10))
def test_blank_never_steps_straight_back(seed: int) -> None:
    board = _TrailBoard(3, rng=random.Random(seed))
    board.shuffle(200)

    trail = board.trail
    for i in range(len(trail) - 2):
        assert trail[i + 2] != trail[i], f"reversal at step {i + 2}"


def test_each_shuffle_move_is_to_a_neighbour() -> None:
    board = _TrailBoard(4, rng=random.Random(8))
    board.shuffle(100)

    for a, b in zip(board.trail, board.trail[1:]):
        (ar, ac), (br, bc) = divmod(a, 4), divmod(b, 4)
        assert abs(ar - br) + abs(ac - bc) == 1


def test_same_seed_same_board() -> None:
    first = PuzzleBoard(4, rng=random.Random(42))
    second = PuzzleBoard(4, rng=random.Random(42))
    first.shuffle()
    second.shuffle()

    assert first.state == second.state


# -- counting and notifications -----------------------------------------------


def test_shuffle_moves_are_not_counted() -> None:
    board = PuzzleBoard(4, rng=random.Random(9))
    board.shuffle(10)
    assert board.move_count == 0

    for _ in range(3):
        assert board.attempt_move(board.movable_cells()[0]) is True

    assert board.move_count == 3


def test_shuffle_resets_move_count() -> None:
    board = PuzzleBoard(3, rng=random.Random(1))
    board.attempt_move(7)
    board.attempt_move(6)
    assert board.move_count == 2

    board.shuffle(5)

    assert board.move_count == 0


def test_shuffle_publishes_only_start_and_completion() -> None:
    board = PuzzleBoard(3, rng=random.Random(4))
    seen = _record(board)

    board.shuffle()

    assert seen == [ShuffleStarted(), ShuffleCompleted()]


def test_zero_step_shuffle_leaves_tiles_alone() -> None:
    board = PuzzleBoard(3, rng=random.Random(4))
    board.attempt_move(7)
    before = board.state
    seen = _record(board)

    board.shuffle(0)

    assert board.state == before
    assert board.move_count == 0
    assert seen == [ShuffleStarted(), ShuffleCompleted()]


def test_shuffling_flag_and_phase_during_shuffle() -> None:
    board = PuzzleBoard(3, rng=random.Random(6))
    observed: list[tuple[bool, BoardPhase]] = []
    board.events.subscribe(
        ShuffleStarted, lambda _e: observed.append((board.is_shuffling, board.phase))
    )
    board.events.subscribe(
        ShuffleCompleted, lambda _e: observed.append((board.is_shuffling, board.phase))
    )

    board.shuffle()

    assert observed == [(True, BoardPhase.SHUFFLING), (False, BoardPhase.IDLE)]


def test_shuffle_from_solved_phase_returns_to_idle() -> None:
    board = PuzzleBoard(2, rng=random.Random(0))
    board.attempt_move(1)
    board.attempt_move(3)
    assert board.phase is BoardPhase.SOLVED

    board.shuffle()

    assert board.phase is BoardPhase.IDLE


def test_negative_steps_rejected() -> None:
    board = PuzzleBoard(3)

    with pytest.raises(ValueError):
        board.shuffle(-1)
    assert not board.is_shuffling


@pytest.mark.parametrize("steps", [2.5, True, "3"], ids=["float", "bool", "str"])
def test_non_integer_steps_rejected(steps: object) -> None:
    board = PuzzleBoard(3, rng=random.Random(0))
    seen = _record(board)

    with pytest.raises(TypeError):
        board.shuffle(steps)  # type: ignore[arg-type]

    assert board.is_solved()
    assert not board.is_shuffling
    assert seen == []


def test_nested_shuffle_rejected_and_flag_cleared() -> None:
    board = PuzzleBoard(3, rng=random.Random(2))
    board.events.subscribe(ShuffleStarted, lambda _e: board.shuffle(3))

    with pytest.raises(PuzzleError):
        board.shuffle(3)

    assert not board.is_shuffling
    assert board.phase is BoardPhase.IDLE


# -- scramble helper ----------------------------------------------------------


@pytest.mark.parametrize("seed", range(25))
def test_scramble_never_returns_a_solved_board(seed: int) -> None:
    board = PuzzleBoard(2, rng=random.Random(seed))

    attempts = scramble(board)

    assert attempts >= 1
    assert not board.is_solved()


def test_scramble_with_zero_steps_shuffles_once() -> None:
    board = PuzzleBoard(3)

    assert scramble(board, 0) == 1
    assert board.is_solved()


@pytest.mark.parametrize("seed", range(5))
def test_plain_shuffle_of_twelve_steps_returns_2x2_to_goal(seed: int) -> None:
    # The blank can only circle the 2×2 grid; three laps restore every tile.
    board = PuzzleBoard(2, rng=random.Random(seed))
    board.shuffle(12)

    assert board.is_solved()


@pytest.mark.parametrize("steps", [12, 24])
@pytest.mark.parametrize("seed", range(5))
def test_scramble_escapes_the_2x2_cycle(seed: int, steps: int) -> None:
    board = PuzzleBoard(2, rng=random.Random(seed))

    assert scramble(board, steps) == 2
    assert not board.is_solved()
