"""Session configuration."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from tileboard.models.errors import SettingsError

logger = logging.getLogger(__name__)

MIN_SIZE = 2
MAX_SIZE = 8
DEFAULT_SIZE = 4
# Pause between solving a round and the automatic re-scramble.
DEFAULT_RESHUFFLE_DELAY = 0.5


@dataclass(frozen=True)
class PuzzleSettings:
    """Options for one play session.

    Attributes:
        size: Grid dimension.
        shuffle_steps: Random moves per scramble; ``None`` uses ``size ** 3``.
        reshuffle_delay: Seconds to wait after a solve before re-scrambling.
        auto_reshuffle: Start the next round automatically after a solve.
        seed: Seed for the shuffle RNG; ``None`` for a random seed.
    """

    size: int = DEFAULT_SIZE
    shuffle_steps: int | None = None
    reshuffle_delay: float = DEFAULT_RESHUFFLE_DELAY
    auto_reshuffle: bool = True
    seed: int | None = None

    def validate(self) -> PuzzleSettings:
        if not MIN_SIZE <= self.size <= MAX_SIZE:
            raise SettingsError(
                f"size must be between {MIN_SIZE} and {MAX_SIZE}, got {self.size}."
            )
        if self.shuffle_steps is not None and self.shuffle_steps < 0:
            raise SettingsError(f"shuffle_steps must be >= 0, got {self.shuffle_steps}.")
        if self.reshuffle_delay < 0:
            raise SettingsError(
                f"reshuffle_delay must be >= 0, got {self.reshuffle_delay}."
            )
        return self

    def make_rng(self) -> random.Random:
        if self.seed is not None:
            logger.debug("seeding shuffle rng with %d", self.seed)
        return random.Random(self.seed)
