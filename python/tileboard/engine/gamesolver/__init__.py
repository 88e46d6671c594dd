from tileboard.engine.gamesolver.solvability import (
    is_permutation,
    is_solvable,
    permutation_parity,
)

__all__ = ["is_permutation", "is_solvable", "permutation_parity"]
