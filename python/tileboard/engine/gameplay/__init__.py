from tileboard.engine.gameplay.board import PuzzleBoard
from tileboard.engine.gameplay.session import GameSession

__all__ = ["GameSession", "PuzzleBoard"]
