from tileboard.engine.gamegenerator.generator import default_shuffle_steps, scramble

__all__ = ["default_shuffle_steps", "scramble"]
