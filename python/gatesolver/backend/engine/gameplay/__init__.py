from gatesolver.backend.engine.gameplay.game import GamePlay, attempt_move, is_winning

__all__ = ["GamePlay", "attempt_move", "is_winning"]
