from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.replay import SolutionReplay

__all__ = ["GamePlay", "SolutionReplay"]
