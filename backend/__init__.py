from .board import MinesweeperBoard
from .tiles import NO_RESULT, Outcome, Result, TileState

__all__ = ["MinesweeperBoard", "NO_RESULT", "Outcome", "Result", "TileState"]
