# agents/knowledge.py

from typing import List, Optional, Tuple

from backend.tiles import TileState, is_revealed_count
from backend.utils import all_positions, get_neighbors, in_bounds

Position = Tuple[int, int]


class BoardKnowledge:
    """
    An agent's private picture of the board, built only from the results
    the host reports. It never reads a MinesweeperBoard, so an agent can
    play against a board it cannot inspect.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid: List[List[int]] = [[TileState.HIDDEN for _ in range(height)] for _ in range(width)]

    def is_valid_position(self, x: int, y: int) -> bool:
        return in_bounds(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> Optional[int]:
        if not self.is_valid_position(x, y):
            return None
        return self.grid[x][y]

    def record(self, x: int, y: int, count: int) -> bool:
        if not self.is_valid_position(x, y):
            return False
        self.grid[x][y] = count
        return True

    def mark_flagged(self, x: int, y: int) -> None:
        if self.is_valid_position(x, y):
            self.grid[x][y] = TileState.FLAGGED

    def is_hidden(self, x: int, y: int) -> bool:
        return self.get(x, y) == TileState.HIDDEN

    def is_flagged(self, x: int, y: int) -> bool:
        return self.get(x, y) == TileState.FLAGGED

    def neighbors(self, x: int, y: int) -> List[Position]:
        return get_neighbors(x, y, self.width, self.height)

    def hidden_positions(self) -> List[Position]:
        return [pos for pos in all_positions(self.width, self.height) if self.is_hidden(*pos)]

    def hidden_count(self) -> int:
        return sum(1 for column in self.grid for tile in column if tile == TileState.HIDDEN)

    def revealed_positions(self) -> List[Position]:
        return [pos for pos in all_positions(self.width, self.height) if is_revealed_count(self.get(*pos))]
