import copy
import random
from collections import Counter

from .tiles import Result, TileState, is_revealed_count
from .utils import all_positions, deep_copy_grid, generate_random_positions, get_neighbors, in_bounds


class MinesweeperBoard:

    def __init__(
        self,
        width,
        height,
        num_mines,
        start_x=0,
        start_y=0,
        seed=None,
        rng=None
    ):
        """
        Mines are placed lazily on the first uncover(), excluding the
        coordinate of that first call. start_x / start_y record where the
        host intends to open the game; they do not influence placement.

        rng:
            Any object with random.Random's sample(). Defaults to a private
            random.Random(seed), so boards never share random state.
        """
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be positive.")
        if num_mines < 0 or num_mines >= width * height:
            raise ValueError(
                f"num_mines must be in [0, {width * height - 1}] for a {width}x{height} board."
            )

        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.start_x = start_x
        self.start_y = start_y
        self.rng = rng if rng is not None else random.Random(seed)

        self.grid = [[TileState.HIDDEN for _ in range(height)] for _ in range(width)]  # grid[x][y]
        self.mine_locations = set()
        self.initialized = False

    def _place_mines(self, safe_x, safe_y):
        mines = generate_random_positions(
            self.width, self.height, self.num_mines, self.rng, exclude=(safe_x, safe_y)
        )
        self.mine_locations = set(mines)
        self.initialized = True

    def is_valid_position(self, x, y):
        if not isinstance(x, int) or not isinstance(y, int):
            return False
        return in_bounds(x, y, self.width, self.height)

    def get_tile(self, x, y):
        if not self.is_valid_position(x, y):
            return None
        return self.grid[x][y]

    def place_flag(self, x, y):
        """Flag a hidden tile. Revealed tiles are left alone."""
        if self.get_tile(x, y) != TileState.HIDDEN:
            return False
        self.grid[x][y] = TileState.FLAGGED
        return True

    def remove_flag(self, x, y):
        if self.get_tile(x, y) != TileState.FLAGGED:
            return False
        self.grid[x][y] = TileState.HIDDEN
        return True

    def count_adjacent_mines(self, x, y):
        return sum(1 for pos in get_neighbors(x, y, self.width, self.height) if pos in self.mine_locations)

    def uncover(self, x, y) -> Result:
        """
        Uncover a single tile; never flood-fills.

        Returns:
            Result.INVALID  - out of bounds, or the tile is flagged
            Result.MINE_HIT - the tile holds a mine
            Result.count(n) - n adjacent mines (idempotent on revealed tiles)
        """
        if not self.is_valid_position(x, y):
            return Result.INVALID

        if not self.initialized:
            self._place_mines(x, y)

        tile = self.grid[x][y]
        if tile == TileState.FLAGGED:
            return Result.INVALID
        if tile == TileState.MINE:
            return Result.MINE_HIT
        if is_revealed_count(tile):
            return Result.count(tile)

        if (x, y) in self.mine_locations:
            self.grid[x][y] = TileState.MINE
            return Result.MINE_HIT

        count = self.count_adjacent_mines(x, y)
        self.grid[x][y] = count
        return Result.count(count)

    def get_hidden_positions(self):
        return [(x, y) for x, y in all_positions(self.width, self.height) if self.grid[x][y] == TileState.HIDDEN]

    def get_neighboring_tiles(self, x, y):
        return get_neighbors(x, y, self.width, self.height)

    def get_tile_counts(self):
        """Map each tile value (sentinel or count) to how many cells hold it."""
        return Counter(tile for column in self.grid for tile in column)

    def count_revealed(self):
        return sum(1 for column in self.grid for tile in column if is_revealed_count(tile))

    def is_game_won(self):
        return self.count_revealed() == self.width * self.height - self.num_mines

    def is_mine(self, x, y):
        return (x, y) in self.mine_locations

    def is_revealed(self, x, y):
        return is_revealed_count(self.get_tile(x, y))

    def is_flagged(self, x, y):
        return self.get_tile(x, y) == TileState.FLAGGED

    def clone(self):
        cloned = MinesweeperBoard(
            self.width,
            self.height,
            self.num_mines,
            self.start_x,
            self.start_y,
            rng=copy.deepcopy(self.rng)
        )
        cloned.grid = deep_copy_grid(self.grid)
        cloned.mine_locations = set(self.mine_locations)
        cloned.initialized = self.initialized
        return cloned

    def get_visible_state(self, reveal_mines=False):
        """
        JSON-safe view indexed [y][x]:
            None - hidden, "F" - flagged, "*" - exploded mine,
            "M"  - unexploded mine (only when reveal_mines), int - count
        """
        state = []
        for y in range(self.height):
            row_cells = []
            for x in range(self.width):
                tile = self.grid[x][y]
                if tile == TileState.MINE:
                    row_cells.append("*")
                elif tile == TileState.FLAGGED:
                    row_cells.append("F")
                elif reveal_mines and (x, y) in self.mine_locations:
                    row_cells.append("M")
                elif tile == TileState.HIDDEN:
                    row_cells.append(None)
                else:
                    row_cells.append(int(tile))
            state.append(row_cells)
        return state

    def format_board(self, reveal_all=False):
        symbols = {None: ".", "F": "F", "*": "*", "M": "M"}
        lines = []
        for row in self.get_visible_state(reveal_mines=reveal_all):
            lines.append("".join(f" {symbols.get(cell, cell)} " for cell in row))
        return "\n".join(lines)
