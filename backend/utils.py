# backend/utils.py

from typing import List, Tuple

Position = Tuple[int, int]

# Fixed visiting order: dx outer, dy inner. Agents rely on it for tie-breaking.
NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if dx != 0 or dy != 0
)


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def get_neighbors(x: int, y: int, width: int, height: int) -> List[Position]:
    """
    Return the valid 8-way neighbours of (x, y), in NEIGHBOR_OFFSETS order.
    """
    neighbors = []
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if in_bounds(nx, ny, width, height):
            neighbors.append((nx, ny))
    return neighbors


def all_positions(width: int, height: int) -> List[Position]:
    """Every coordinate of a width x height grid, x outer, y inner."""
    return [(x, y) for x in range(width) for y in range(height)]


def generate_random_positions(width: int, height: int, count: int, rng, exclude: Position = None) -> List[Position]:
    """
    Draw `count` unique positions uniformly without replacement.
    Optionally exclude a coordinate (e.g., for safe first click).
    """
    candidates = [pos for pos in all_positions(width, height) if pos != exclude]
    if count > len(candidates):
        raise ValueError(
            f"Cannot place {count} mines: only {len(candidates)} available cells."
        )
    return rng.sample(candidates, count)


def deep_copy_grid(grid: List[List[int]]) -> List[List[int]]:
    """
    Deep copy a 2D list of tile values.
    """
    return [column[:] for column in grid]
