"""
Minesweeper Field Generator
Builds the initial mine field and computes adjacency counts
"""

import random
from typing import List, Tuple, Optional

from .cell import Cell, MINE


def create_field(width: int, height: int, mine_count: int,
                 rng: Optional[random.Random] = None) -> List[List[Cell]]:
    """
    Create a width x height field with mine_count randomly placed mines

    Args:
        width: Number of columns
        height: Number of rows
        mine_count: Number of mines, 0 < mine_count < width * height
        rng: Random source (module random by default)

    Returns:
        Row-major grid, indexed field[y][x]
    """
    if width <= 0 or height <= 0:
        raise ValueError("Field dimensions must be positive")
    if mine_count <= 0 or mine_count >= width * height:
        raise ValueError(f"Mine count must be between 1 and {width * height - 1}")

    rng = rng or random.Random()
    field = [[Cell(x, y) for x in range(width)] for y in range(height)]

    coordinates = [(x, y) for y in range(height) for x in range(width)]
    for x, y in shuffle_coordinates(coordinates, rng)[:mine_count]:
        field[y][x].content = MINE

    set_adjacent_mines(field)
    return field


def shuffle_coordinates(coordinates: List[Tuple[int, int]],
                        rng: random.Random) -> List[Tuple[int, int]]:
    """Uniform permutation: pop a random remaining element until none are left"""
    remaining = list(coordinates)
    shuffled = []
    while remaining:
        shuffled.append(remaining.pop(rng.randrange(len(remaining))))
    return shuffled


def set_adjacent_mines(field: List[List[Cell]]):
    """Recalculate the adjacent mine count of every non-mine cell"""
    for row in field:
        for cell in row:
            if not cell.is_mine():
                cell.content = count_adjacent(field, cell.x, cell.y, Cell.is_mine)


def count_adjacent(field: List[List[Cell]], x: int, y: int, predicate) -> int:
    """Count cells in the 3x3 box around (x, y) matching predicate, excluding the center"""
    count = 0
    for dy in [-1, 0, 1]:
        for dx in [-1, 0, 1]:
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= ny < len(field) and 0 <= nx < len(field[ny]):
                if predicate(field[ny][nx]):
                    count += 1
    return count
