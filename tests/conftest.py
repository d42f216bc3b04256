"""
Shared fixtures for game tests
"""

import random

import pytest
from game import Cell, GameBoard, MINE, EMPTY
from game.field import set_adjacent_mines


def build_field(*rows):
    """Build a field from text rows, '*' marks a mine"""
    field = [[Cell(x, y, MINE if char == '*' else EMPTY) for x, char in enumerate(row)]
             for y, row in enumerate(rows)]
    set_adjacent_mines(field)
    return field


@pytest.fixture
def board_from_layout():
    """Factory for boards with a known mine layout"""
    def _build(*rows):
        return GameBoard.from_field(build_field(*rows), rng=random.Random(1234))
    return _build
