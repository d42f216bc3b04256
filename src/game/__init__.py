"""
Game package initialization
"""

from .cell import Cell, CellState, MINE, EMPTY
from .board import GameBoard, GameState, DIFFICULTIES
from .field import create_field
from .timer import GameTimer

__all__ = ['GameBoard', 'GameState', 'CellState', 'Cell', 'MINE', 'EMPTY',
           'DIFFICULTIES', 'create_field', 'GameTimer']
