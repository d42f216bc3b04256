"""
Minesweeper Game - Core Game Logic
Implements the game mechanics and state machine for minesweeper
"""

from enum import Enum
import random
from typing import List, Tuple, Optional

import numpy as np

from .cell import Cell, EMPTY
from .field import create_field, set_adjacent_mines, count_adjacent


class GameState(Enum):
    """Enumeration for different game states"""
    UNFINISHED = "unfinished"
    WON = "won"
    LOST = "lost"


# Difficulty presets (width, height, mines)
DIFFICULTIES = {
    'easy': (9, 9, 10),
    'medium': (16, 16, 40),
    'expert': (30, 16, 99)
}


class GameBoard:
    """Manages the minesweeper game board and game logic"""
    DIFFICULTIES = DIFFICULTIES

    def __init__(self, width: int = 9, height: int = 9, mines: int = 10,
                 field: Optional[List[List[Cell]]] = None,
                 rng: Optional[random.Random] = None):
        if width <= 0 or height <= 0:
            raise ValueError("Board dimensions must be positive")
        if mines <= 0 or mines >= width * height:
            raise ValueError(f"Mine count must be between 1 and {width * height - 1}")

        self.width = width
        self.height = height
        self.total_mines = mines
        self.rng = rng or random.Random()
        self._start(field)

    @classmethod
    def from_difficulty(cls, difficulty: str, rng: Optional[random.Random] = None) -> 'GameBoard':
        """Create a board from one of the fixed difficulty presets"""
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {difficulty}")
        width, height, mines = DIFFICULTIES[difficulty]
        return cls(width, height, mines, rng=rng)

    @classmethod
    def from_field(cls, field: List[List[Cell]], rng: Optional[random.Random] = None) -> 'GameBoard':
        """Create a board around a pre-built field (field[y][x])"""
        mines = sum(1 for row in field for cell in row if cell.is_mine())
        return cls(len(field[0]), len(field), mines, field=field, rng=rng)

    def _start(self, field: Optional[List[List[Cell]]] = None):
        """Set up a fresh game session"""
        if field is None:
            field = create_field(self.width, self.height, self.total_mines, self.rng)
        self.board = field
        self.game_state = GameState.UNFINISHED
        self.first_move = True
        self.remaining_mines = self.total_mines
        self.flags_used = 0
        self.unrevealed = self.width * self.height
        self.clicked_mine_pos: Optional[Tuple[int, int]] = None

    def reset_game(self, difficulty: str = None):
        """Reset the game to initial state"""
        if difficulty and difficulty in DIFFICULTIES:
            self.width, self.height, self.total_mines = DIFFICULTIES[difficulty]
        self._start()

    def get_difficulty(self) -> Optional[str]:
        """Name of the preset matching this board, or None for a custom board"""
        size = (self.width, self.height, self.total_mines)
        for difficulty, params in DIFFICULTIES.items():
            if params == size:
                return difficulty
        return None

    # Queries

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at specified position"""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.board[y][x]
        return None

    def is_revealed(self, x: int, y: int) -> bool:
        return self.board[y][x].is_revealed()

    def is_flagged(self, x: int, y: int) -> bool:
        return self.board[y][x].is_flagged()

    def is_mine(self, x: int, y: int) -> bool:
        return self.board[y][x].is_mine()

    def is_empty(self, x: int, y: int) -> bool:
        return self.board[y][x].is_empty()

    def get_content(self, x: int, y: int) -> int:
        return self.board[y][x].content

    def get_remaining_mines(self) -> int:
        """Get the mine counter shown to the player (total mines - flags used)"""
        return self.remaining_mines

    def get_visible_board(self) -> np.ndarray:
        """
        Get the board as seen by the player

        Returns:
            2D array indexed [y, x] where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = mine, shown on every unflagged mine once the game is lost
                10 = the mine that ended the game
        """
        visible = np.full((self.height, self.width), -1, dtype=np.int8)
        for row in self.board:
            for cell in row:
                if cell.is_flagged():
                    visible[cell.y, cell.x] = -2
                elif cell.is_revealed():
                    visible[cell.y, cell.x] = cell.content
        if self.game_state == GameState.LOST:
            for row in self.board:
                for cell in row:
                    if cell.is_mine() and not cell.is_flagged():
                        visible[cell.y, cell.x] = 9
        if self.clicked_mine_pos:
            x, y = self.clicked_mine_pos
            visible[y, x] = 10
        return visible

    def is_finished(self) -> bool:
        return self.game_state != GameState.UNFINISHED

    # Player actions

    def left_click(self, x: int, y: int):
        """Reveal a cell; the first click of a game never hits a mine"""
        if self.is_finished():
            return

        if self.first_move and self.board[y][x].is_mine():
            self._move_mine(x, y)
        self.first_move = False

        self._reveal(x, y)
        self._check_win_state()

    def right_click(self, x: int, y: int):
        """Toggle a flag, refused when the mine counter is already at zero"""
        if self.is_finished():
            return

        cell = self.board[y][x]
        if cell.is_revealed():
            return

        if cell.is_flagged():
            cell.toggle_flag()
            self.flags_used -= 1
            self.remaining_mines += 1
        elif self.remaining_mines > 0:
            cell.toggle_flag()
            self.flags_used += 1
            self.remaining_mines -= 1

        self._check_win_state()

    def chord_reveal(self, x: int, y: int):
        """Reveal all unflagged neighbors of a numbered cell whose flag count is satisfied"""
        if self.is_finished():
            return

        content = self.board[y][x].content
        if content > 0 and content == count_adjacent(self.board, x, y, Cell.is_flagged):
            for nx, ny in self._neighbors(x, y):
                if not self.board[ny][nx].is_flagged():
                    self._reveal(nx, ny)
            self._check_win_state()

    def reveal(self, x: int, y: int):
        """Reveal a cell without first-click protection"""
        if self.is_finished():
            return
        self._reveal(x, y)
        self._check_win_state()

    def surrender(self):
        """Give up the current game"""
        self.game_state = GameState.LOST

    # Internals

    def _reveal(self, x: int, y: int):
        """Reveal a cell, cascading through empty cells"""
        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            cell = self.board[cy][cx]
            if cell.is_revealed():
                continue

            # Revealing a flagged cell gives its flag back
            if cell.is_flagged():
                cell.toggle_flag()
                self.flags_used -= 1
                self.remaining_mines += 1

            if cell.is_mine():
                self.clicked_mine_pos = (cx, cy)
                self.game_state = GameState.LOST
                continue

            cell.reveal()
            self.unrevealed -= 1

            if cell.is_empty():
                for nx, ny in self._neighbors(cx, cy):
                    if not self.board[ny][nx].is_revealed():
                        pending.append((nx, ny))

    def _neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """In-bounds positions of the 3x3 box around (x, y), excluding the center"""
        neighbors = []
        for dy in [-1, 0, 1]:
            for dx in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if 0 <= nx < self.width and 0 <= ny < self.height:
                    neighbors.append((nx, ny))
        return neighbors

    def _move_mine(self, x: int, y: int):
        """Move the mine at (x, y) to a random mine-free cell"""
        target = self.board[y][x]
        while target.is_mine():
            target = self.board[self.rng.randrange(self.height)][self.rng.randrange(self.width)]

        target.place_mine()
        self.board[y][x].content = EMPTY
        set_adjacent_mines(self.board)

    def _check_win_state(self):
        """Won once every unrevealed cell carries a flag"""
        if self.unrevealed == self.flags_used and self.game_state != GameState.LOST:
            self.game_state = GameState.WON
