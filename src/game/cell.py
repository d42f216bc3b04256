"""
Minesweeper Cell Model
Per-position state: content (mine, empty or adjacent count) and visibility
"""

from enum import Enum

# Content values
MINE = -1
EMPTY = 0


class CellState(Enum):
    """Enumeration for cell states"""
    HIDDEN = "hidden"
    REVEALED = "revealed"
    FLAGGED = "flagged"


class Cell:
    """Represents a single cell on the minesweeper board"""

    def __init__(self, x: int, y: int, content: int = EMPTY):
        self._x = x
        self._y = y
        self.content = content
        self.state = CellState.HIDDEN

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def place_mine(self):
        """Place a mine in this cell"""
        self.content = MINE

    def reveal(self) -> bool:
        """Reveal this cell, returns False if it was not hidden"""
        if self.state == CellState.HIDDEN:
            self.state = CellState.REVEALED
            return True
        return False

    def toggle_flag(self):
        """Toggle flag state on this cell"""
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.HIDDEN

    def is_mine(self) -> bool:
        return self.content == MINE

    def is_empty(self) -> bool:
        return self.content == EMPTY

    def is_revealed(self) -> bool:
        """Check if cell is revealed"""
        return self.state == CellState.REVEALED

    def is_flagged(self) -> bool:
        """Check if cell is flagged"""
        return self.state == CellState.FLAGGED

    def __repr__(self):
        return f"Cell({self._x}, {self._y}, content={self.content}, state={self.state.value})"
