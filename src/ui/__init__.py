"""
UI package initialization
"""

from .console import ConsoleGame, render_board, format_leaderboard

__all__ = ['ConsoleGame', 'render_board', 'format_leaderboard']
