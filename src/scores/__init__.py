"""
Scores package initialization
"""

from .leaderboard import (Score, ScoreTable, ScoreStore, parse_score_line,
                          default_score_file, MAX_SCORES, DIFFICULTY_NAMES)

__all__ = ['Score', 'ScoreTable', 'ScoreStore', 'parse_score_line',
           'default_score_file', 'MAX_SCORES', 'DIFFICULTY_NAMES']
