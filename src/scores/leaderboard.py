"""
Minesweeper Leaderboard System
Ranks best times per difficulty and persists them to a flat score file
"""

import math
import os
from typing import Dict, List, Optional, Tuple

MAX_SCORES = 10
SEPARATOR = ";"
DIFFICULTY_NAMES = ("easy", "medium", "expert")
SCORE_FILE_NAME = "MineScores.txt"


class Score:
    """Represents a single leaderboard entry"""

    __slots__ = ("_name", "_time")

    def __init__(self, name: str, time: float):
        self._name = name
        self._time = round(time, 1)

    @property
    def name(self) -> str:
        return self._name

    @property
    def time(self) -> float:
        return self._time

    def format_time(self) -> str:
        """Format time with one decimal"""
        return f"{self._time:.1f}"

    def __eq__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return (self._name, self._time) == (other._name, other._time)

    def __hash__(self):
        return hash((self._name, self._time))

    def __repr__(self):
        return f"Score({self._name!r}, {self._time})"


class ScoreTable:
    """Best times for one difficulty, ascending, at most MAX_SCORES entries"""

    def __init__(self, difficulty: str):
        self.difficulty = difficulty
        self.scores: List[Score] = []

    def __len__(self):
        return len(self.scores)

    def get_score_at_index(self, index: int) -> Score:
        return self.scores[index]

    def get_scores(self) -> List[Score]:
        return list(self.scores)

    def is_high_score(self, time: float) -> bool:
        """Check if a time would make it into the table"""
        if len(self.scores) < MAX_SCORES:
            return True
        return any(time < score.time for score in self.scores)

    def add_score(self, name: str, time: float) -> Optional[int]:
        """
        Insert a score at its rank

        Ties go below existing entries. A time worse than every entry of a
        full table is dropped.

        Returns:
            1-based rank of the new entry, or None if it was dropped
        """
        score = Score(name, time)
        for index, existing in enumerate(self.scores):
            if score.time < existing.time:
                self.scores.insert(index, score)
                del self.scores[MAX_SCORES:]
                return index + 1
        if len(self.scores) < MAX_SCORES:
            self.scores.append(score)
            return len(self.scores)
        return None

    def to_lines(self) -> List[str]:
        """Serialize as one 'difficulty;name;time' line per entry"""
        return [SEPARATOR.join((self.difficulty, score.name, score.format_time()))
                for score in self.scores]

    def __str__(self):
        return "".join(line + "\n" for line in self.to_lines())


def parse_score_line(line: str) -> Tuple[str, str, float]:
    """
    Parse one score file line into (difficulty, name, time)

    Names may themselves contain the separator: the first field is the
    difficulty, the last is the time and everything in between is the name.
    """
    fields = line.rstrip("\r\n").split(SEPARATOR)
    if len(fields) < 3:
        raise ValueError(f"Malformed score line: {line!r}")
    difficulty = fields[0]
    name = SEPARATOR.join(fields[1:-1])
    time = float(fields[-1])
    if not math.isfinite(time) or time < 0:
        raise ValueError(f"Invalid time in score line: {line!r}")
    return difficulty, name, time


def default_score_file() -> str:
    """Score file location in the user's home directory"""
    return os.path.join(os.path.expanduser("~"), ".minesweeper", SCORE_FILE_NAME)


class ScoreStore:
    """Manages the score tables of every difficulty and their persistence"""

    def __init__(self, score_file: str = None):
        self.score_file = score_file or default_score_file()
        self.tables: Dict[str, ScoreTable] = self._empty_tables()
        self.score_file_exists = os.path.exists(self.score_file)
        if self.score_file_exists:
            self._read_scores()

    @staticmethod
    def _empty_tables() -> Dict[str, ScoreTable]:
        return {difficulty: ScoreTable(difficulty) for difficulty in DIFFICULTY_NAMES}

    def file_exists(self) -> bool:
        return self.score_file_exists

    def create_file(self) -> bool:
        """
        Create an empty score file, once the player has agreed to it

        Returns True if the file could be written
        """
        if self._write_text(""):
            self.score_file_exists = True
        return self.score_file_exists

    def get_scores(self, difficulty: str) -> ScoreTable:
        return self.tables[difficulty]

    def add_score(self, name: str, time: float, difficulty: str) -> Optional[int]:
        return self.tables[difficulty].add_score(name, time)

    def is_high_score(self, difficulty: str, time: float) -> bool:
        """Check if a time qualifies; always False without a score file"""
        if not self.score_file_exists:
            return False
        return self.tables[difficulty].is_high_score(time)

    def reset_scores(self):
        """Clear every table and overwrite the score file"""
        self.tables = self._empty_tables()
        self._write_text("")

    def write_scores(self) -> bool:
        """Overwrite the score file with every table"""
        return self._write_text("".join(str(table) for table in self.tables.values()))

    def _read_scores(self):
        """Load scores; a malformed line stops loading the rest of the file"""
        try:
            with open(self.score_file, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading score file: {e}")
            return

        for line in lines:
            if not line.strip():
                continue
            try:
                difficulty, name, time = parse_score_line(line)
                self.tables[difficulty].add_score(name, time)
            except (ValueError, KeyError) as e:
                print(f"Error parsing score file: {e}")
                return

    def _write_text(self, text: str) -> bool:
        try:
            directory = os.path.dirname(self.score_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.score_file, "w", encoding="utf-8") as f:
                f.write(text)
            return True
        except OSError as e:
            print(f"Error saving score file: {e}")
            return False
