"""
Minesweeper Console - Text Interface
Plays the game in a terminal by driving the game engine and score store
"""

from typing import Callable, Optional

from game import GameBoard, GameState, GameTimer, DIFFICULTIES
from scores import ScoreStore, DIFFICULTY_NAMES


HELP_TEXT = """How to Play Minesweeper:

Objective: Find all mines without detonating any

Commands:
  r X Y      Reveal the cell at column X, row Y
  f X Y      Flag/unflag a cell
  c X Y      Chord: reveal the neighbors of a number whose flags are all placed
  n [LEVEL]  New game (easy, medium, expert)
  s          Surrender the current game, or start a new one once it is over
  t          Show the best times
  h          Show this help
  q          Quit

Numbers show how many mines are adjacent to that cell.
The first reveal is always safe."""

# Characters used to draw the board
SYMBOLS = {-1: '#', -2: 'F', 0: '.', 9: '*', 10: 'X'}


def render_board(board: GameBoard) -> str:
    """Draw the visible board with column and row indices"""
    visible = board.get_visible_board()
    width = board.width
    lines = ["    " + " ".join(f"{x % 10}" for x in range(width))]
    for y in range(board.height):
        cells = [SYMBOLS.get(int(value), str(int(value))) for value in visible[y]]
        lines.append(f"{y:>3} " + " ".join(cells))
    return "\n".join(lines)


class ConsoleGame:
    """Text front end that forwards player commands to a GameBoard"""

    def __init__(self, score_store: ScoreStore, difficulty: str = 'easy',
                 input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print,
                 timer: Optional[GameTimer] = None):
        self.score_store = score_store
        self.input = input_func
        self.output = output
        self.timer = timer or GameTimer()
        self.difficulty = difficulty
        self.game_board: Optional[GameBoard] = None
        self.game_over_reported = False
        self.new_game(difficulty)

    def new_game(self, difficulty: str):
        """Start a new game with specified difficulty"""
        self.timer.reset()
        self.difficulty = difficulty
        self.game_board = GameBoard.from_difficulty(difficulty)
        self.game_over_reported = False

    def status_line(self) -> str:
        return (f"[{self.difficulty}] Mines: {self.game_board.get_remaining_mines():>3}"
                f"   Time: {self.timer.get_time():.1f}")

    def confirm_score_file(self):
        """Offer to create the score file if it is missing"""
        if self.score_store.file_exists():
            return
        answer = self.input("The high score file could not be found, "
                            "do you wish to create a new file? (y/n): ")
        if answer.strip().lower() in ['y', 'yes']:
            self.score_store.create_file()

    def show_scores(self):
        """Print every best-times table, offering to create a missing score file first"""
        self.confirm_score_file()
        if not self.score_store.file_exists():
            return
        for difficulty in DIFFICULTY_NAMES:
            self.output(format_leaderboard(self.score_store, difficulty))

    def handle_command(self, line: str) -> bool:
        """
        Execute one command line

        Returns:
            False when the player wants to quit
        """
        parts = line.split()
        if not parts:
            return True

        command = parts[0].lower()
        if command == 'q':
            return False
        if command == 'h':
            self.output(HELP_TEXT)
        elif command == 'n':
            difficulty = parts[1] if len(parts) > 1 else self.difficulty
            if difficulty in DIFFICULTIES:
                self.new_game(difficulty)
            else:
                self.output(f"Unknown difficulty: {difficulty}")
        elif command == 's':
            if self.game_board.is_finished():
                self.new_game(self.difficulty)
            else:
                self.game_board.surrender()
        elif command == 't':
            self.show_scores()
        elif command in ('r', 'f', 'c'):
            position = self._parse_position(parts[1:])
            if position is None:
                self.output("Expected two coordinates inside the board")
            else:
                self._on_cell_action(command, *position)
        else:
            self.output(f"Unknown command: {command} (h for help)")

        if self.game_board.is_finished() and not self.game_over_reported:
            self._end_game()
        return True

    def _parse_position(self, args):
        if len(args) != 2:
            return None
        try:
            x, y = int(args[0]), int(args[1])
        except ValueError:
            return None
        if self.game_board.get_cell(x, y) is None:
            return None
        return x, y

    def _on_cell_action(self, command: str, x: int, y: int):
        board = self.game_board
        if command == 'r':
            is_first_click = board.first_move
            board.left_click(x, y)
            # Start timer on first click
            if is_first_click:
                self.timer.start()
        elif command == 'f':
            board.right_click(x, y)
        else:
            board.chord_reveal(x, y)

    def _end_game(self):
        """Handle game end"""
        elapsed = self.timer.stop()
        self.game_over_reported = True
        self.output(render_board(self.game_board))

        if self.game_board.game_state == GameState.LOST:
            self.output("Game over!")
            return

        self.output(f"You won in {elapsed:.1f} seconds!")
        if not self.score_store.is_high_score(self.difficulty, elapsed):
            return

        name = self.input("New high score! Enter your name: ").strip() or "Player"
        rank = self.score_store.add_score(name, elapsed, self.difficulty)
        self.score_store.write_scores()

        if rank == 1:
            self.output(f"NEW RECORD! Best time for {self.difficulty.title()}: {elapsed:.1f}")
        elif rank:
            self.output(f"Top {rank} on the {self.difficulty.title()} leaderboard!")

    def run(self):
        """Main loop"""
        self.confirm_score_file()
        self.output(HELP_TEXT)
        try:
            while True:
                self.output(self.status_line())
                self.output(render_board(self.game_board))
                try:
                    line = self.input("> ")
                except EOFError:
                    break
                if not self.handle_command(line):
                    break
        finally:
            self.timer.shutdown()


def format_leaderboard(score_store: ScoreStore, difficulty: str) -> str:
    """Ranked list of best times for one difficulty"""
    lines = [f"Best times - {difficulty.title()}"]
    table = score_store.get_scores(difficulty)
    if not len(table):
        lines.append("  No times recorded yet")
    for rank, score in enumerate(table.get_scores(), 1):
        lines.append(f"  {rank:2d}.  {score.format_time():>7}  {score.name}")
    return "\n".join(lines)
