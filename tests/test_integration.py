"""
Integration tests for the complete minesweeper game
Tests interaction between different components
"""

import random

import pytest
from game import GameBoard, GameState, GameTimer
from scores import ScoreStore


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestGameIntegration:
    """Integration tests for complete game scenarios"""

    @pytest.fixture
    def store(self, tmp_path):
        store = ScoreStore(str(tmp_path / "MineScores.txt"))
        store.create_file()
        return store

    def play_to_win(self, board, clock, timer):
        """Reveal every safe cell and flag every mine, one second per move"""
        cells = [cell for row in board.board for cell in row]
        start = next(c for c in cells if not c.is_mine())
        board.left_click(start.x, start.y)
        timer.start()

        for cell in cells:
            if board.is_finished():
                break
            clock.now += 1.0
            for _ in range(20):
                timer.tick()
            if cell.is_mine():
                board.right_click(cell.x, cell.y)
            elif not cell.is_revealed():
                board.left_click(cell.x, cell.y)
        return timer.stop()

    def test_complete_easy_game_scenario(self, store):
        """Test a complete game scenario from start to high score"""
        board = GameBoard.from_difficulty('easy', rng=random.Random(11))
        clock = FakeClock()
        timer = GameTimer(clock=clock, threaded=False)

        elapsed = self.play_to_win(board, clock, timer)

        assert board.game_state == GameState.WON
        assert board.get_remaining_mines() == 0
        assert elapsed > 0

        difficulty = board.get_difficulty()
        assert store.is_high_score(difficulty, elapsed)
        store.add_score("Winner", elapsed, difficulty)
        store.write_scores()

        reloaded = ScoreStore(store.score_file)
        best = reloaded.get_scores('easy').get_score_at_index(0)
        assert (best.name, best.time) == ("Winner", round(elapsed, 1))

    def test_losing_game_scenario(self):
        """Test a game where player hits a mine"""
        board = GameBoard(3, 3, 8, rng=random.Random(2))

        board.left_click(1, 1)
        assert board.game_state == GameState.UNFINISHED

        mine = next(c for row in board.board for c in row if c.is_mine())
        board.left_click(mine.x, mine.y)

        assert board.game_state == GameState.LOST
        assert board.clicked_mine_pos == (mine.x, mine.y)

    def test_new_game_after_loss(self):
        """Test that a reset board can be played again"""
        board = GameBoard.from_difficulty('medium', rng=random.Random(4))
        board.surrender()

        board.reset_game()
        board.left_click(8, 8)

        assert board.game_state != GameState.LOST
        assert board.unrevealed < 16 * 16
