"""
Minesweeper Game - Main Entry Point
Play in the terminal or inspect the high score tables
"""

import argparse
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from game import DIFFICULTIES
from scores import ScoreStore, DIFFICULTY_NAMES
from ui import ConsoleGame, format_leaderboard


def play(args: argparse.Namespace):
    """Play a game in the terminal"""
    game = ConsoleGame(ScoreStore(args.score_file), difficulty=args.difficulty)
    game.run()


def show_scores(args: argparse.Namespace):
    """Print the high score tables"""
    store = ScoreStore(args.score_file)
    if not store.file_exists():
        answer = input("The high score file could not be found, "
                       "do you wish to create a new file? (y/n): ")
        if answer.strip().lower() not in ['y', 'yes'] or not store.create_file():
            print(f"No score file at {store.score_file}")
            return
    difficulties = [args.difficulty] if args.difficulty else DIFFICULTY_NAMES
    for difficulty in difficulties:
        print(format_leaderboard(store, difficulty))
        print()


def reset_scores(args: argparse.Namespace):
    """Clear all high scores"""
    store = ScoreStore(args.score_file)
    store.reset_scores()
    print(f"🧹 High scores cleared ({store.score_file})")


def main():
    """Main entry point for the minesweeper game"""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument('--score-file', default=None,
                        help="Path of the high score file (default: ~/.minesweeper/MineScores.txt)")
    subparsers = parser.add_subparsers(dest='command')

    play_parser = subparsers.add_parser('play', help="Play a game in the terminal")
    play_parser.add_argument('--difficulty', choices=list(DIFFICULTIES), default='easy')
    play_parser.set_defaults(func=play)

    scores_parser = subparsers.add_parser('scores', help="Show the high score tables")
    scores_parser.add_argument('--difficulty', choices=list(DIFFICULTIES), default=None)
    scores_parser.set_defaults(func=show_scores)

    reset_parser = subparsers.add_parser('reset-scores', help="Clear all high scores")
    reset_parser.set_defaults(func=reset_scores)

    args = parser.parse_args()
    if args.command is None:
        args = parser.parse_args(sys.argv[1:] + ['play'])

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        sys.exit(0)
    except Exception as e:
        print(f"Error running minesweeper: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
