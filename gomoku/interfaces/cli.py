"""
cli.py - Command-line interface for Gomoku

This module provides a CLI for playing Gomoku interactively, checking board
positions for a winner or tie, and benchmarking the win detector.
"""

import argparse
import sys
from typing import Callable, List, Optional, Sequence

import numpy as np

from gomoku.debug import debug
from gomoku.errors import InvalidSizeError, MalformedInputError
from gomoku.game.board import Board
from gomoku.game.controller import (Abandoned, GameController, GameState, MoveAccepted,
                                    MoveRejected, Tied, Won)
from gomoku.game.rules import get_available_positions, get_winner, get_winning_line, is_tie
from gomoku.utils import BOARD_SIZE, NUM_PLAYERS, WIN_LENGTH, Position, parse_position

QUIT_COMMANDS = ('q', 'quit', 'exit')


class ConsoleMoveSource:
    """Reads moves typed as "row col" from the console."""

    def __init__(self, input_fn: Callable[[str], str] = input):
        self._input = input_fn

    def next_move(self, player: int, board: Board) -> Optional[Position]:
        try:
            line = self._input(f"Player {player}, please input your position (row col): ")
        except EOFError:
            return None

        if line.strip().lower() in QUIT_COMMANDS:
            return None
        return parse_position(line, board.size)


class RandomMoveSource:
    """Picks uniformly among the empty cells. Used for benchmarking."""

    def __init__(self, rng: np.random.Generator):
        self._rng = rng

    def next_move(self, player: int, board: Board) -> Optional[Position]:
        available = get_available_positions(board)
        if not available:
            return None
        return available[int(self._rng.integers(len(available)))]


def parse_board_string(text: str) -> Board:
    """
    Build a board from rows separated by '/', one character per cell.

    '.' marks an empty cell and a digit marks the player occupying it,
    e.g. "0.../.1../..../...." for a 4x4 board.

    Raises:
        MalformedInputError: if a cell character is neither '.' nor a digit
        InvalidSizeError: if the rows do not form a square
    """
    rows = []
    for line in text.strip().split('/'):
        cells = []
        for char in line.strip():
            if char == '.':
                cells.append(None)
            elif char.isdigit():
                cells.append(int(char))
            else:
                raise MalformedInputError(f"Unexpected cell character {char!r}")
        rows.append(cells)
    return Board.from_rows(rows)


class SimpleCLI:
    """Simple command-line interface for Gomoku."""

    def __init__(self, input_fn: Callable[[str], str] = input):
        """Initialize the CLI."""
        self.input_fn = input_fn
        self.args = None
        self.controller: Optional[GameController] = None

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Gomoku CLI')
        parser.add_argument('--debug-level', default='warning',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            help='Logging verbosity')
        parser.add_argument('--log-file', default=None, help='Also write log records to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        # Play command
        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--size', type=int, default=BOARD_SIZE, help='Board side length')
        play_parser.add_argument('--players', type=int, default=NUM_PLAYERS, help='Number of players')

        # Check command
        check_parser = subparsers.add_parser('check', help='Check a board position for a winner or tie')
        check_parser.add_argument('--position', type=str, required=True,
                                  help="Rows separated by '/', '.' for empty and a digit for a player")

        # Benchmark command
        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark random self-play games')
        benchmark_parser.add_argument('--iterations', type=int, default=100,
                                      help='Number of games to play')
        benchmark_parser.add_argument('--size', type=int, default=BOARD_SIZE, help='Board side length')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

        self.args = parser.parse_args(argv)
        if self.args.command == 'play' and self.args.players < 2:
            parser.error(f"--players must be at least 2, got {self.args.players}")

        debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run the CLI based on the parsed arguments and return an exit status."""
        if not self.args:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                self.play_game()
            elif self.args.command == 'check':
                return self.check_position()
            elif self.args.command == 'benchmark':
                self.benchmark()
            else:
                print("Please specify a command. Use --help for options.")
                return 1
        except InvalidSizeError as e:
            debug.error(str(e), "cli")
            print(f"Error: {e}")
            return 2
        finally:
            debug.configure(log_file="")
        return 0

    def play_game(self) -> GameState:
        """Play a Gomoku game interactively."""
        self.controller = GameController(ConsoleMoveSource(self.input_fn),
                                         size=self.args.size,
                                         num_players=self.args.players,
                                         on_transition=self._show_transition)
        print(f"Starting a new Gomoku game! Get {WIN_LENGTH} in a row to win.")
        print("Enter a move as 'row col', or 'q' to quit.")
        print(self.controller.board.render())
        return self.controller.play()

    def _show_transition(self, state: GameState) -> None:
        if isinstance(state, MoveRejected):
            print(state.reason)
        elif isinstance(state, MoveAccepted):
            print(f"Player {state.player} plays {state.position.row} {state.position.col}")
            print(self.controller.board.render())
        elif isinstance(state, Won):
            self._print_winning_line(state)
            print(f"Player {state.player} wins!")
        elif isinstance(state, Tied):
            print("It's a tie!")
        elif isinstance(state, Abandoned):
            print("Quitting game.")

    def _print_winning_line(self, state: Won) -> None:
        cells = " ".join(f"({row}, {col})" for row, col in state.line)
        print(f"Winning line: {cells}")

    def check_position(self) -> int:
        """Report the winner, winning line and tie status of a position and return an exit status."""
        try:
            board = parse_board_string(self.args.position)
        except MalformedInputError as e:
            print(f"Error parsing position: {e}")
            return 2

        print("Loaded position:")
        print(board.render())

        winner = get_winner(board)
        if winner is not None:
            line = get_winning_line(board)
            print(f"Win for player {winner} detected at {[tuple(p) for p in line]}")
        elif is_tie(board):
            print("Board is full: tie")
        else:
            print("No win detected for any player")
            print(f"Empty spaces: {board.empty_count()}")
        return 0

    def benchmark(self) -> None:
        """Benchmark random self-play games."""
        rng = np.random.default_rng(self.args.seed)
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} games on a {self.args.size}x{self.args.size} board...")

        results: List[GameState] = []
        total_moves = 0
        debug.start_timer("benchmark")
        for _ in range(iterations):
            controller = GameController(RandomMoveSource(rng), size=self.args.size)
            results.append(controller.play())
            total_moves += len(controller.moves)
        elapsed = debug.end_timer("benchmark", "cli") or 0.0

        wins = sum(isinstance(result, Won) for result in results)
        ties = sum(isinstance(result, Tied) for result in results)
        print(f"Played {iterations} games with {total_moves} moves: {wins} wins, {ties} ties")
        if iterations and total_moves:
            print(f"{elapsed:.6f} seconds total, "
                  f"{elapsed / iterations * 1000:.3f} ms per game, "
                  f"{elapsed / total_moves * 1000:.3f} ms per move")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
