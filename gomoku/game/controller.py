"""
controller.py - Turn controller for Gomoku

The controller owns the board and drives a game to a terminal state as an
explicit state machine:

    AwaitingMove(p) -> MoveRejected(p, reason) -> AwaitingMove(p)
    AwaitingMove(p) -> MoveAccepted(p, pos) -> Won(p) | Tied | AwaitingMove(next p)
    AwaitingMove(p) -> Abandoned(p)            (move source has no more input)

Moves come from an injected move source so games can be driven by a console,
a script, or a test.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional, Protocol, Tuple, Union

from gomoku.debug import debug
from gomoku.errors import GameError, InputError, PositionTakenError
from gomoku.game.board import Board
from gomoku.game.rules import get_winner, get_winning_line, is_available, is_tie
from gomoku.utils import BOARD_SIZE, NUM_PLAYERS, Position, parse_position


@dataclass(frozen=True)
class AwaitingMove:
    player: int


@dataclass(frozen=True)
class MoveRejected:
    player: int
    reason: GameError


@dataclass(frozen=True)
class MoveAccepted:
    player: int
    position: Position


@dataclass(frozen=True)
class Won:
    player: int
    line: Tuple[Position, ...] = field(default=())


@dataclass(frozen=True)
class Tied:
    pass


@dataclass(frozen=True)
class Abandoned:
    player: int


GameState = Union[AwaitingMove, MoveRejected, MoveAccepted, Won, Tied, Abandoned]
TERMINAL_STATES = (Won, Tied, Abandoned)


class MoveSource(Protocol):
    """Supplies the next move for the active player."""

    def next_move(self, player: int, board: Board) -> Optional[Position]:
        """
        Return the next position, or None when no more input is available.

        Raises:
            InputError: if the input cannot be turned into a position on the board
        """
        ...


class ScriptedMoveSource:
    """Move source replaying a fixed sequence of typed lines or positions."""

    def __init__(self, moves: Iterable[Union[str, Tuple[int, int]]]):
        self._moves: Iterator[Union[str, Tuple[int, int]]] = iter(moves)

    def next_move(self, player: int, board: Board) -> Optional[Position]:
        move = next(self._moves, None)
        if move is None:
            return None
        if isinstance(move, str):
            return parse_position(move, board.size)
        return Position(*move)


class GameController:
    """
    Drives a game from the first move to a win, a tie, or abandonment.

    Rejected moves never touch the board and never consume a turn.
    """

    def __init__(self, move_source: MoveSource,
                 size: int = BOARD_SIZE,
                 num_players: int = NUM_PLAYERS,
                 on_transition: Optional[Callable[[GameState], None]] = None):
        if num_players < 2:
            raise ValueError(f"A game needs at least 2 players, got {num_players}")

        self.board = Board(size)
        self.num_players = num_players
        self.move_source = move_source
        self.on_transition = on_transition
        self.moves: List[Tuple[int, Position]] = []
        self.current_player = 0
        self._state: GameState = AwaitingMove(self.current_player)
        debug.debug(f"New game: {size}x{size} board, {num_players} players", "controller")

    @property
    def state(self) -> GameState:
        return self._state

    def is_over(self) -> bool:
        return isinstance(self._state, TERMINAL_STATES)

    def _enter(self, state: GameState) -> GameState:
        self._state = state
        if self.on_transition is not None:
            self.on_transition(state)
        return state

    def step(self) -> GameState:
        """
        Play a single turn.

        Reads one move for the active player, validates and applies it, and
        checks for a terminal outcome.

        Returns:
            The state the game is in after the turn. Terminal states are
            returned unchanged without reading input.
        """
        if self.is_over():
            return self._state

        player = self.current_player
        try:
            position = self.move_source.next_move(player, self.board)
            if position is None:
                debug.info(f"Player {player} abandoned the game", "controller")
                return self._enter(Abandoned(player))
            position = Position(*position)
            if not is_available(self.board, position):
                raise PositionTakenError("Position taken!")
        except (InputError, PositionTakenError) as e:
            debug.debug(f"Rejected move for player {player}: {e}", "controller")
            self._enter(MoveRejected(player, e))
            return self._enter(AwaitingMove(player))

        self.board.set(position.row, position.col, player)
        self.moves.append((player, position))
        self._enter(MoveAccepted(player, position))
        debug.debug(f"Player {player} placed at {tuple(position)}", "controller")

        winner = get_winner(self.board)
        if winner is not None:
            debug.info(f"Player {winner} wins after move at {tuple(position)}", "controller")
            return self._enter(Won(winner, tuple(get_winning_line(self.board))))

        if is_tie(self.board):
            debug.info("Game ends in a tie", "controller")
            return self._enter(Tied())

        self.current_player = (player + 1) % self.num_players
        return self._enter(AwaitingMove(self.current_player))

    def play(self) -> GameState:
        """Step until the game reaches a terminal state and return it."""
        while not self.is_over():
            self.step()
        return self._state
