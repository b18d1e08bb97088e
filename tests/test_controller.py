from typing import List, Optional

import pytest

from gomoku.errors import InvalidSizeError, MalformedInputError, OutOfBoundsError, PositionTakenError
from gomoku.game.board import Board
from gomoku.game.controller import (Abandoned, AwaitingMove, GameController, GameState, MoveAccepted,
                                    MoveRejected, ScriptedMoveSource, Tied, Won)
from gomoku.game.rules import is_tie
from gomoku.utils import Position


class FailingMoveSource:
    """Move source that must never be asked for a move."""

    def next_move(self, player: int, board: Board) -> Optional[Position]:
        raise AssertionError("Move source should not be called")


def create_controller(moves, **kwargs) -> tuple:
    transitions: List[GameState] = []
    controller = GameController(ScriptedMoveSource(moves), on_transition=transitions.append, **kwargs)
    return controller, transitions


def test_initial_state() -> None:
    controller, _ = create_controller([])
    assert controller.state == AwaitingMove(0)
    assert controller.current_player == 0
    assert controller.board.size == 15
    assert not controller.is_over()


def test_horizontal_win() -> None:
    moves = ["7 0", "0 0", "7 1", "0 1", "7 2", "0 2", "7 3", "0 3", "7 4"]
    controller, _ = create_controller(moves)

    result = controller.play()

    assert result == Won(0, tuple(Position(7, col) for col in range(5)))
    assert controller.is_over()
    assert len(controller.moves) == 9
    assert controller.moves[-1] == (0, Position(7, 4))


def test_second_player_can_win() -> None:
    moves = ["0 0", "5 5", "0 14", "6 5", "14 0", "7 5", "14 14", "8 5", "3 3", "9 5"]
    controller, _ = create_controller(moves)
    result = controller.play()
    assert isinstance(result, Won)
    assert result.player == 1


def test_players_alternate() -> None:
    controller, _ = create_controller(["0 0", "1 1", "2 2"])
    assert controller.step() == AwaitingMove(1)
    assert controller.step() == AwaitingMove(0)
    assert controller.step() == AwaitingMove(1)
    assert [player for player, _ in controller.moves] == [0, 1, 0]


def test_three_players_cycle() -> None:
    controller, _ = create_controller(["0 0", "1 1", "2 2", "3 3"], num_players=3)
    players = []
    for _ in range(4):
        players.append(controller.current_player)
        controller.step()
    assert players == [0, 1, 2, 0]
    assert controller.board.get(2, 2) == 2


def test_rejected_moves_do_not_consume_turn() -> None:
    moves = ["7 7", "7 7", "abc", "1", "15 0", (20, 3), "8 8"]
    controller, transitions = create_controller(moves)

    result = controller.play()

    rejections = [state for state in transitions if isinstance(state, MoveRejected)]
    assert [type(state.reason) for state in rejections] == [
        PositionTakenError, MalformedInputError, MalformedInputError, OutOfBoundsError, OutOfBoundsError,
    ]
    assert all(state.player == 1 for state in rejections)
    assert controller.board.get(7, 7) == 0
    assert controller.board.get(8, 8) == 1
    assert controller.board.empty_count() == 15 * 15 - 2
    assert len(controller.moves) == 2
    # Script exhausted on player 0's turn
    assert result == Abandoned(0)


def test_rejection_returns_to_same_player() -> None:
    controller, transitions = create_controller(["3 3", "3 3"])
    controller.step()
    state = controller.step()

    assert state == AwaitingMove(1)
    assert isinstance(transitions[-2], MoveRejected)
    assert str(transitions[-2].reason) == "Position taken!"


def test_transitions_for_accepted_move() -> None:
    controller, transitions = create_controller(["4 5"])
    controller.step()
    assert transitions == [MoveAccepted(0, Position(4, 5)), AwaitingMove(1)]


def test_tie() -> None:
    controller, transitions = create_controller(["0 0", "0 1", "1 0", "1 1"], size=2)
    result = controller.play()
    assert result == Tied()
    assert transitions[-1] == Tied()
    assert is_tie(controller.board)


def test_win_on_full_board_is_a_win() -> None:
    controller, _ = create_controller([(0, 4)], size=5)
    rows = [
        [0, 0, 0, 0, None],
        [1, 1, 0, 0, 1],
        [0, 0, 1, 1, 0],
        [1, 1, 0, 0, 1],
        [0, 0, 1, 1, 0],
    ]
    for row, cells in enumerate(rows):
        for col, value in enumerate(cells):
            controller.board.set(row, col, value)

    result = controller.step()

    assert result == Won(0, tuple(Position(0, col) for col in range(5)))
    assert is_tie(controller.board)


def test_terminal_state_does_not_read_input() -> None:
    controller, _ = create_controller(["0 0", "0 1", "1 0", "1 1"], size=2)
    controller.play()
    controller.move_source = FailingMoveSource()

    assert controller.step() == Tied()
    assert controller.play() == Tied()


def test_abandon_on_empty_script() -> None:
    controller, transitions = create_controller([])
    assert controller.play() == Abandoned(0)
    assert transitions == [Abandoned(0)]
    assert controller.board.empty_count() == 15 * 15


def test_invalid_size() -> None:
    with pytest.raises(InvalidSizeError):
        GameController(ScriptedMoveSource([]), size=0)


def test_needs_two_players() -> None:
    with pytest.raises(ValueError):
        GameController(ScriptedMoveSource([]), num_players=1)


def test_non_integer_position_is_rejected() -> None:
    controller, transitions = create_controller([(1.5, 2), (1, 2)])

    assert controller.step() == AwaitingMove(0)
    assert isinstance(transitions[0], MoveRejected)
    assert isinstance(transitions[0].reason, OutOfBoundsError)
    assert controller.board.empty_count() == 15 * 15

    assert controller.step() == AwaitingMove(1)
    assert controller.board.get(1, 2) == 0
