import logging

import pytest

from gomoku.debug import DebugLevel, DebugManager
from gomoku.errors import InputError, MalformedInputError, OutOfBoundsError
from gomoku.utils import DIRECTION_VECTORS, Direction, Position, parse_position, step

BOARD_SIZE = 15


@pytest.mark.parametrize("text, expected", [
    ("12 14", Position(12, 14)),
    ("0 1", Position(0, 1)),
    (" 12  14  ", Position(12, 14)),
    ("3\t4\n", Position(3, 4)),
    ("+3 4", Position(3, 4)),
])
def test_parse_position(text: str, expected: Position) -> None:
    assert parse_position(text, BOARD_SIZE) == expected


@pytest.mark.parametrize("text", [
    "12 15", "-1 2", "12.0 15", "12 1 1", "he he", "1, 2", "", "\n",
    "1_0 2", "\uff11 2", "\u0661 2", "2 +\u0663",
])
def test_parse_position_rejects(text: str) -> None:
    with pytest.raises(InputError):
        parse_position(text, BOARD_SIZE)


@pytest.mark.parametrize("text, error, message", [
    ("1 2 3", MalformedInputError, "Not 2 parts"),
    ("", MalformedInputError, "Not 2 parts"),
    ("a 2", MalformedInputError, "Not an integer"),
    ("1.5 2", MalformedInputError, "Not an integer"),
    ("1_0 2", MalformedInputError, "Not an integer"),
    ("\uff11 2", MalformedInputError, "Not an integer"),
    ("3 \u0661", MalformedInputError, "Not an integer"),
    ("15 0", OutOfBoundsError, "Too large"),
    ("0 -3", OutOfBoundsError, "Negative"),
])
def test_parse_position_error_kinds(text: str, error: type, message: str) -> None:
    with pytest.raises(error, match=message):
        parse_position(text, BOARD_SIZE)


def test_direction_scan_order() -> None:
    assert list(DIRECTION_VECTORS) == [
        Direction.HORIZONTAL, Direction.VERTICAL, Direction.DIAGONAL_UP, Direction.DIAGONAL_DOWN,
    ]


def test_step() -> None:
    assert step((5, 5), Direction.DIAGONAL_UP, 2) == Position(3, 7)
    assert step((5, 5), Direction.VERTICAL) == Position(6, 5)


def test_debug_level_from_string() -> None:
    manager = DebugManager()
    assert manager.set_from_string("debug")
    assert manager.level == DebugLevel.DEBUG
    assert not manager.set_from_string("loud")
    assert manager.level == DebugLevel.DEBUG
    manager.configure(level=DebugLevel.WARNING)


def test_debug_component_filter(caplog) -> None:
    manager = DebugManager(level=DebugLevel.INFO)
    manager.configure(components=["rules"])
    logger = logging.getLogger("gomoku")
    logger.addHandler(caplog.handler)
    try:
        manager.info("shown", "rules")
        manager.info("hidden", "board")
    finally:
        logger.removeHandler(caplog.handler)
        manager.configure(level=DebugLevel.WARNING)

    messages = [record.getMessage() for record in caplog.records]
    assert "[rules] shown" in messages
    assert "[board] hidden" not in messages


def test_debug_timer() -> None:
    manager = DebugManager()
    manager.start_timer("work")
    assert manager.end_timer("work") >= 0.0
    assert manager.end_timer("work") is None
