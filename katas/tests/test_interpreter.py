import logging

import pytest

from katas.commands import interpreter
from katas.entities.rover import Rover
from katas.utils.enums import Heading, Instruction
from katas.utils.errors import InvalidInstructionError, KataError


def test_dispatch_table_covers_every_instruction():
    assert set(interpreter.COMMANDS) == set(Instruction)


def test_parse_instructions():
    assert interpreter.parse_instructions("FBLR") == [
        Instruction.FORWARD,
        Instruction.BACKWARD,
        Instruction.LEFT,
        Instruction.RIGHT,
    ]


def test_parse_empty():
    assert interpreter.parse_instructions("") == []


@pytest.mark.parametrize("text, character, index", [
    ("FX", "X", 1),
    ("f", "f", 0),
    ("LLR B", " ", 3),
])
def test_parse_reports_first_invalid_character(text, character, index):
    with pytest.raises(InvalidInstructionError) as excinfo:
        interpreter.parse_instructions(text)
    assert excinfo.value.character == character
    assert excinfo.value.index == index


def test_invalid_instruction_error_types():
    error = InvalidInstructionError("X", 1)
    assert isinstance(error, KataError)
    assert isinstance(error, ValueError)
    assert "'X'" in str(error)
    assert "1" in str(error)


def test_execute_folds_left_to_right():
    # "FR" and "RF" differ only in order
    a = Rover("N")
    b = Rover("N")
    interpreter.execute(a, "FR")
    interpreter.execute(b, "RF")
    assert a.get_position() == (0, 1)
    assert b.get_position() == (1, 0)


def test_command_for_accepts_enum_member():
    rover = Rover("N")
    interpreter.command_for(rover, Instruction.RIGHT)()
    assert rover.get_heading() == Heading.EAST


def test_command_for_reports_given_index():
    with pytest.raises(InvalidInstructionError) as excinfo:
        interpreter.command_for(Rover("N"), "?", index=7)
    assert excinfo.value.index == 7


def test_execute_logs_each_step(caplog):
    with caplog.at_level(logging.DEBUG, logger="katas.commands.interpreter"):
        interpreter.execute(Rover("N"), "LF")
    assert len(caplog.records) == 2


@pytest.mark.parametrize("start, steps, end", [
    (Heading.NORTH, 1, Heading.EAST),
    (Heading.NORTH, -1, Heading.WEST),
    (Heading.WEST, 1, Heading.NORTH),
    (Heading.EAST, 2, Heading.WEST),
    (Heading.SOUTH, 4, Heading.SOUTH),
])
def test_heading_rotate(start, steps, end):
    assert start.rotate(steps) == end
