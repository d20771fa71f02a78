# katas/commands/interpreter.py
import logging
from typing import Callable, Dict, List

from katas.utils.enums import Instruction

logger = logging.getLogger(__name__)

# Closed dispatch table: every Instruction has exactly one rover operation.
COMMANDS: Dict[Instruction, Callable[['Rover'], None]] = {
    Instruction.FORWARD: lambda rover: rover.move_forward(),
    Instruction.BACKWARD: lambda rover: rover.move_backward(),
    Instruction.LEFT: lambda rover: rover.turn_left(),
    Instruction.RIGHT: lambda rover: rover.turn_right(),
}


def parse_instructions(instructions: str) -> List[Instruction]:
    """
    Validate a whole instruction string without touching any rover.

    Raises:
        InvalidInstructionError: for the first character outside {F, B, L, R}
    """
    return [Instruction.parse(c, i) for i, c in enumerate(instructions)]


def command_for(rover: 'Rover', instruction, index: int = 0) -> Callable[[], None]:
    """
    Bind one instruction to a rover without running it.

    Args:
        rover: Rover the command will act on
        instruction: Instruction member or its single character
        index: Position reported if the character is not recognised
    """
    if not isinstance(instruction, Instruction):
        instruction = Instruction.parse(instruction, index)
    operation = COMMANDS[instruction]
    return lambda: operation(rover)


def execute(rover: 'Rover', instructions: str) -> None:
    """
    Apply instructions to the rover strictly left to right.

    Stops at the first unrecognised character. Everything before it stays
    applied; the bad character applies nothing.
    """
    for index, character in enumerate(instructions):
        instruction = Instruction.parse(character, index)
        COMMANDS[instruction](rover)
        logger.debug("%s[%d] -> %r", character, index, rover.get_state())
