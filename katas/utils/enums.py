# IN THIS FILE: HEADINGS and INSTRUCTIONS
from enum import Enum

from katas.utils.errors import InvalidInstructionError


class Heading(int, Enum):
    """
    Rover facing direction.
    Uses even numbers so the codes match the navigation robot's wire format
    (0=NORTH, 2=EAST, 4=SOUTH, 6=WEST).
    """
    NORTH = 0
    EAST = 2
    SOUTH = 4
    WEST = 6

    def __int__(self):
        return self.value

    @property
    def symbol(self) -> str:
        """Compass letter: 'N', 'E', 'S' or 'W'."""
        return self.name[0]

    def rotate(self, steps: int) -> 'Heading':
        """
        Heading reached after `steps` quarter turns clockwise.
        Negative steps turn counter-clockwise.

        Examples:
            NORTH.rotate(1)  -> EAST
            NORTH.rotate(-1) -> WEST
        """
        return Heading((self.value + 2 * steps) % 8)

    @staticmethod
    def parse(value) -> 'Heading':
        """
        Accept a Heading, a compass letter ("N", "east", ...) or an int code.
        Raises ValueError for anything else.
        """
        if isinstance(value, Heading):
            return value
        if isinstance(value, str):
            text = value.strip().upper()
            for heading in Heading:
                if text in (heading.symbol, heading.name):
                    return heading
            raise ValueError(f"Invalid heading: {value!r}. Valid options: N, E, S, W")
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return Heading(value)
            except ValueError:
                raise ValueError(f"Invalid heading code: {value}. Valid codes: 0, 2, 4, 6") from None
        raise ValueError(f"Invalid heading: {value!r}")


class Instruction(str, Enum):
    """
    Rover instruction alphabet.
    Value is the character used in instruction strings.
    """
    FORWARD = "F"
    BACKWARD = "B"
    LEFT = "L"
    RIGHT = "R"

    @staticmethod
    def parse(character: str, index: int = 0) -> 'Instruction':
        """Resolve one character, raising InvalidInstructionError if it is not in the alphabet."""
        try:
            return Instruction(character)
        except ValueError:
            raise InvalidInstructionError(character, index) from None
