# IN THIS FILE: ROVER HEADING, POSITION & MOVEMENT HISTORY

from typing import Callable, Dict, List, Tuple

from katas.commands import interpreter
from katas.utils.consts import DEFAULT_X, DEFAULT_Y, TURN_LEFT_STEPS, TURN_RIGHT_STEPS
from katas.utils.enums import Heading
from katas.utils.types import Position, RoverState

# One forward step for each heading; backward is the negation.
FORWARD_DELTAS: Dict[Heading, Tuple[int, int]] = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}


class Rover:
    """
    Rover on an unbounded integer plane.

    Heading and position change only through the turn/move operations or
    through execute(). Not safe for concurrent mutation; callers that share
    a rover between threads must serialize access themselves.
    """

    def __init__(self, heading, x: int = DEFAULT_X, y: int = DEFAULT_Y):
        """
        Initialize rover at starting position.

        Args:
            heading: Heading member, compass letter ("N") or code (0/2/4/6)
            x, y: Starting coordinates
        """
        if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
            raise TypeError(f"Rover coordinates must be integers, got ({x!r}, {y!r})")
        self._heading = Heading.parse(heading)
        self._position = Position(x, y)
        self.path_history: List[RoverState] = [self.get_state()]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_heading(self) -> Heading:
        return self._heading

    def get_position(self) -> Tuple[int, int]:
        return self._position.as_tuple()

    def get_state(self) -> RoverState:
        return RoverState(self._heading, self._position.x, self._position.y)

    # ------------------------------------------------------------------
    # Orientation
    # ------------------------------------------------------------------

    def turn_right(self) -> None:
        self._turn(TURN_RIGHT_STEPS)

    def turn_left(self) -> None:
        self._turn(TURN_LEFT_STEPS)

    def _turn(self, steps: int) -> None:
        self._heading = self._heading.rotate(steps)
        self.path_history.append(self.get_state())

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def move_forward(self) -> None:
        self._move(1)

    def move_backward(self) -> None:
        self._move(-1)

    def _move(self, sign: int) -> None:
        dx, dy = FORWARD_DELTAS[self._heading]
        self._position.translate(dx * sign, dy * sign)
        self.path_history.append(self.get_state())

    # ------------------------------------------------------------------
    # Instructions
    # ------------------------------------------------------------------

    def command_for(self, instruction) -> Callable[[], None]:
        """Operation for a single instruction ("F", "B", "L" or "R"), not yet run."""
        return interpreter.command_for(self, instruction)

    def execute(self, instructions: str) -> None:
        """
        Run an instruction string such as "RFF".

        Raises:
            InvalidInstructionError: on the first unrecognised character.
                Instructions before it remain applied.
        """
        interpreter.execute(self, instructions)

    def __repr__(self) -> str:
        return f"Rover(x={self._position.x}, y={self._position.y}, d={self._heading.name})"
