# IN THIS FILE: POSITION, ROVERSTATE

from typing import Tuple

from katas.utils.enums import Heading


class Position:
    """
    Integer (x, y) coordinate of the rover.
    No bounds: the plane is unbounded in every direction.
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def translate(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


class RoverState:
    """
    Snapshot of a rover: heading plus coordinates.
    Used for path history and for API responses.
    """

    def __init__(self, heading: Heading, x: int, y: int):
        self.heading = heading
        self.x = x
        self.y = y

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "x": self.x,
            "y": self.y,
            "d": int(self.heading),
            "heading": self.heading.symbol,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoverState):
            return False
        return (self.heading == other.heading and
                self.x == other.x and
                self.y == other.y)

    def __hash__(self) -> int:
        return hash((self.heading, self.x, self.y))

    def __repr__(self) -> str:
        return f"RoverState(x={self.x}, y={self.y}, d={self.heading.name})"
