# IN THIS FILE: ERRORS RAISED BY THE KATAS


class KataError(Exception):
    """Base class for errors raised by this package."""


class InvalidInstructionError(KataError, ValueError):
    """
    Raised by the rover interpreter for a character outside {F, B, L, R}.

    Attributes:
        character: The offending character
        index: Zero-based position of the character in the instruction string
    """

    def __init__(self, character: str, index: int):
        self.character = character
        self.index = index
        super().__init__(f"Invalid instruction {character!r} at index {index}")


class InsufficientStockError(KataError):
    """Raised when a purchase asks for more copies than are in stock."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough stock to make the CD purchase "
            f"(requested {requested}, available {available})"
        )
