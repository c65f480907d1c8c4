from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Board coordinate; x is the column (0 = left), y the row (0 = top)."""
    x: int
    y: int


@dataclass(slots=True)
class BoardPosition:
    position: Position
