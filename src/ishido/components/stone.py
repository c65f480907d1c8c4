from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Stone:
    """A placeable stone. Two stones with the same color and symbol are interchangeable."""
    color: int
    symbol: int
