from dataclasses import dataclass

@dataclass(slots=True)
class CellBackground:
    """Cosmetic background variant for an empty cell (column in the background sheet)."""
    index: int
