from dataclasses import dataclass

@dataclass(slots=True)
class Score:
    """Running totals for the current session. Both values only ever grow."""
    points: int = 0
    four_ways: int = 0
