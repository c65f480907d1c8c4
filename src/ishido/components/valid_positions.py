from dataclasses import dataclass, field
from typing import FrozenSet

from ishido.components.board_position import Position


@dataclass(slots=True)
class ValidPositions:
    """Cached result of the valid-move scan for the current board and next stone."""
    positions: FrozenSet[Position] = field(default_factory=frozenset)

    def __contains__(self, position: Position) -> bool:
        return position in self.positions

    def __len__(self) -> int:
        return len(self.positions)
