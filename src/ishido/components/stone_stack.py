from dataclasses import dataclass, field
from typing import List, Optional

from ishido.components.stone import Stone


@dataclass(slots=True)
class StoneStack:
    """Remaining undrawn stones. Drawing takes from the end of the list."""
    stones: List[Stone] = field(default_factory=list)

    def draw(self) -> Optional[Stone]:
        if not self.stones:
            return None
        return self.stones.pop()

    def __len__(self) -> int:
        return len(self.stones)
