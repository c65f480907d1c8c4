from dataclasses import dataclass
from typing import Optional

from ishido.components.stone import Stone

@dataclass(slots=True)
class Board:
    cols: int
    rows: int
    # Stone offered to the player; None once the deck is exhausted.
    next_stone: Optional[Stone] = None
