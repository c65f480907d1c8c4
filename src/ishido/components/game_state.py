"""Game state resource describing the active session phase."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Session phases; placements are only accepted while PLAYING."""
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the current phase and settlement of the final bonus."""
    mode: GameMode = GameMode.PLAYING
    end_bonus_awarded: bool = False
