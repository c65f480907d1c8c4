import random

from esper import World
from ishido.components.game_state import GameState, GameMode
from ishido.components.hint import HintState
from ishido.components.score import Score
from ishido.components.valid_positions import ValidPositions
from ishido.constants import HINT_DELAY


def create_world(
    *,
    rng: random.Random | None = None,
    hint_delay: float = HINT_DELAY,
    legacy_shuffle: bool = False,
) -> World:
    """Create a world holding the session singletons.

    The board itself is dealt by ``SessionSystem.new_game``; until then the
    session entity carries zeroed counters and an empty valid-position set.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "hint_delay", hint_delay)
    setattr(world, "legacy_shuffle", legacy_shuffle)

    world.create_entity(
        GameState(mode=GameMode.PLAYING),
        Score(),
        HintState(),
        ValidPositions(),
    )
    return world
