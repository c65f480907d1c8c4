from __future__ import annotations

from esper import World

from ishido.components.game_state import GameMode
from ishido.events.bus import EVENT_GAME_MODE_CHANGED, EventBus
from ishido.systems.board_ops import get_game_state


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the session phase and emit a change event when it differs."""

    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode != mode:
        state.mode = mode
        event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)
