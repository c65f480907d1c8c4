from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, modifiers
EVENT_TILE_CLICK = "tile_click"            # payload: x, y (board coordinates)
EVENT_NEW_GAME_REQUEST = "new_game_request"  # payload: None
EVENT_HINT_REQUEST = "hint_request"        # payload: visible=bool


# ============================================================================
# SESSION
# ============================================================================
EVENT_GAME_STARTED = "game_started"        # payload: next_stone=Stone|None, stack_size=int
EVENT_STONE_PLACED = "stone_placed"        # payload: position=Position, stone=Stone, matches=int, points=int, bonus=int
EVENT_MOVE_REJECTED = "move_rejected"      # payload: position=Position, reason=str
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, four_ways=int, delta=int
EVENT_FOUR_WAY_ACHIEVED = "four_way_achieved"  # payload: count=int, bonus=int
EVENT_HINT_CHANGED = "hint_changed"        # payload: visible=bool
EVENT_GAME_OVER = "game_over"              # payload: score=int, remaining=int, bonus=int, reason=str
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode, new_mode=GameMode
