from ishido.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
    EVENT_TILE_CLICK,
)
from ishido.ui.layout import board_position_at, new_button_rect

# arcade.MOUSE_BUTTON_LEFT
LEFT_BUTTON = 1


class InputSystem:
    """Maps left-button presses onto the "New" button or a board cell."""

    def __init__(self, event_bus: EventBus, window):
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', LEFT_BUTTON)
        if x is None or y is None or button != LEFT_BUTTON:
            return
        height = self.window.height
        if new_button_rect(height).contains(x, y):
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
            return
        position = board_position_at(x, y, height)
        if position is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, x=position.x, y=position.y)
