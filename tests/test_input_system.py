import pytest

from ishido.components.board_position import Position
from ishido.constants import STATUS_CENTER_X, TILE_HEIGHT, TILE_WIDTH
from ishido.events.bus import (
    EVENT_MOVE_REJECTED,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
    EVENT_TILE_CLICK,
    EventBus,
)
from ishido.systems.board_ops import get_stack, tile_at
from ishido.systems.input import InputSystem
from ishido.ui.layout import board_position_at, cell_rect, new_button_rect

from helpers import ABOVE_CENTER_ANCHOR, DummyWindow, EventCapture, rig_single_match, start_session


def cell_center(position: Position, window_height: float):
    rect = cell_rect(position, window_height)
    return rect.left + rect.width / 2, rect.bottom + rect.height / 2


def test_mouse_press_on_top_left_cell():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    capture = EventCapture(bus, EVENT_TILE_CLICK)

    bus.emit(EVENT_MOUSE_PRESS, x=TILE_WIDTH / 2, y=window.height - TILE_HEIGHT / 2, button=1)

    assert capture[EVENT_TILE_CLICK] == [{"x": 0, "y": 0}]


def test_mouse_press_on_bottom_right_cell():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    capture = EventCapture(bus, EVENT_TILE_CLICK)

    x, y = cell_center(Position(11, 7), window.height)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)

    assert capture[EVENT_TILE_CLICK] == [{"x": 11, "y": 7}]


def test_status_area_press_is_not_a_tile_click():
    bus = EventBus()
    InputSystem(bus, DummyWindow())
    capture = EventCapture(bus, EVENT_TILE_CLICK, EVENT_NEW_GAME_REQUEST)

    bus.emit(EVENT_MOUSE_PRESS, x=700, y=300, button=1)

    assert capture[EVENT_TILE_CLICK] == []
    assert capture[EVENT_NEW_GAME_REQUEST] == []


def test_new_button_requests_new_game():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    capture = EventCapture(bus, EVENT_NEW_GAME_REQUEST)
    button = new_button_rect(window.height)

    bus.emit(EVENT_MOUSE_PRESS, x=STATUS_CENTER_X, y=button.bottom + button.height / 2, button=1)

    assert len(capture[EVENT_NEW_GAME_REQUEST]) == 1


def test_right_button_is_ignored():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    capture = EventCapture(bus, EVENT_TILE_CLICK)
    bus.emit(EVENT_MOUSE_PRESS, x=10, y=window.height - 10, button=4)
    assert capture[EVENT_TILE_CLICK] == []


@pytest.mark.parametrize("x, y", [(-1, 100), (TILE_WIDTH * 12 + 1, 100), (10, 600)])
def test_board_position_outside_board(x, y):
    assert board_position_at(x, y, 528) is None


def test_every_cell_center_maps_back_to_its_position():
    for col in range(12):
        for row in range(8):
            x, y = cell_center(Position(col, row), 528)
            assert board_position_at(x, y, 528) == Position(col, row)


def test_window_press_places_stone_and_repeat_is_rejected():
    bus, world, session, _ = start_session()
    window = DummyWindow()
    InputSystem(bus, window)
    capture = EventCapture(bus, EVENT_MOVE_REJECTED)
    stone = rig_single_match(session)
    x, y = cell_center(ABOVE_CENTER_ANCHOR, window.height)

    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1, modifiers=0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1, modifiers=0)

    assert tile_at(world, ABOVE_CENTER_ANCHOR).stone == stone
    assert len(get_stack(world)) == 64
    assert [e["reason"] for e in capture[EVENT_MOVE_REJECTED]] == ["invalid_position"]
