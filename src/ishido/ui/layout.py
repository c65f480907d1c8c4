"""Screen geometry shared by the render and input systems.

Board coordinates count rows from the top of the window while arcade
reports pixels from the bottom, so every conversion goes through here.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import floor

from ishido.components.board_position import Position
from ishido.constants import (
    BOARD_COLS,
    BOARD_PIXEL_WIDTH,
    BOARD_ROWS,
    NEW_BUTTON_HEIGHT,
    NEW_BUTTON_TEXT_Y,
    NEW_BUTTON_WIDTH,
    STATUS_CENTER_X,
    TILE_HEIGHT,
    TILE_WIDTH,
)


@dataclass(frozen=True, slots=True)
class Rect:
    left: float
    bottom: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.bottom <= y <= self.top


def to_top_left(y: float, window_height: float) -> float:
    return window_height - y


def board_position_at(x: float, y: float, window_height: float) -> Position | None:
    """Board cell under the arcade pixel ``(x, y)``, or None when off the board."""
    top_y = to_top_left(y, window_height)
    if x < 0 or top_y < 0:
        return None
    col = floor(x / TILE_WIDTH)
    row = floor(top_y / TILE_HEIGHT)
    if 0 <= col < BOARD_COLS and 0 <= row < BOARD_ROWS:
        return Position(col, row)
    return None


def cell_rect(position: Position, window_height: float) -> Rect:
    """Arcade-space rectangle covering the board cell at ``position``."""
    left = position.x * TILE_WIDTH
    bottom = window_height - (position.y + 1) * TILE_HEIGHT
    return Rect(left, bottom, TILE_WIDTH, TILE_HEIGHT)


def new_button_rect(window_height: float) -> Rect:
    # The label baseline sits at NEW_BUTTON_TEXT_Y; the button extends a little below it.
    top = to_top_left(NEW_BUTTON_TEXT_Y - (NEW_BUTTON_HEIGHT - 8), window_height)
    return Rect(
        STATUS_CENTER_X - NEW_BUTTON_WIDTH / 2,
        top - NEW_BUTTON_HEIGHT,
        NEW_BUTTON_WIDTH,
        NEW_BUTTON_HEIGHT,
    )


def status_area_left() -> float:
    return BOARD_PIXEL_WIDTH
