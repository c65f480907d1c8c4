from __future__ import annotations

from typing import TYPE_CHECKING

from ishido.components.game_state import GameMode
from ishido.constants import (
    FOUR_WAYS_TEXT_Y,
    NEW_BUTTON_TEXT_Y,
    NEXT_STONE_TOP,
    SCORE_TEXT_Y,
    STATUS_CENTER_X,
    TALLY_BAR_HEIGHT,
    TALLY_BAR_WIDTH,
    TALLY_BARS_PER_ROW,
    TALLY_BASE_Y,
    TILE_HEIGHT,
    TILE_WIDTH,
)
from ishido.ui.layout import Rect, new_button_rect, status_area_left, to_top_left

if TYPE_CHECKING:
    from ishido.rendering.context import RenderContext
    from ishido.rendering.sprite_cache import SpriteCache

TEXT_COLOR = (16, 0, 0, 191)
TALLY_COLOR = (32, 16, 16, 128)
BUTTON_COLOR = (222, 0, 0)


def tally_bars(stack_size: int, window_height: float) -> list[Rect]:
    """One small bar per stone left in the stack, ten per row, rows stacking upward."""
    gap_x = TALLY_BAR_WIDTH * 1.5
    gap_y = TALLY_BAR_HEIGHT * 1.5
    start_x = status_area_left() + 18 + TALLY_BAR_WIDTH / 2
    start_y = TALLY_BASE_Y - gap_x * 3
    bars: list[Rect] = []
    for index in range(stack_size):
        row, col = divmod(index, TALLY_BARS_PER_ROW)
        top = start_y - gap_y * row
        bottom = to_top_left(top + TALLY_BAR_HEIGHT, window_height)
        bars.append(Rect(start_x + col * gap_x, bottom, TALLY_BAR_WIDTH, TALLY_BAR_HEIGHT))
    return bars


class StatusRenderer:
    """Status column: next stone preview, score, four-way count, stone tally and the New button."""

    def __init__(self, sprite_cache: SpriteCache | None):
        self._sprites = sprite_cache

    def render(self, arcade, ctx: RenderContext, game_over_reason: str | None = None) -> None:
        height = ctx.window_height
        sprites = self._sprites
        if sprites is not None:
            status = sprites.ensure_overlay_sprite(arcade, "statusarea", sprites.statusarea_texture(arcade))
            sprites.place_sprite(status, status_area_left(), height - status.texture.height)
            if ctx.next_stone is not None:
                preview = sprites.ensure_overlay_sprite(arcade, "next_stone", sprites.stone_texture(arcade, ctx.next_stone))
                left = STATUS_CENTER_X - TILE_WIDTH / 2
                sprites.place_sprite(preview, left, to_top_left(NEXT_STONE_TOP + TILE_HEIGHT, height))
            else:
                sprites.hide_overlay_sprite("next_stone")
            sprites.draw_overlay_sprites()

        arcade.draw_text(str(ctx.score), STATUS_CENTER_X, to_top_left(SCORE_TEXT_Y, height), TEXT_COLOR, 24, anchor_x="center")
        arcade.draw_text(str(ctx.four_ways), STATUS_CENTER_X, to_top_left(FOUR_WAYS_TEXT_Y, height), TEXT_COLOR, 24, anchor_x="center")

        button = new_button_rect(height)
        arcade.draw_lrbt_rectangle_filled(button.left, button.right, button.bottom, button.top, BUTTON_COLOR)
        arcade.draw_text("New", STATUS_CENTER_X, to_top_left(NEW_BUTTON_TEXT_Y, height), (0, 0, 0), 18, anchor_x="center", bold=True)

        for bar in tally_bars(ctx.stack_size, height):
            arcade.draw_lrbt_rectangle_filled(bar.left, bar.right, bar.bottom, bar.top, TALLY_COLOR)

        if ctx.mode == GameMode.GAME_OVER:
            label = "No moves left" if game_over_reason == "no_valid_positions" else "Game over"
            arcade.draw_text(label, STATUS_CENTER_X, to_top_left(SCORE_TEXT_Y + 110, height), TEXT_COLOR, 16, anchor_x="center")
