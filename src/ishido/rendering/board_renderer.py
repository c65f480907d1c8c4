from __future__ import annotations

from typing import TYPE_CHECKING

from ishido.components.tile import OccupiedTile
from ishido.ui.layout import cell_rect
from ishido.utils.scoring import is_interior

if TYPE_CHECKING:
    from ishido.rendering.context import RenderContext
    from ishido.rendering.sprite_cache import SpriteCache
    from ishido.systems.render import RenderSystem


class BoardRenderer:
    """Paints every cell: the stone when occupied, otherwise its background (hinted when valid)."""

    def __init__(self, render_system: RenderSystem, sprite_cache: SpriteCache | None):
        self._rs = render_system
        self._sprites = sprite_cache

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        sprites = self._sprites
        hinted = ctx.hint_positions
        rs._last_cell_layout = {}

        for position, tile in ctx.tiles.items():
            rect = cell_rect(position, ctx.window_height)
            highlighted = position in hinted and not isinstance(tile, OccupiedTile)
            rs._last_cell_layout[position] = {
                "rect": rect,
                "occupied": isinstance(tile, OccupiedTile),
                "hint": highlighted,
            }
            if headless or sprites is None:
                continue
            if isinstance(tile, OccupiedTile):
                texture = sprites.stone_texture(arcade, tile.stone)
            else:
                texture = sprites.background_texture(
                    arcade,
                    ctx.backgrounds.get(position, 0),
                    interior=is_interior(position),
                    hint=highlighted,
                )
            sprite = sprites.ensure_cell_sprite(arcade, position, texture)
            sprites.place_sprite(sprite, rect.left, rect.bottom)

        if not headless and sprites is not None:
            sprites.draw_cell_sprites()
