from __future__ import annotations

from typing import Any

from ishido.components.board_position import Position
from ishido.components.stone import Stone
from ishido.constants import TILE_HEIGHT, TILE_WIDTH
from ishido.rendering.assets import Assets

# Rows of the background sheet.
BACKGROUND_ROW_BORDER = 0
BACKGROUND_ROW_INTERIOR = 1
# Hint variants sit two rows below their plain counterparts.
BACKGROUND_HINT_OFFSET = 2


class SpriteCache:
    """Cuts textures out of the image sheets once and keeps one sprite per board cell."""

    def __init__(self, assets: Assets):
        self._assets = assets
        self._texture_cache: dict[tuple, Any] = {}
        self._cell_sprite_map: dict[Position, Any] = {}
        self._cell_sprites: Any | None = None
        self._overlay_sprite_map: dict[str, Any] = {}
        self._overlay_sprites: Any | None = None

    # ------------------------------------------------------------------
    # Textures
    # ------------------------------------------------------------------
    def stone_texture(self, arcade_module, stone: Stone):
        key = ("stone", stone.color, stone.symbol)
        return self._cut(arcade_module, key, self._assets.tileset, stone.color, stone.symbol)

    def background_texture(self, arcade_module, variant: int, *, interior: bool, hint: bool):
        row = BACKGROUND_ROW_INTERIOR if interior else BACKGROUND_ROW_BORDER
        if hint:
            row += BACKGROUND_HINT_OFFSET
        key = ("background", variant, row)
        return self._cut(arcade_module, key, self._assets.background, variant, row)

    def statusarea_texture(self, arcade_module):
        key = ("statusarea",)
        cached = self._texture_cache.get(key)
        if cached is None:
            cached = arcade_module.Texture(self._assets.statusarea)
            self._texture_cache[key] = cached
        return cached

    def _cut(self, arcade_module, key: tuple, sheet, col: int, row: int):
        cached = self._texture_cache.get(key)
        if cached is not None:
            return cached
        left = col * TILE_WIDTH
        top = row * TILE_HEIGHT
        region = sheet.crop((left, top, left + TILE_WIDTH, top + TILE_HEIGHT))
        texture = arcade_module.Texture(region)
        self._texture_cache[key] = texture
        return texture

    # ------------------------------------------------------------------
    # Board cell sprites (one per position)
    # ------------------------------------------------------------------
    def ensure_cell_sprite(self, arcade_module, position: Position, texture):
        cell_list = self._cell_sprites
        if cell_list is None:
            cell_list = arcade_module.SpriteList()
            self._cell_sprites = cell_list
        sprite = self._cell_sprite_map.get(position)
        if sprite is None:
            sprite = arcade_module.Sprite()
            self._cell_sprite_map[position] = sprite
            cell_list.append(sprite)
        if sprite.texture is not texture:
            sprite.texture = texture
        return sprite

    def draw_cell_sprites(self) -> None:
        if self._cell_sprites is not None:
            self._cell_sprites.draw()

    # ------------------------------------------------------------------
    # Status area sprites (status image, next stone preview)
    # ------------------------------------------------------------------
    def ensure_overlay_sprite(self, arcade_module, key: str, texture):
        overlay_list = self._overlay_sprites
        if overlay_list is None:
            overlay_list = arcade_module.SpriteList()
            self._overlay_sprites = overlay_list
        sprite = self._overlay_sprite_map.get(key)
        if sprite is None:
            sprite = arcade_module.Sprite()
            self._overlay_sprite_map[key] = sprite
            overlay_list.append(sprite)
        if sprite.texture is not texture:
            sprite.texture = texture
        sprite.visible = True
        return sprite

    def hide_overlay_sprite(self, key: str) -> None:
        sprite = self._overlay_sprite_map.get(key)
        if sprite is not None:
            sprite.visible = False

    def draw_overlay_sprites(self) -> None:
        if self._overlay_sprites is not None:
            self._overlay_sprites.draw()

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------
    @staticmethod
    def place_sprite(sprite, left: float, bottom: float) -> None:
        texture = sprite.texture
        sprite.center_x = left + texture.width / 2
        sprite.center_y = bottom + texture.height / 2
