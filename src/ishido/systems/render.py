from typing import Any

from ishido.components.board_position import Position
from ishido.events.bus import EventBus, EVENT_GAME_OVER, EVENT_GAME_STARTED
from ishido.rendering.assets import Assets
from ishido.rendering.board_renderer import BoardRenderer
from ishido.rendering.context import RenderContext, build_render_context
from ishido.rendering.sprite_cache import SpriteCache
from ishido.rendering.status_renderer import StatusRenderer
from esper import World


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, assets: Assets | None = None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        # Without assets (tests) only the layout cache is built.
        self.sprite_cache = SpriteCache(assets) if assets is not None else None
        self.game_over_reason: str | None = None
        self._render_ctx: RenderContext | None = None
        self._last_cell_layout: dict[Position, dict[str, Any]] = {}
        self._board_renderer = BoardRenderer(self, self.sprite_cache)
        self._status_renderer = StatusRenderer(self.sprite_cache)

    def on_game_started(self, sender, **kwargs):
        self.game_over_reason = None

    def on_game_over(self, sender, **kwargs):
        self.game_over_reason = kwargs.get('reason')

    def process(self):
        headless = self.sprite_cache is None
        arcade = None
        if not headless:
            # Local import keeps tests headless without creating a window.
            import arcade
            try:
                arcade.get_window()
            except RuntimeError:
                headless = True
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        self._render_ctx = ctx
        self._board_renderer.render(arcade, ctx, headless=headless)
        if not headless:
            self._status_renderer.render(arcade, ctx, self.game_over_reason)

    def highlighted_positions(self) -> set[Position]:
        """Cells drawn with the hint background during the last frame."""
        return {pos for pos, entry in self._last_cell_layout.items() if entry.get("hint")}

    def get_cell_at_point(self, x: float, y: float) -> Position | None:
        for position, entry in self._last_cell_layout.items():
            if entry["rect"].contains(x, y):
                return position
        return None
