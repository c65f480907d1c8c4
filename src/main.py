"""Entry point for the Ishido tile-placement puzzle.

Loads the image sheets, sets up the ECS world, event bus, systems, and Arcade window.
"""
import argparse
import logging
import random
import sys
from pathlib import Path

from arcade import Window, run, set_background_color, color
from ishido.world import create_world
from ishido.constants import GRAPHICS_DIR_NAME, WINDOW_HEIGHT, WINDOW_WIDTH
from ishido.events.bus import EVENT_TICK, EventBus, EVENT_MOUSE_PRESS
from ishido.rendering.assets import AssetLoadError, AssetProvider, Assets
from ishido.systems.hint import HintSystem
from ishido.systems.input import InputSystem
from ishido.systems.render import RenderSystem
from ishido.systems.session import SessionSystem

logger = logging.getLogger("ishido")

DEFAULT_GRAPHICS_DIR = Path(__file__).resolve().parents[1] / GRAPHICS_DIR_NAME


class IshidoWindow(Window):
    def __init__(self, assets: Assets, *, rng: random.Random | None = None, legacy_shuffle: bool = False):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Ishido")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(rng=rng, legacy_shuffle=legacy_shuffle)
        self.input_system = InputSystem(self.event_bus, self)
        # Hint timer subscribes before the session so it sees the first game start.
        self.hint_system = HintSystem(self.world, self.event_bus)
        self.session_system = SessionSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self, assets)
        set_background_color(color.BLACK)
        self.session_system.new_game()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ishido tile-placement puzzle")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal")
    parser.add_argument("--legacy-shuffle", action="store_true", help="Use the historic [0, i) Fisher-Yates swap range")
    parser.add_argument("--graphics-dir", type=Path, default=DEFAULT_GRAPHICS_DIR, help="Directory holding the image sheets")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    try:
        assets = AssetProvider(args.graphics_dir).load()
    except AssetLoadError as exc:
        logger.error("Cannot start: %s", exc)
        print(f"Ishido cannot start: {exc}", file=sys.stderr)
        return 1
    rng = random.Random(args.seed) if args.seed is not None else None
    IshidoWindow(assets, rng=rng, legacy_shuffle=args.legacy_shuffle)
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
