from __future__ import annotations

import random
from typing import Dict, Iterable, Mapping

from esper import World

from ishido.components.board_position import BoardPosition, Position
from ishido.components.stone import Stone
from ishido.components.tile import EMPTY, CellTile, OccupiedTile, Tile
from ishido.events.bus import EventBus
from ishido.systems.board_ops import get_board, get_stack, tile_at
from ishido.systems.hint import HintSystem
from ishido.systems.session import SessionSystem
from ishido.utils.deck import all_positions
from ishido.world import create_world


class DummyWindow:
    def __init__(self, width=788, height=528):
        self.width = width
        self.height = height


class EventCapture:
    """Records every payload emitted for the given event names."""

    def __init__(self, bus: EventBus, *names: str):
        self.events: Dict[str, list[dict]] = {name: [] for name in names}
        for name in names:
            bus.subscribe(name, self._make_handler(name))

    def _make_handler(self, name: str):
        def handler(sender, **payload):
            self.events[name].append(payload)
        return handler

    def __getitem__(self, name: str) -> list[dict]:
        return self.events[name]


def grid_with(stones: Mapping[Position, Stone]) -> Dict[Position, Tile]:
    """Full board grid, empty except for ``stones``."""
    return {
        position: OccupiedTile(stones[position]) if position in stones else EMPTY
        for position in all_positions()
    }


def start_session(seed: int = 1234, *, with_hints: bool = False):
    bus = EventBus()
    world = create_world(rng=random.Random(seed))
    hint = HintSystem(world, bus) if with_hints else None
    session = SessionSystem(world, bus)
    session.new_game()
    return bus, world, session, hint


def set_cells(world: World, stones: Mapping[Position, Stone]) -> None:
    """Overwrite every cell: occupied by ``stones`` where given, empty elsewhere."""
    for _, (board_position, cell) in world.get_components(BoardPosition, CellTile):
        stone = stones.get(board_position.position)
        cell.tile = OccupiedTile(stone) if stone is not None else EMPTY


def rig_draws(session: SessionSystem, next_stone: Stone | None, stack: Iterable[Stone] = ()) -> None:
    """Replace the next stone and the stack (drawn from the end), then rescan valid positions."""
    world = session.world
    get_board(world).next_stone = next_stone
    get_stack(world).stones = list(stack)
    session.refresh_valid_positions()


# Interior anchor; (5, 2) above it has no other occupied neighbor on a fresh deal.
CENTER_ANCHOR = Position(5, 3)
ABOVE_CENTER_ANCHOR = Position(5, 2)


def rig_single_match(session: SessionSystem) -> Stone:
    """Make the next stone share only the color of the (5, 3) anchor and return it."""
    world = session.world
    tile = tile_at(world, CENTER_ANCHOR)
    anchor = tile.stone
    stone = Stone(color=anchor.color, symbol=(anchor.symbol + 1) % 6)
    rig_draws(session, stone, get_stack(world).stones)
    return stone
