from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

from esper import World

from ishido.components.board_position import BoardPosition, Position
from ishido.components.cell_background import CellBackground
from ishido.components.game_state import GameMode
from ishido.components.stone import Stone
from ishido.components.tile import CellTile, Tile
from ishido.systems.board_ops import (
    find_board,
    get_game_state,
    get_hint_state,
    get_score,
    get_stack,
    get_valid_positions,
)


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped, read-only view of the session shared by the renderers."""

    window_width: int
    window_height: int
    tiles: Dict[Position, Tile] = field(default_factory=dict)
    backgrounds: Dict[Position, int] = field(default_factory=dict)
    next_stone: Optional[Stone] = None
    stack_size: int = 0
    score: int = 0
    four_ways: int = 0
    hint_visible: bool = False
    valid_positions: FrozenSet[Position] = field(default_factory=frozenset)
    mode: GameMode = GameMode.PLAYING

    @property
    def hint_positions(self) -> FrozenSet[Position]:
        return self.valid_positions if self.hint_visible else frozenset()


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    tiles: Dict[Position, Tile] = {}
    backgrounds: Dict[Position, int] = {}
    for _, (board_position, cell, background) in world.get_components(BoardPosition, CellTile, CellBackground):
        tiles[board_position.position] = cell.tile
        backgrounds[board_position.position] = background.index

    ctx = RenderContext(
        window_width=window_width,
        window_height=window_height,
        tiles=tiles,
        backgrounds=backgrounds,
        hint_visible=get_hint_state(world).visible,
        valid_positions=get_valid_positions(world).positions,
        mode=get_game_state(world).mode,
    )
    score = get_score(world)
    ctx.score = score.points
    ctx.four_ways = score.four_ways
    board = find_board(world)
    if board is not None:
        ctx.next_stone = board.next_stone
        ctx.stack_size = len(get_stack(world))
    return ctx
