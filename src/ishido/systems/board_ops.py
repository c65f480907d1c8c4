from __future__ import annotations

from typing import Dict, Optional

from esper import World

from ishido.components.board import Board
from ishido.components.board_position import BoardPosition, Position
from ishido.components.cell_background import CellBackground
from ishido.components.game_state import GameState
from ishido.components.hint import HintState
from ishido.components.score import Score
from ishido.components.stone import Stone
from ishido.components.stone_stack import StoneStack
from ishido.components.tile import CellTile, OccupiedTile, Tile
from ishido.components.valid_positions import ValidPositions
from ishido.constants import BOARD_COLS, BOARD_ROWS
from ishido.utils.deck import Deal


def get_board_entity(world: World) -> int:
    for entity, _ in world.get_component(Board):
        return entity
    raise RuntimeError("Board not found")


def get_board(world: World) -> Board:
    return world.component_for_entity(get_board_entity(world), Board)


def find_board(world: World) -> Optional[Board]:
    for _, board in world.get_component(Board):
        return board
    return None


def get_stack(world: World) -> StoneStack:
    return world.component_for_entity(get_board_entity(world), StoneStack)


def get_session_entity(world: World) -> int:
    for entity, _ in world.get_component(GameState):
        return entity
    raise RuntimeError("GameState not found")


def get_game_state(world: World) -> GameState:
    return world.component_for_entity(get_session_entity(world), GameState)


def get_score(world: World) -> Score:
    return world.component_for_entity(get_session_entity(world), Score)


def get_hint_state(world: World) -> HintState:
    return world.component_for_entity(get_session_entity(world), HintState)


def get_valid_positions(world: World) -> ValidPositions:
    return world.component_for_entity(get_session_entity(world), ValidPositions)


def get_entity_at(world: World, position: Position) -> int | None:
    for entity, board_position in world.get_component(BoardPosition):
        if board_position.position == position:
            return entity
    return None


def tile_grid(world: World) -> Dict[Position, Tile]:
    """Snapshot of every cell's tile keyed by position."""
    grid: Dict[Position, Tile] = {}
    for _, (board_position, cell) in world.get_components(BoardPosition, CellTile):
        grid[board_position.position] = cell.tile
    return grid


def tile_at(world: World, position: Position) -> Optional[Tile]:
    entity = get_entity_at(world, position)
    if entity is None:
        return None
    return world.component_for_entity(entity, CellTile).tile


def place_tile(world: World, position: Position, stone: Stone) -> bool:
    """Occupy the empty cell at ``position``. Occupied cells are left untouched."""
    entity = get_entity_at(world, position)
    if entity is None:
        return False
    cell: CellTile = world.component_for_entity(entity, CellTile)
    if cell.occupied:
        return False
    cell.tile = OccupiedTile(stone)
    return True


def clear_board(world: World) -> None:
    """Delete the board entity and every cell entity."""
    doomed = [entity for entity, _ in world.get_component(BoardPosition)]
    doomed.extend(entity for entity, _ in world.get_component(Board))
    for entity in doomed:
        world.delete_entity(entity, immediate=True)


def spawn_board(world: World, dealt: Deal) -> int:
    """Replace any existing board with the cells, stack and next stone of ``dealt``."""
    clear_board(world)
    board_entity = world.create_entity(
        Board(cols=BOARD_COLS, rows=BOARD_ROWS, next_stone=dealt.next_stone),
        StoneStack(stones=list(dealt.stack)),
    )
    layout = dealt.layout
    for position, tile in layout.tiles.items():
        world.create_entity(
            BoardPosition(position=position),
            CellTile(tile=tile),
            CellBackground(index=layout.backgrounds.get(position, 0)),
        )
    return board_entity
