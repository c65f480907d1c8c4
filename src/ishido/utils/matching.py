from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Mapping, Optional, Union

from ishido.components.board_position import Position
from ishido.components.stone import Stone
from ishido.components.tile import OccupiedTile, Tile
from ishido.constants import BOARD_COLS, BOARD_ROWS


@dataclass(frozen=True, slots=True)
class Neutral:
    """Neighbor cell is empty and places no constraint on the candidate."""


@dataclass(frozen=True, slots=True)
class Conflict:
    """Neighbor stone shares neither color nor symbol with the candidate."""


@dataclass(frozen=True, slots=True)
class Partial:
    color_matches: int
    symbol_matches: int


MatchOutcome = Union[Neutral, Conflict, Partial]

NEUTRAL = Neutral()
CONFLICT = Conflict()


def classify(candidate: Stone, neighbor: Tile) -> MatchOutcome:
    if not isinstance(neighbor, OccupiedTile):
        return NEUTRAL
    color_match = candidate.color == neighbor.stone.color
    symbol_match = candidate.symbol == neighbor.stone.symbol
    if not (color_match or symbol_match):
        return CONFLICT
    return Partial(color_matches=int(color_match), symbol_matches=int(symbol_match))


def in_bounds(position: Position) -> bool:
    return 0 <= position.x < BOARD_COLS and 0 <= position.y < BOARD_ROWS


def neighbor_positions(position: Position) -> Iterator[Position]:
    """Orthogonal neighbors that exist on the board (left, right, up, down)."""
    x, y = position.x, position.y
    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        candidate = Position(nx, ny)
        if in_bounds(candidate):
            yield candidate


def neighbor_outcomes(tiles: Mapping[Position, Tile], position: Position, candidate: Stone) -> List[MatchOutcome]:
    return [classify(candidate, tiles[neighbor]) for neighbor in neighbor_positions(position)]


def collect_partials(outcomes: List[MatchOutcome]) -> Optional[List[Partial]]:
    """Partial outcomes among ``outcomes``; None when any neighbor conflicts."""
    partials: List[Partial] = []
    for outcome in outcomes:
        if isinstance(outcome, Conflict):
            return None
        if isinstance(outcome, Partial):
            partials.append(outcome)
    return partials


def is_valid_placement(partials: List[Partial]) -> bool:
    """Apply the adjacency table to the matched neighbors of a cell.

    With more than one matched neighbor, each must agree on exactly one
    attribute and the color/symbol agreements must be balanced.
    """
    count = len(partials)
    colors = sum(p.color_matches for p in partials)
    symbols = sum(p.symbol_matches for p in partials)
    if count == 1:
        return True
    if count == 2:
        return symbols == 1 and colors == 1
    if count == 3:
        return (symbols, colors) in ((1, 2), (2, 1))
    if count == 4:
        return symbols == 2 and colors == 2
    return False


def placement_partials(
    tiles: Mapping[Position, Tile],
    position: Position,
    candidate: Optional[Stone],
) -> Optional[List[Partial]]:
    """Matched neighbors if ``candidate`` may go on ``position``, else None."""
    if candidate is None or isinstance(tiles[position], OccupiedTile):
        return None
    partials = collect_partials(neighbor_outcomes(tiles, position, candidate))
    if partials is None or not is_valid_placement(partials):
        return None
    return partials


def find_valid_positions(tiles: Mapping[Position, Tile], next_stone: Optional[Stone]) -> FrozenSet[Position]:
    if next_stone is None:
        return frozenset()
    return frozenset(
        position
        for position in tiles
        if placement_partials(tiles, position, next_stone) is not None
    )
