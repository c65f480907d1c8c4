from dataclasses import dataclass
from typing import Union

from ishido.components.stone import Stone


@dataclass(frozen=True, slots=True)
class EmptyTile:
    """A cell nothing has been placed on yet."""


@dataclass(frozen=True, slots=True)
class OccupiedTile:
    stone: Stone


Tile = Union[EmptyTile, OccupiedTile]

EMPTY = EmptyTile()


@dataclass(slots=True)
class CellTile:
    """Per-cell tile assignment.

    Holds the tile currently on the cell. Only ever moves from EmptyTile to
    OccupiedTile; a new game creates fresh cell entities instead of clearing.
    """
    tile: Tile = EMPTY

    @property
    def occupied(self) -> bool:
        return isinstance(self.tile, OccupiedTile)
