from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ishido.components.board_position import Position
from ishido.constants import BOARD_COLS, BOARD_ROWS

# Points for an interior placement keyed by the number of matched neighbors.
PLACEMENT_POINTS: Dict[int, int] = {1: 1, 2: 2, 3: 4, 4: 8}

# Bonus for the n-th four-way of a session (1-indexed); none after the last entry.
FOUR_WAY_BONUSES: List[int] = [25, 50, 100, 200, 400, 600, 800, 1000, 5000, 10000, 25000, 50000]

# Bonus when the game ends with 0, 1 or 2 stones left undrawn.
END_OF_GAME_BONUSES: List[int] = [1000, 500, 100]


@dataclass(frozen=True, slots=True)
class ScoreDelta:
    points: int = 0
    bonus: int = 0
    four_ways: int = 0

    @property
    def total(self) -> int:
        return self.points + self.bonus


def is_interior(position: Position) -> bool:
    return 0 < position.x < BOARD_COLS - 1 and 0 < position.y < BOARD_ROWS - 1


def four_way_bonus(count: int) -> int:
    if 1 <= count <= len(FOUR_WAY_BONUSES):
        return FOUR_WAY_BONUSES[count - 1]
    return 0


def score_placement(position: Position, matches: int, four_ways: int) -> ScoreDelta:
    """Score an accepted placement with ``matches`` matched neighbors.

    ``four_ways`` is the session's four-way count before this placement.
    Border placements score nothing.
    """
    if not is_interior(position):
        return ScoreDelta()
    points = PLACEMENT_POINTS.get(matches, 0)
    if matches != 4:
        return ScoreDelta(points=points)
    return ScoreDelta(points=points, bonus=four_way_bonus(four_ways + 1), four_ways=1)


def end_game_bonus(remaining: int) -> int:
    if 0 <= remaining < len(END_OF_GAME_BONUSES):
        return END_OF_GAME_BONUSES[remaining]
    return 0
