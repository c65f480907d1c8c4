import pytest

from ishido.components.board_position import Position
from ishido.utils.scoring import (
    FOUR_WAY_BONUSES,
    ScoreDelta,
    end_game_bonus,
    four_way_bonus,
    is_interior,
    score_placement,
)

INTERIOR = Position(5, 4)


@pytest.mark.parametrize(
    "position, interior",
    [
        (Position(0, 0), False),
        (Position(11, 3), False),
        (Position(4, 0), False),
        (Position(4, 7), False),
        (Position(1, 1), True),
        (Position(10, 6), True),
    ],
)
def test_is_interior(position, interior):
    assert is_interior(position) is interior


@pytest.mark.parametrize("matches, points", [(1, 1), (2, 2), (3, 4)])
def test_interior_points_by_match_count(matches, points):
    assert score_placement(INTERIOR, matches, four_ways=0) == ScoreDelta(points=points)


def test_border_placement_scores_nothing_even_with_many_matches():
    delta = score_placement(Position(0, 3), 3, four_ways=0)
    assert delta.total == 0
    assert delta.four_ways == 0


def test_first_four_way_awards_eight_plus_first_bonus():
    delta = score_placement(INTERIOR, 4, four_ways=0)
    assert delta == ScoreDelta(points=8, bonus=25, four_ways=1)
    assert delta.total == 33


def test_four_way_bonus_follows_session_count():
    assert score_placement(INTERIOR, 4, four_ways=1).bonus == 50
    assert score_placement(INTERIOR, 4, four_ways=11).bonus == 50000


def test_four_way_bonus_beyond_table_is_zero():
    assert four_way_bonus(len(FOUR_WAY_BONUSES) + 1) == 0
    delta = score_placement(INTERIOR, 4, four_ways=len(FOUR_WAY_BONUSES))
    assert delta == ScoreDelta(points=8, bonus=0, four_ways=1)


@pytest.mark.parametrize("remaining, bonus", [(0, 1000), (1, 500), (2, 100), (3, 0), (40, 0)])
def test_end_game_bonus(remaining, bonus):
    assert end_game_bonus(remaining) == bonus
