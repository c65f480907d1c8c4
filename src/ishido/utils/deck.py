"""Deck, anchor and board layout generation.

All randomness flows through the ``random.Random`` passed in, so a seeded
generator reproduces the same deal.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

from ishido.components.board_position import Position
from ishido.components.stone import Stone
from ishido.components.tile import EMPTY, OccupiedTile, Tile
from ishido.constants import (
    BACKGROUND_VARIANTS,
    BOARD_COLS,
    BOARD_ROWS,
    COLOR_COUNT,
    DECK_COPIES,
    SYMBOL_COUNT,
)

# Four corners plus the two cells diagonal to each other around the centre.
ANCHOR_POSITIONS: FrozenSet[Position] = frozenset({
    Position(0, 0),
    Position(BOARD_COLS - 1, 0),
    Position(0, BOARD_ROWS - 1),
    Position(BOARD_COLS - 1, BOARD_ROWS - 1),
    Position(BOARD_COLS // 2, BOARD_ROWS // 2),
    Position(BOARD_COLS // 2 - 1, BOARD_ROWS // 2 - 1),
})


@dataclass(slots=True)
class BoardLayout:
    tiles: Dict[Position, Tile]
    backgrounds: Dict[Position, int]


@dataclass(slots=True)
class Deal:
    """Everything a fresh session starts from."""
    anchors: List[Stone]
    layout: BoardLayout
    stack: List[Stone] = field(default_factory=list)
    next_stone: Optional[Stone] = None


def is_anchor_position(position: Position) -> bool:
    return position in ANCHOR_POSITIONS


def all_positions() -> List[Position]:
    """Every board coordinate, x outer and y inner."""
    return [Position(x, y) for x in range(BOARD_COLS) for y in range(BOARD_ROWS)]


def generate_anchor_stones(rng: random.Random) -> List[Stone]:
    """Pair a random remaining color with a random remaining symbol until none are left.

    Both pools shrink together, so the result uses every color and every
    symbol exactly once.
    """
    colors = list(range(COLOR_COUNT))
    symbols = list(range(SYMBOL_COUNT))
    anchors: List[Stone] = []
    while colors:
        remaining = len(colors)
        color = colors[rng.randrange(remaining)]
        symbol = symbols[rng.randrange(remaining)]
        anchors.append(Stone(color=color, symbol=symbol))
        colors.remove(color)
        symbols.remove(symbol)
    return anchors


def generate_board(anchors: List[Stone], rng: random.Random) -> BoardLayout:
    if len(anchors) != len(ANCHOR_POSITIONS):
        raise ValueError(f"Expected {len(ANCHOR_POSITIONS)} anchor stones, got {len(anchors)}")
    unused = list(anchors)
    tiles: Dict[Position, Tile] = {}
    backgrounds: Dict[Position, int] = {}
    for position in all_positions():
        backgrounds[position] = rng.randrange(BACKGROUND_VARIANTS)
        if is_anchor_position(position):
            tiles[position] = OccupiedTile(unused.pop())
        else:
            tiles[position] = EMPTY
    return BoardLayout(tiles=tiles, backgrounds=backgrounds)


def build_full_deck() -> List[Stone]:
    return [
        Stone(color=color, symbol=symbol)
        for _ in range(DECK_COPIES)
        for color in range(COLOR_COUNT)
        for symbol in range(SYMBOL_COUNT)
    ]


def shuffle_stones(stones: List[Stone], rng: random.Random, *, legacy: bool = False) -> None:
    """Fisher-Yates shuffle in place.

    ``legacy`` draws the swap index from ``[0, i)`` instead of ``[0, i]``,
    matching the slightly biased order produced by older builds.
    """
    for i in range(len(stones) - 1, 0, -1):
        j = rng.randrange(i) if legacy else rng.randrange(i + 1)
        stones[i], stones[j] = stones[j], stones[i]


def generate_stack(anchors: List[Stone], rng: random.Random, *, legacy_shuffle: bool = False) -> List[Stone]:
    """Full deck with one copy of each anchor removed, shuffled."""
    stack = build_full_deck()
    for anchor in anchors:
        stack.remove(anchor)
    shuffle_stones(stack, rng, legacy=legacy_shuffle)
    return stack


def deal(rng: random.Random, *, legacy_shuffle: bool = False) -> Deal:
    anchors = generate_anchor_stones(rng)
    layout = generate_board(anchors, rng)
    stack = generate_stack(anchors, rng, legacy_shuffle=legacy_shuffle)
    next_stone = stack.pop() if stack else None
    return Deal(anchors=anchors, layout=layout, stack=stack, next_stone=next_stone)
