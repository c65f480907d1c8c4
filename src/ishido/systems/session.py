"""Session state machine: dealing, placing stones and detecting the end of a game."""
from __future__ import annotations

import logging

from esper import World

from ishido.components.board_position import Position
from ishido.components.game_state import GameMode
from ishido.events.bus import (
    EVENT_FOUR_WAY_ACHIEVED,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_HINT_CHANGED,
    EVENT_HINT_REQUEST,
    EVENT_MOVE_REJECTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_SCORE_CHANGED,
    EVENT_STONE_PLACED,
    EVENT_TILE_CLICK,
    EventBus,
)
from ishido.systems.board_ops import (
    find_board,
    get_board,
    get_game_state,
    get_hint_state,
    get_score,
    get_stack,
    get_valid_positions,
    place_tile,
    spawn_board,
    tile_grid,
)
from ishido.utils.deck import deal
from ishido.utils.game_state import set_game_mode
from ishido.utils.matching import find_valid_positions, placement_partials
from ishido.utils.scoring import end_game_bonus, score_placement

logger = logging.getLogger(__name__)


class SessionSystem:
    """Owns the mutating session operations: new_game, place_stone and set_hint."""

    def __init__(self, world: World, event_bus: EventBus, *, legacy_shuffle: bool | None = None):
        self.world = world
        self.event_bus = event_bus
        if legacy_shuffle is None:
            legacy_shuffle = bool(getattr(world, "legacy_shuffle", False))
        self.legacy_shuffle = legacy_shuffle
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)

    def on_new_game_request(self, sender, **kwargs):
        self.new_game()

    def on_tile_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        self.place_stone(Position(int(x), int(y)))

    def on_hint_request(self, sender, **kwargs):
        self.set_hint(bool(kwargs.get('visible', True)))

    def new_game(self) -> None:
        dealt = deal(self.world.random, legacy_shuffle=self.legacy_shuffle)
        spawn_board(self.world, dealt)
        score = get_score(self.world)
        score.points = 0
        score.four_ways = 0
        get_hint_state(self.world).visible = False
        get_game_state(self.world).end_bonus_awarded = False
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        self.refresh_valid_positions()
        stack_size = len(get_stack(self.world))
        logger.info("New game dealt: next stone %s, %d stones in stack", dealt.next_stone, stack_size)
        self.event_bus.emit(EVENT_GAME_STARTED, next_stone=dealt.next_stone, stack_size=stack_size)
        self.event_bus.emit(EVENT_HINT_CHANGED, visible=False)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, four_ways=0, delta=0)
        self._check_game_over()

    def place_stone(self, position: Position) -> bool:
        """Place the next stone on ``position`` if it is a valid position; otherwise do nothing."""
        state = get_game_state(self.world)
        board = find_board(self.world)
        stone = board.next_stone if board is not None else None
        if state.mode != GameMode.PLAYING:
            self._reject(position, 'game_over')
            return False
        if stone is None:
            self._reject(position, 'no_next_stone')
            return False
        if position not in get_valid_positions(self.world):
            self._reject(position, 'invalid_position')
            return False
        matches = len(placement_partials(tile_grid(self.world), position, stone))
        score = get_score(self.world)
        delta = score_placement(position, matches, score.four_ways)
        score.points += delta.total
        score.four_ways += delta.four_ways
        place_tile(self.world, position, stone)
        board.next_stone = get_stack(self.world).draw()
        get_hint_state(self.world).visible = False
        self.refresh_valid_positions()
        logger.debug("Placed %s at (%d, %d): %d matches, +%d", stone, position.x, position.y, matches, delta.total)
        self.event_bus.emit(
            EVENT_STONE_PLACED,
            position=position,
            stone=stone,
            matches=matches,
            points=delta.points,
            bonus=delta.bonus,
        )
        if delta.four_ways:
            self.event_bus.emit(EVENT_FOUR_WAY_ACHIEVED, count=score.four_ways, bonus=delta.bonus)
        self.event_bus.emit(EVENT_HINT_CHANGED, visible=False)
        if delta.total:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=score.points, four_ways=score.four_ways, delta=delta.total)
        self._check_game_over()
        return True

    def set_hint(self, visible: bool) -> None:
        hint = get_hint_state(self.world)
        if hint.visible == visible:
            return
        hint.visible = visible
        self.event_bus.emit(EVENT_HINT_CHANGED, visible=visible)

    def is_game_over(self) -> bool:
        return get_game_state(self.world).mode == GameMode.GAME_OVER

    def refresh_valid_positions(self) -> None:
        """Rescan the board for the current next stone and replace the cached set."""
        board = get_board(self.world)
        get_valid_positions(self.world).positions = find_valid_positions(tile_grid(self.world), board.next_stone)

    def _check_game_over(self) -> None:
        """End the game when the deck is exhausted or the next stone has no valid position.

        A stuck game still earns the end bonus for the stones left undrawn,
        counting the unplaceable next stone, so 1 or 2 left pay 500 or 100.
        """
        state = get_game_state(self.world)
        if state.mode == GameMode.GAME_OVER:
            return
        board = get_board(self.world)
        if board.next_stone is None:
            reason = 'deck_exhausted'
            remaining = 0
        elif not get_valid_positions(self.world).positions:
            reason = 'no_valid_positions'
            remaining = len(get_stack(self.world)) + 1
        else:
            return
        score = get_score(self.world)
        bonus = 0
        if not state.end_bonus_awarded:
            bonus = end_game_bonus(remaining)
            score.points += bonus
            state.end_bonus_awarded = True
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        logger.info("Game over (%s): %d stones left, bonus %d, final score %d", reason, remaining, bonus, score.points)
        if bonus:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=score.points, four_ways=score.four_ways, delta=bonus)
        self.event_bus.emit(EVENT_GAME_OVER, score=score.points, remaining=remaining, bonus=bonus, reason=reason)

    def _reject(self, position: Position, reason: str) -> None:
        self.event_bus.emit(EVENT_MOVE_REJECTED, position=position, reason=reason)
