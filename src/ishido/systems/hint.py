from __future__ import annotations

from esper import World

from ishido.components.hint import HintTimer
from ishido.constants import HINT_DELAY
from ishido.events.bus import (
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_HINT_REQUEST,
    EVENT_STONE_PLACED,
    EVENT_TICK,
    EventBus,
)


class HintSystem:
    """Reveals the valid positions after the player has idled for ``delay`` seconds.

    Each game start or placement supersedes the pending timer; game over
    cancels it outright.
    """

    def __init__(self, world: World, event_bus: EventBus, *, delay: float | None = None):
        self.world = world
        self.event_bus = event_bus
        if delay is None:
            delay = getattr(world, "hint_delay", HINT_DELAY)
        self.delay = float(delay)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_GAME_STARTED, self.on_reschedule)
        self.event_bus.subscribe(EVENT_STONE_PLACED, self.on_reschedule)
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)

    def pending(self) -> HintTimer | None:
        for _, timer in self.world.get_component(HintTimer):
            return timer
        return None

    def schedule(self) -> int:
        self.cancel()
        return self.world.create_entity(HintTimer(remaining=self.delay))

    def cancel(self) -> None:
        for entity, _ in list(self.world.get_component(HintTimer)):
            self.world.delete_entity(entity, immediate=True)

    def on_reschedule(self, sender, **kwargs):
        self.schedule()

    def on_game_over(self, sender, **kwargs):
        self.cancel()

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        fired = []
        for entity, timer in list(self.world.get_component(HintTimer)):
            timer.remaining -= dt
            if timer.remaining <= 0.0:
                fired.append(entity)
        for entity in fired:
            self.world.delete_entity(entity, immediate=True)
        if fired:
            self.event_bus.emit(EVENT_HINT_REQUEST, visible=True)
