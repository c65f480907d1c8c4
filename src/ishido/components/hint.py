from dataclasses import dataclass


@dataclass(slots=True)
class HintState:
    """Whether valid positions are currently highlighted on the board."""
    visible: bool = False


@dataclass(slots=True)
class HintTimer:
    """Pending request to reveal the hint once ``remaining`` seconds of ticks elapse.

    Lives on its own entity; rescheduling deletes that entity, so at most one
    timer is pending.
    """
    remaining: float
