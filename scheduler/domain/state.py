from dataclasses import dataclass

from ..config import INITIAL_EASINESS_FACTOR
from ..utils.time import now_ms


@dataclass(frozen=True)
class RecallState:
    """Per-flashcard memory-strength record.

    ``next_review_date`` is in milliseconds since the Unix epoch.
    """

    interval: int
    repetition: int
    easiness_factor: float
    next_review_date: int

    def is_due(self, now: int) -> bool:
        return self.next_review_date <= now

    def to_dict(self) -> dict:
        return {
            "interval": self.interval,
            "repetition": self.repetition,
            "efactor": self.easiness_factor,
            "next_review_date": self.next_review_date,
        }


def initial_state(now: int = None) -> RecallState:
    """State of a freshly generated card: never reviewed and due immediately."""
    if now is None:
        now = now_ms()
    return RecallState(
        interval=0,
        repetition=0,
        easiness_factor=INITIAL_EASINESS_FACTOR,
        next_review_date=now,
    )


def state_from_mapping(data: dict, now: int = None) -> RecallState:
    """Build a RecallState from a stored card record.

    Card records may omit any SM-2 field; missing fields fall back to the
    initial state. ``easiness_factor`` is accepted as an alias of ``efactor``.
    """
    base = initial_state(now)
    efactor = data.get("efactor")
    if efactor is None:
        efactor = data.get("easiness_factor")
    return RecallState(
        interval=_pick(data, "interval", base.interval),
        repetition=_pick(data, "repetition", base.repetition),
        easiness_factor=base.easiness_factor if efactor is None else efactor,
        next_review_date=_pick(data, "next_review_date", base.next_review_date),
    )


def _pick(data, key, default):
    value = data.get(key)
    return default if value is None else value
