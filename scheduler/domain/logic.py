import math

from .enums import Quality
from .errors import InvalidInput
from .state import RecallState
from ..config import (
    FIRST_INTERVAL_DAYS,
    LAPSE_INTERVAL_DAYS,
    MAX_QUALITY,
    MIN_EASINESS_FACTOR,
    MIN_QUALITY,
    PASSING_QUALITY,
    SECOND_INTERVAL_DAYS,
)
from ..utils.time import MAX_TIMESTAMP_MS, days_to_ms, now_ms


def _require_int(field: str, value) -> None:
    # bool is an int subclass but never a count or rating
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(field, value, "must be an integer")


def validate_quality(quality) -> Quality:
    _require_int("quality", quality)
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidInput(
            "quality", quality, f"must be between {MIN_QUALITY} and {MAX_QUALITY}"
        )
    return Quality(quality)


def validate_state(interval: int, repetition: int, easiness_factor: float) -> None:
    _require_int("interval", interval)
    _require_int("repetition", repetition)
    if interval < 0:
        raise InvalidInput("interval", interval, "must not be negative")
    if repetition < 0:
        raise InvalidInput("repetition", repetition, "must not be negative")
    if isinstance(easiness_factor, bool) or not isinstance(easiness_factor, (int, float)):
        raise InvalidInput("efactor", easiness_factor, "must be a number")
    if not math.isfinite(easiness_factor):
        raise InvalidInput("efactor", easiness_factor, "must be finite")
    if easiness_factor < MIN_EASINESS_FACTOR:
        raise InvalidInput(
            "efactor", easiness_factor, f"must be at least {MIN_EASINESS_FACTOR}"
        )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def next_easiness_factor(current_ef: float, quality: int) -> float:
    """SM-2 ease update, floored at MIN_EASINESS_FACTOR.

    Applied on lapses as well as successes.
    """
    miss = MAX_QUALITY - quality
    ef = current_ef + (0.1 - miss * (0.08 + miss * 0.02))
    return max(ef, MIN_EASINESS_FACTOR)


def next_interval(current_interval: int, current_repetition: int, current_ef: float, quality: int) -> int:
    if quality < PASSING_QUALITY:
        return LAPSE_INTERVAL_DAYS
    if current_repetition == 0:
        return FIRST_INTERVAL_DAYS
    if current_repetition == 1:
        return SECOND_INTERVAL_DAYS
    scaled = current_interval * current_ef
    if not math.isfinite(scaled):
        raise InvalidInput("interval", current_interval, "is too large to scale by efactor")
    # a zero stored interval would otherwise schedule the card for today
    return max(round_half_up(scaled), FIRST_INTERVAL_DAYS)


def compute_next_review(
    current_interval: int,
    current_repetition: int,
    current_ef: float,
    quality: int,
    now: int = None,
) -> RecallState:
    """Run one SM-2 step for a card reviewed with the given quality.

    ``now`` is in epoch milliseconds and defaults to the current time.
    Raises InvalidInput for ratings outside 0..5 or an out-of-domain state.
    """
    quality = validate_quality(quality)
    validate_state(current_interval, current_repetition, current_ef)
    if now is None:
        now = now_ms()

    interval = next_interval(current_interval, current_repetition, current_ef, quality)
    repetition = current_repetition + 1 if quality.is_passing else 0
    easiness_factor = next_easiness_factor(current_ef, quality)

    next_review_date = now + days_to_ms(interval)
    if next_review_date > MAX_TIMESTAMP_MS:
        raise InvalidInput(
            "interval", current_interval, "schedules the next review past the supported date range"
        )

    return RecallState(
        interval=interval,
        repetition=repetition,
        easiness_factor=easiness_factor,
        next_review_date=next_review_date,
    )


def apply_review(state: RecallState, quality: int, now: int = None) -> RecallState:
    return compute_next_review(
        state.interval, state.repetition, state.easiness_factor, quality, now=now
    )


def select_due(cards, now: int) -> list:
    """Return ids of the cards due at ``now``, most overdue first.

    ``cards`` is an iterable of ``(card_id, RecallState)`` pairs.
    """
    due = [(state.next_review_date, card_id) for card_id, state in cards if state.is_due(now)]
    due.sort(key=lambda item: item[0])
    return [card_id for _, card_id in due]
