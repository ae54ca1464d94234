import structlog

from ..config import INITIAL_EASINESS_FACTOR
from ..domain.errors import InvalidInput
from ..domain.logic import compute_next_review, select_due
from ..domain.state import state_from_mapping
from ..utils.time import now_ms, to_utc_iso

logger = structlog.get_logger()


def record_review(card_id, interval: int, repetition: int, efactor: float, quality: int, now: int = None):
    logger.info("review_received",
        card_id=str(card_id),
        interval=interval,
        repetition=repetition,
        efactor=efactor,
        quality=quality,
    )

    if now is None:
        now = now_ms()
    if efactor is None:
        efactor = INITIAL_EASINESS_FACTOR

    try:
        state = compute_next_review(interval, repetition, efactor, quality, now=now)
    except InvalidInput as e:
        logger.warning("review_rejected",
            card_id=str(card_id),
            field=e.field,
            value=e.value,
            reason=e.reason,
        )
        raise

    event = "review_lapsed" if state.repetition == 0 else "review_scheduled"
    logger.info(event,
        card_id=str(card_id),
        interval_days=state.interval,
        repetition=state.repetition,
        efactor=state.easiness_factor,
        next_review_utc=to_utc_iso(state.next_review_date),
    )
    return state


def due_cards(cards, until: int = None):
    """Return ids of the card records due by ``until``, most overdue first.

    Each record is a mapping with a ``card_id`` and any stored SM-2 fields;
    a record without ``next_review_date`` is due immediately.
    """
    if until is None:
        until = now_ms()

    states = [(card["card_id"], state_from_mapping(card, now=until)) for card in cards]
    card_ids = select_due(states, until)

    logger.info("due_cards_selected",
        until_utc=to_utc_iso(until),
        card_count=len(states),
        due_count=len(card_ids),
    )
    return card_ids
