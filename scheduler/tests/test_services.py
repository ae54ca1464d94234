import pytest
from structlog.testing import capture_logs

from scheduler.config import MS_PER_DAY
from scheduler.domain.errors import InvalidInput
from scheduler.services.reviews import due_cards, record_review

NOW = 1_700_000_000_000


def test_record_review_logs_received_and_scheduled():
    with capture_logs() as logs:
        state = record_review("card-1", 6, 2, 2.6, 5, now=NOW)

    assert state.interval == 16
    assert [e["event"] for e in logs] == ["review_received", "review_scheduled"]
    scheduled = logs[1]
    assert scheduled["card_id"] == "card-1"
    assert scheduled["interval_days"] == 16
    assert scheduled["next_review_utc"] == "2023-11-30T22:13:20+00:00"


def test_record_review_logs_lapse():
    with capture_logs() as logs:
        state = record_review("card-2", 16, 3, 2.7, 1, now=NOW)

    assert state.repetition == 0
    assert logs[-1]["event"] == "review_lapsed"
    assert logs[-1]["log_level"] == "info"


def test_record_review_defaults_missing_efactor():
    state = record_review("card-3", 0, 0, None, 5, now=NOW)
    assert state.easiness_factor == pytest.approx(2.6)


def test_record_review_rejects_and_logs_bad_quality():
    with capture_logs() as logs:
        with pytest.raises(InvalidInput):
            record_review("card-4", 0, 0, 2.5, 7, now=NOW)

    rejected = logs[-1]
    assert rejected["event"] == "review_rejected"
    assert rejected["log_level"] == "warning"
    assert rejected["field"] == "quality"
    assert rejected["value"] == 7


def test_due_cards_filters_and_orders():
    cards = [
        {"card_id": "future", "next_review_date": NOW + MS_PER_DAY},
        {"card_id": "overdue", "next_review_date": NOW - MS_PER_DAY},
        {"card_id": "fresh"},
        {"card_id": "now", "next_review_date": NOW},
    ]
    with capture_logs() as logs:
        ids = due_cards(cards, until=NOW)

    assert ids == ["overdue", "fresh", "now"]
    assert logs[-1]["event"] == "due_cards_selected"
    assert logs[-1]["card_count"] == 4
    assert logs[-1]["due_count"] == 3


def test_due_cards_defaults_until_to_now():
    assert due_cards([{"card_id": "old", "next_review_date": 0}]) == ["old"]


@pytest.mark.parametrize(
    "interval, efactor",
    [(3_000_000, 2.5), (6, 1e308), (6, float("nan"))],
)
def test_record_review_rejects_unschedulable_state(interval, efactor):
    with capture_logs() as logs:
        with pytest.raises(InvalidInput):
            record_review("card-5", interval, 5, efactor, 5, now=NOW)

    assert logs[-1]["event"] == "review_rejected"
    assert logs[-1]["field"] in ("interval", "efactor")
