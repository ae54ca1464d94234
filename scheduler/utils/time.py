from datetime import datetime, timedelta, timezone

from ..config import MS_PER_DAY

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_ms() -> int:
    return datetime_to_ms(datetime.now(timezone.utc))


def datetime_to_ms(dt) -> int:
    # naive datetimes are taken as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // timedelta(milliseconds=1)


# latest instant a datetime can represent
MAX_TIMESTAMP_MS = datetime_to_ms(datetime.max)


def ms_to_datetime(ms: int) -> datetime:
    return EPOCH + timedelta(milliseconds=ms)


def to_utc_iso(ms: int) -> str:
    return ms_to_datetime(ms).isoformat()


def days_to_ms(days: int) -> int:
    return days * MS_PER_DAY
