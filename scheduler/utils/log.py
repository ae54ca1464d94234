import logging

import structlog
from django.core.exceptions import ImproperlyConfigured


def configure_logging(level: str = "INFO", fmt: str = "json"):
    """Configure structlog once for the process.

    ``fmt`` is ``json`` for one JSON object per line or ``console`` for
    human-readable output during local development. An unknown ``level``
    raises ImproperlyConfigured before anything is changed.
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ImproperlyConfigured(
            f"LOG_LEVEL={level!r} is not a logging level; "
            "use DEBUG, INFO, WARNING, ERROR or CRITICAL"
        )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
