from django.apps import AppConfig
from django.conf import settings


class SchedulerConfig(AppConfig):
    name = "scheduler"
    verbose_name = "Spaced-repetition scheduler"

    def ready(self):
        from .utils.log import configure_logging

        configure_logging(
            getattr(settings, "LOG_LEVEL", "INFO"),
            getattr(settings, "LOG_FORMAT", "json"),
        )
