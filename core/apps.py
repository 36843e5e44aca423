"""Django application configuration for core."""

import logging

from django.apps import AppConfig
from django.conf import settings

from core.logging import setup_logging, setup_test_logging
from core.services import database_monitor, health_service

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Configure logging and initialize services when Django is ready."""
        if getattr(settings, "TEST_MODE", False):
            setup_test_logging()
        else:
            setup_logging()

        health_service.set_database_monitor(database_monitor)
        logger.info("Database monitoring service initialized")
