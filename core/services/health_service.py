"""Health checks for the follow store, with caching and reconnection monitoring."""

import logging
import os
import time

from django.db import connection
from django.db.utils import OperationalError

from core.enums import HealthStatus
from core.schemas.health import (
    FollowStoreHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.services.database_monitor import DatabaseMonitor

logger = logging.getLogger(__name__)

FOLLOW_STORE_TABLES = ("users", "user_follows")


class HealthService:
    """Service for liveness and readiness probes.

    Readiness inspects the one dependency the service has: the database
    holding the users and user_follows tables. Results are cached for
    cache_ttl_seconds so probes do not hammer the database.
    """

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached follow store checks
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._store_cache: FollowStoreHealth | None = None
        self._store_cache_time: float = 0.0
        self._store_reachable = True
        self._database_monitor: DatabaseMonitor | None = None

    def set_database_monitor(self, monitor: DatabaseMonitor) -> None:
        """Attach the monitor started when the database becomes unreachable."""
        self._database_monitor = monitor

    def clear_cache(self) -> None:
        """Forget the cached check so the next probe hits the database."""
        self._store_cache = None
        self._store_cache_time = 0.0

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always alive, never touches the database)."""
        return LivenessResponse(service=os.getenv("SERVICE_NAME", "network-service"))

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status based on follow store health.

        An unhealthy store reports degraded (ready=True, degraded=True) so the
        pod keeps receiving traffic while reconnection continues.

        Returns:
            ReadinessResponse with overall status and follow store health
        """
        store_health = self.check_follow_store()

        return ReadinessResponse(
            status="ready" if store_health.healthy else "degraded",
            degraded=not store_health.healthy,
            follow_store=store_health,
        )

    def check_follow_store(self) -> FollowStoreHealth:
        """Check the database connection and the follow graph tables.

        The database monitor is started when the connection is lost and
        stopped once it is back. Missing tables mark the store unhealthy but
        do not start the monitor, since reconnecting cannot fix them.

        Returns:
            FollowStoreHealth, possibly from cache
        """
        current_time = time.time()
        if (
            self._store_cache is not None
            and (current_time - self._store_cache_time) < self.cache_ttl_seconds
        ):
            return self._store_cache

        start_time = time.perf_counter()
        reachable = False
        try:
            connection.ensure_connection()
            reachable = True
            existing = set(connection.introspection.table_names())
            tables = {table: table in existing for table in FOLLOW_STORE_TABLES}
            missing = [table for table, present in tables.items() if not present]
            if missing:
                health = FollowStoreHealth(
                    healthy=False,
                    status=HealthStatus.UNHEALTHY,
                    message=f"Follow store tables missing: {', '.join(missing)}",
                    tables=tables,
                )
            else:
                health = FollowStoreHealth(
                    healthy=True,
                    status=HealthStatus.HEALTHY,
                    message="Follow store reachable",
                    tables=tables,
                )
        except OperationalError as e:
            health = FollowStoreHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
            )
        except Exception as e:
            logger.exception("Unexpected error checking follow store")
            health = FollowStoreHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"Unexpected error checking follow store: {e!s}",
            )
        health.response_time_ms = (time.perf_counter() - start_time) * 1000

        self._track_connection(reachable)

        self._store_cache = health
        self._store_cache_time = current_time
        return health

    def _track_connection(self, reachable: bool) -> None:
        if self._database_monitor is not None:
            if self._store_reachable and not reachable:
                logger.warning("Database connection lost, starting background monitor")
                self._database_monitor.start_monitoring(on_recovery=self.clear_cache)
            elif not self._store_reachable and reachable:
                logger.info("Database connection recovered")
                self._database_monitor.stop_monitoring()
        self._store_reachable = reachable


# Global health service instance
health_service = HealthService()
