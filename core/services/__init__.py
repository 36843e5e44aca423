"""Services for the core app."""

from core.services.database_monitor import DatabaseMonitor, database_monitor
from core.services.health_service import HealthService, health_service

# Note: FollowGraphService is not exported here because it imports the models,
# and this package is loaded by CoreConfig before the app registry is ready.
# Import it directly from core.services.follow_graph_service.

__all__ = [
    "DatabaseMonitor",
    "HealthService",
    "database_monitor",
    "health_service",
]
