"""Readiness probe payload."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health.follow_store_health import FollowStoreHealth


class ReadinessResponse(BaseSchemaModel):
    """Readiness of the network service.

    The service stays ready while the follow store is down and reports
    itself degraded instead; follow calls fail with a storage error until
    the store recovers.
    """

    ready: bool = Field(True, description="Service accepts traffic")
    status: str = Field(..., description="'ready' or 'degraded'")
    degraded: bool = Field(..., description="Follow store is unavailable")
    follow_store: FollowStoreHealth = Field(
        ..., description="Database and follow table health"
    )
