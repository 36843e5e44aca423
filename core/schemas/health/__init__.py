"""Health check schemas."""

from core.schemas.health.follow_store_health import FollowStoreHealth
from core.schemas.health.response.liveness_response import LivenessResponse
from core.schemas.health.response.readiness_response import ReadinessResponse

__all__ = ["FollowStoreHealth", "LivenessResponse", "ReadinessResponse"]
