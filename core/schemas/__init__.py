"""Schemas for the core app."""

from core.schemas.health import (
    FollowStoreHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.network import (
    CountDrift,
    FollowCounts,
    NetworkSearchResult,
)
from core.schemas.user import UserSummary

__all__ = [
    "CountDrift",
    "FollowCounts",
    "FollowStoreHealth",
    "LivenessResponse",
    "NetworkSearchResult",
    "ReadinessResponse",
    "UserSummary",
]
