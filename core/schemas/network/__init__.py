"""Follow graph schemas."""

from core.schemas.network.count_drift import CountDrift
from core.schemas.network.follow_counts import FollowCounts
from core.schemas.network.network_search_result import NetworkSearchResult
from core.schemas.network.request import (
    FollowActionRequest,
    FollowStatusQuery,
    NetworkSearchQuery,
    UserPathParams,
)
from core.schemas.network.response import (
    FollowActionResponse,
    FollowCountsResponse,
    FollowerListResponse,
    FollowingListResponse,
    FollowStatusResponse,
    NetworkSearchResponse,
)

__all__ = [
    "CountDrift",
    "FollowActionRequest",
    "FollowActionResponse",
    "FollowCounts",
    "FollowCountsResponse",
    "FollowStatusQuery",
    "FollowStatusResponse",
    "FollowerListResponse",
    "FollowingListResponse",
    "NetworkSearchQuery",
    "NetworkSearchResponse",
    "NetworkSearchResult",
    "UserPathParams",
]
