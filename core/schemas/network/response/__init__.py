"""Response schemas for network endpoints."""

from core.schemas.network.response.follow_action_response import (
    FollowActionResponse,
)
from core.schemas.network.response.follow_counts_response import (
    FollowCountsResponse,
)
from core.schemas.network.response.follow_list_response import (
    FollowerListResponse,
    FollowingListResponse,
)
from core.schemas.network.response.follow_status_response import (
    FollowStatusResponse,
)
from core.schemas.network.response.network_search_response import (
    NetworkSearchResponse,
)

__all__ = [
    "FollowActionResponse",
    "FollowCountsResponse",
    "FollowStatusResponse",
    "FollowerListResponse",
    "FollowingListResponse",
    "NetworkSearchResponse",
]
