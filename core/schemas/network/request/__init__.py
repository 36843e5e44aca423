"""Request schemas for network endpoints."""

from core.schemas.network.request.follow_action_request import FollowActionRequest
from core.schemas.network.request.follow_status_query import FollowStatusQuery
from core.schemas.network.request.network_search_query import NetworkSearchQuery
from core.schemas.network.request.user_path_params import UserPathParams

__all__ = [
    "FollowActionRequest",
    "FollowStatusQuery",
    "NetworkSearchQuery",
    "UserPathParams",
]
