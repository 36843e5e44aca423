"""Response schema for follow counters."""

from uuid import UUID

from pydantic import Field

from core.schemas.network.follow_counts import FollowCounts


class FollowCountsResponse(FollowCounts):
    """Follow counters of a user. Unknown users report zero for both."""

    success: bool = Field(default=True)
    user_id: UUID = Field(..., description="User whose counters are reported")
