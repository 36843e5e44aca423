"""Query parameters for the follow status check."""

from uuid import UUID

from pydantic import BaseModel, Field


class FollowStatusQuery(BaseModel):
    """Query string of GET is-following/<user_id>."""

    follower_id: UUID = Field(..., description="UUID of the potential follower")
