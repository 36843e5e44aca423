"""Response schema for the follow status check."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class FollowStatusResponse(BaseSchemaModel):
    """Whether one user follows another."""

    success: bool = Field(default=True)
    follower_id: UUID = Field(..., description="Potential follower")
    followee_id: UUID = Field(..., description="Potentially followed user")
    is_following: bool = Field(..., description="True if the edge exists")
