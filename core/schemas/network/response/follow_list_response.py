"""Response schemas for follower and following lists."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.user_summary import UserSummary


class FollowerListResponse(BaseSchemaModel):
    """Users following a user, most recent follower first."""

    success: bool = Field(default=True)
    user_id: UUID = Field(..., description="User whose followers are listed")
    count: int = Field(..., ge=0, description="Number of entries returned")
    followers: list[UserSummary] = Field(default_factory=list)


class FollowingListResponse(BaseSchemaModel):
    """Users a user follows, most recently followed first."""

    success: bool = Field(default=True)
    user_id: UUID = Field(..., description="User whose followees are listed")
    count: int = Field(..., ge=0, description="Number of entries returned")
    following: list[UserSummary] = Field(default_factory=list)
