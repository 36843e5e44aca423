"""Response schema for follow and unfollow actions."""

from uuid import UUID

from pydantic import Field

from core.enums import FollowResult
from core.schemas.base_schema_model import BaseSchemaModel

RESULT_MESSAGES = {
    FollowResult.CREATED: "Successfully followed user",
    FollowResult.ALREADY_EXISTS: "Already following this user",
    FollowResult.REMOVED: "Successfully unfollowed user",
    FollowResult.NOT_FOLLOWING: "Not following this user",
}


class FollowActionResponse(BaseSchemaModel):
    """Outcome of a follow or unfollow call.

    No-op outcomes are reported with success=True and changed=False.
    """

    success: bool = Field(default=True, description="Request was handled")
    result: FollowResult = Field(..., description="Tagged mutation outcome")
    changed: bool = Field(..., description="Whether the edge set changed")
    is_following: bool = Field(..., description="Follow state after the call")
    follower_id: UUID = Field(..., description="Acting user")
    followee_id: UUID = Field(..., description="Target user")
    message: str = Field(..., description="Human-readable outcome")

    @classmethod
    def from_result(
        cls, result: FollowResult, follower_id: UUID, followee_id: UUID
    ) -> "FollowActionResponse":
        """Build the response for a mutation outcome."""
        return cls(
            result=result,
            changed=result.changed,
            is_following=result in (FollowResult.CREATED, FollowResult.ALREADY_EXISTS),
            follower_id=follower_id,
            followee_id=followee_id,
            message=RESULT_MESSAGES[result],
        )
