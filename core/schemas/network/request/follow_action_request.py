"""Request schema for follow and unfollow actions."""

from uuid import UUID

from pydantic import BaseModel, Field


class FollowActionRequest(BaseModel):
    """Body of a follow or unfollow call.

    Attributes:
        user_id: UUID of the acting user (the follower). The target user
                 comes from the URL.
    """

    user_id: UUID = Field(..., description="UUID of the user performing the action")

    model_config = {
        "json_schema_extra": {
            "example": {
                "user_id": "550e8400-e29b-41d4-a716-446655440001",
            }
        }
    }
