"""Follower and following counters of a user."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class FollowCounts(BaseSchemaModel):
    """Denormalized follow counters read from the user record."""

    followers: int = Field(0, ge=0, description="Number of users following")
    following: int = Field(0, ge=0, description="Number of users followed")
