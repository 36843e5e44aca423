"""Difference between stored counters and actual edge counts."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class CountDrift(BaseSchemaModel):
    """A user whose stored counters disagree with the user_follows table."""

    user_id: UUID = Field(..., description="User with drifting counters")
    stored_followers: int = Field(..., description="followers column value")
    stored_following: int = Field(..., description="following column value")
    actual_followers: int = Field(..., description="Edges pointing at the user")
    actual_following: int = Field(..., description="Edges leaving the user")
