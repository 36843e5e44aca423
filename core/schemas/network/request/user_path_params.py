"""Path parameters carrying a user ID."""

from uuid import UUID

from pydantic import BaseModel, Field


class UserPathParams(BaseModel):
    """User ID taken from the URL path."""

    user_id: UUID = Field(..., description="UUID of the user addressed by the URL")
