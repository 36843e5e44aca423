"""Public summary of a user shown in follower and following lists."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserSummary(BaseSchemaModel):
    """Display fields of a user, built directly from a User row.

    Never carries edge data or private account fields such as email. The
    users table is written by the account service, so user_type is passed
    through as stored rather than checked against UserType.
    """

    user_id: UUID = Field(..., description="Unique identifier for the user")
    username: str | None = Field(None, description="Username, if one is set")
    full_name: str | None = Field(None, description="User's full name")
    user_type: str | None = Field(
        None, description="Account type as stored, e.g. athlete or coach"
    )
    profile_url: str | None = Field(None, description="Profile image reference")
