"""Single hit of a network search."""

from pydantic import Field

from core.enums import NetworkRelationship
from core.schemas.user.user_summary import UserSummary


class NetworkSearchResult(UserSummary):
    """User from the searcher's network and how they are connected."""

    relationship: NetworkRelationship = Field(
        ..., description="'following' or 'follower', relative to the searcher"
    )
