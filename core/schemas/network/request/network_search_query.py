"""Query parameters for network search."""

from pydantic import BaseModel, Field


class NetworkSearchQuery(BaseModel):
    """Query string of GET search/<user_id>.

    A blank query is valid and matches nobody.
    """

    q: str = Field("", max_length=100, description="Name fragment to search for")
