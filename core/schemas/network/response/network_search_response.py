"""Response schema for network search."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.network.network_search_result import NetworkSearchResult


class NetworkSearchResponse(BaseSchemaModel):
    """Matching users from the searcher's followers and following."""

    success: bool = Field(default=True)
    user_id: UUID = Field(..., description="Searching user")
    query: str = Field(..., description="Query as received")
    count: int = Field(..., ge=0)
    users: list[NetworkSearchResult] = Field(default_factory=list)
