"""Health of the tables backing the follow graph."""

from pydantic import Field

from core.enums.health_status import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class FollowStoreHealth(BaseSchemaModel):
    """Reachability of the database and the users and user_follows tables.

    ``tables`` is empty when the connection itself failed, since nothing
    could be inspected.
    """

    healthy: bool = Field(..., description="Follow calls can be served")
    status: HealthStatus = Field(..., description="Health status of the store")
    message: str = Field(..., description="Human-readable health message")
    tables: dict[str, bool] = Field(
        default_factory=dict, description="Whether each required table exists"
    )
    response_time_ms: float | None = Field(
        None, description="Time taken by the check in milliseconds"
    )
