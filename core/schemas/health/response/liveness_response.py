"""Liveness probe payload."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """The process is up. Says nothing about the database."""

    status: str = Field("alive", description="Always 'alive'")
    service: str = Field(..., description="Name of the answering service")
