"""
Pydantic schemas for organizations.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class OrganizationCreate(BaseModel):
    """Request to create a new organization."""
    name: str = Field(min_length=1, max_length=200)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    seed_default_chart: bool = False


class OrganizationResponse(BaseModel):
    id: int
    name: str
    currency: str
    created_at: datetime

    model_config = {"from_attributes": True}
