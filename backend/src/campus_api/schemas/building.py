"""Building request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from campus_api.schemas.address import Address


class BuildingCreate(BaseModel):
    """Payload for POST: a building that has not been persisted yet."""

    name: str = Field(min_length=1, max_length=100)
    address: Address = Field(default_factory=Address)
    building_owner_id: int
    training_lead_id: int
    campus_id: int | None = None


class BuildingUpdate(BuildingCreate):
    """Payload for PUT: the full replacement object, including its id."""

    id: int


class BuildingResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    address: Address
    building_owner_id: int
    training_lead_id: int
    campus_id: int | None
    created_at: datetime
    updated_at: datetime
