"""Campus request and response schemas.

CampusResponse nests the campus's buildings, ordered by building id.
Buildings are attached to a campus through BuildingCreate.campus_id, so the
campus payloads don't carry them.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from campus_api.schemas.address import Address
from campus_api.schemas.building import BuildingResponse


class CampusCreate(BaseModel):
    """Payload for POST: a campus that has not been persisted yet."""

    name: str = Field(min_length=1, max_length=100)
    abbr_name: str = Field(min_length=1, max_length=20)
    address: Address = Field(default_factory=Address)
    training_manager_id: int
    staging_manager_id: int
    hr_lead_id: int
    corporate_employee_ids: list[int] = Field(default_factory=list)


class CampusUpdate(CampusCreate):
    """Payload for PUT: the full replacement object, including its id."""

    id: int


class CampusResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    abbr_name: str
    address: Address
    training_manager_id: int
    staging_manager_id: int
    hr_lead_id: int
    corporate_employee_ids: list[int]
    buildings: list[BuildingResponse]
    created_at: datetime
    updated_at: datetime
