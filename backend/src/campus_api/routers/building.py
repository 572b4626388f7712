"""Building endpoints.

Legacy path shapes (/id/{id}, /owners/id/{id}, /trainers/id/{id}) are kept
as hidden aliases of the current routes and share their error mapping.
"""

from typing import Annotated

from fastapi import APIRouter, Body

from campus_api.dependencies import DB
from campus_api.models import Building
from campus_api.schemas.building import BuildingCreate, BuildingResponse, BuildingUpdate
from campus_api.services import building as building_service

router = APIRouter(prefix="/v2/building", tags=["buildings"])


@router.get("", response_model=list[BuildingResponse])
async def get_all_buildings(db: DB) -> list[Building]:
    return await building_service.find_all(db)


@router.get("/trainer/{training_lead_id}", response_model=BuildingResponse)
@router.get(
    "/trainers/id/{training_lead_id}", response_model=BuildingResponse, include_in_schema=False
)
async def get_building_by_training_lead_id(db: DB, training_lead_id: int) -> Building:
    return await building_service.find_by_training_lead_id(db, training_lead_id)


@router.get("/owner/{owner_id}", response_model=list[BuildingResponse])
@router.get("/owners/id/{owner_id}", response_model=list[BuildingResponse], include_in_schema=False)
async def get_buildings_by_owner_id(db: DB, owner_id: int) -> list[Building]:
    """List the buildings owned by an app user."""
    return await building_service.find_by_owner_id(db, owner_id)


@router.get("/{building_id}", response_model=BuildingResponse)
@router.get("/id/{building_id}", response_model=BuildingResponse, include_in_schema=False)
async def get_building_by_id(db: DB, building_id: int) -> Building:
    return await building_service.find_by_id(db, building_id)


@router.post("", response_model=BuildingResponse, status_code=201)
async def save_building(
    db: DB,
    candidate: Annotated[BuildingCreate | None, Body()] = None,
) -> Building:
    """Create a building. A missing or null body is a 400, not a 422."""
    return await building_service.save(db, candidate)


@router.put("", response_model=BuildingResponse)
async def update_building(db: DB, payload: BuildingUpdate) -> Building:
    return await building_service.update(db, payload)


@router.delete("/{building_id}", status_code=204)
@router.delete("/id/{building_id}", status_code=204, include_in_schema=False)
async def delete_building_by_id(db: DB, building_id: int) -> None:
    await building_service.delete(db, building_id)
