"""Campus endpoints.

Campus ids stay strings at this boundary; the service decides whether they
are valid so that "0", "-1" and "abc" all answer 400 rather than 422.
"""

from typing import Annotated

from fastapi import APIRouter, Body

from campus_api.dependencies import DB
from campus_api.models import Campus
from campus_api.schemas.campus import CampusCreate, CampusResponse, CampusUpdate
from campus_api.services import campus as campus_service

router = APIRouter(prefix="/v2/campus", tags=["campuses"])


@router.get("", response_model=list[CampusResponse])
async def get_all_campuses(db: DB) -> list[Campus]:
    return await campus_service.find_all(db)


@router.get("/name/{name}", response_model=CampusResponse)
async def get_campus_by_name(db: DB, name: str) -> Campus:
    """Find a campus by full name ("University of South Florida") or abbreviation ("USF")."""
    return await campus_service.find_by_name(db, name)


@router.get("/training-manager/{manager_id}", response_model=CampusResponse)
async def get_campus_by_training_manager_id(db: DB, manager_id: int) -> Campus:
    return await campus_service.find_by_training_manager_id(db, manager_id)


@router.get("/staging-manager/{manager_id}", response_model=CampusResponse)
async def get_campus_by_staging_manager_id(db: DB, manager_id: int) -> Campus:
    return await campus_service.find_by_staging_manager_id(db, manager_id)


@router.get("/hr-lead/{hr_lead_id}", response_model=CampusResponse)
async def get_campus_by_hr_lead_id(db: DB, hr_lead_id: int) -> Campus:
    return await campus_service.find_by_hr_lead_id(db, hr_lead_id)


@router.get("/{campus_id}", response_model=CampusResponse)
@router.get("/id/{campus_id}", response_model=CampusResponse, include_in_schema=False)
async def get_campus_by_id(db: DB, campus_id: str) -> Campus:
    return await campus_service.find_by_id(db, campus_id)


@router.post("", response_model=CampusResponse, status_code=201)
async def save_campus(
    db: DB,
    candidate: Annotated[CampusCreate | None, Body()] = None,
) -> Campus:
    return await campus_service.save(db, candidate)


@router.put("", response_model=CampusResponse)
async def update_campus(db: DB, payload: CampusUpdate) -> Campus:
    return await campus_service.update(db, payload)


@router.delete("/{campus_id}", status_code=204)
@router.delete("/id/{campus_id}", status_code=204, include_in_schema=False)
async def delete_campus_by_id(db: DB, campus_id: str) -> None:
    await campus_service.delete(db, campus_id)
