"""Building business logic.

Checks preconditions on every id-keyed or mutating call before it reaches
the repository, and turns empty lookups into ResourceNotFoundError so
callers never see a bare None.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.exceptions import InvalidInputError, ResourceNotFoundError
from campus_api.logging import get_logger
from campus_api.models import Building
from campus_api.repositories import building as building_repo
from campus_api.repositories import campus as campus_repo
from campus_api.schemas.building import BuildingCreate, BuildingUpdate

logger = get_logger(__name__)


def _require_valid_id(building_id: int) -> None:
    if building_id <= 0:
        raise InvalidInputError(f"Invalid building id: {building_id}")


async def _require_known_campus(db: AsyncSession, campus_id: int | None) -> None:
    if campus_id is not None and await campus_repo.get_campus(db, campus_id) is None:
        raise InvalidInputError(f"Building references unknown campus id: {campus_id}")


async def save(db: AsyncSession, candidate: BuildingCreate | None) -> Building:
    """Persist a new building. Field-level checks happen in the schema."""
    if candidate is None:
        raise InvalidInputError("Building payload is required")
    await _require_known_campus(db, candidate.campus_id)
    building = await building_repo.save_building(db, Building(**candidate.model_dump()))
    logger.info("building_saved", building_id=building.id)
    return building


async def find_all(db: AsyncSession) -> list[Building]:
    return await building_repo.list_buildings(db)


async def find_by_id(db: AsyncSession, building_id: int) -> Building:
    _require_valid_id(building_id)
    building = await building_repo.get_building(db, building_id)
    if building is None:
        raise ResourceNotFoundError("Building", building_id)
    return building


async def find_by_owner_id(db: AsyncSession, owner_id: int) -> list[Building]:
    return await building_repo.list_buildings_by_owner(db, owner_id)


async def find_by_training_lead_id(db: AsyncSession, training_lead_id: int) -> Building:
    building = await building_repo.get_building_by_training_lead(db, training_lead_id)
    if building is None:
        raise ResourceNotFoundError("Building", training_lead_id, field="training lead id")
    return building


async def update(db: AsyncSession, payload: BuildingUpdate) -> Building:
    """Replace the stored building wholesale.

    There is no existence check: an unknown id is inserted as a new record.
    """
    await _require_known_campus(db, payload.campus_id)
    building = await building_repo.merge_building(db, Building(**payload.model_dump()))
    logger.info("building_updated", building_id=building.id)
    return building


async def delete(db: AsyncSession, building_id: int) -> None:
    """Delete by id. Succeeds silently when nothing has that id."""
    _require_valid_id(building_id)
    await building_repo.delete_building(db, building_id)
    logger.info("building_deleted", building_id=building_id)
