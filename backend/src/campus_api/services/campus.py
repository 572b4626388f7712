"""Campus business logic.

Campus ids reach this layer as the raw path string, so they are parsed and
range-checked here. Manager ids used as lookup keys must be positive.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.exceptions import InvalidInputError, ResourceNotFoundError
from campus_api.logging import get_logger
from campus_api.models import Campus
from campus_api.repositories import campus as campus_repo
from campus_api.schemas.campus import CampusCreate, CampusUpdate

logger = get_logger(__name__)


def parse_campus_id(raw_id: str) -> int:
    """Return the campus id as a positive int.

    Only plain ASCII digits are accepted, so " 7", "+7" and "7_0" are
    rejected along with "", "0", negatives and non-numeric strings.
    """
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise InvalidInputError(f"Invalid campus id: {raw_id!r}")
    campus_id = int(raw_id)
    if campus_id <= 0:
        raise InvalidInputError(f"Invalid campus id: {raw_id!r}")
    return campus_id


def _require_valid_manager_id(manager_id: int, role: str) -> None:
    if manager_id <= 0:
        raise InvalidInputError(f"Invalid {role} id: {manager_id}")


async def save(db: AsyncSession, candidate: CampusCreate | None) -> Campus:
    """Persist a new campus. Field-level checks happen in the schema."""
    if candidate is None:
        raise InvalidInputError("Campus payload is required")
    campus = await campus_repo.save_campus(db, Campus(**candidate.model_dump()))
    logger.info("campus_saved", campus_id=campus.id, abbr_name=campus.abbr_name)
    return campus


async def find_all(db: AsyncSession) -> list[Campus]:
    return await campus_repo.list_campuses(db)


async def find_by_id(db: AsyncSession, raw_id: str) -> Campus:
    campus_id = parse_campus_id(raw_id)
    campus = await campus_repo.get_campus(db, campus_id)
    if campus is None:
        raise ResourceNotFoundError("Campus", campus_id)
    return campus


async def find_by_name(db: AsyncSession, name: str) -> Campus:
    """Look a campus up by its full name or its abbreviation."""
    campus = await campus_repo.get_campus_by_name(db, name)
    if campus is None:
        raise ResourceNotFoundError("Campus", name, field="name")
    return campus


async def find_by_training_manager_id(db: AsyncSession, manager_id: int) -> Campus:
    _require_valid_manager_id(manager_id, "training manager")
    campus = await campus_repo.get_campus_by_training_manager(db, manager_id)
    if campus is None:
        raise ResourceNotFoundError("Campus", manager_id, field="training manager id")
    return campus


async def find_by_staging_manager_id(db: AsyncSession, manager_id: int) -> Campus:
    _require_valid_manager_id(manager_id, "staging manager")
    campus = await campus_repo.get_campus_by_staging_manager(db, manager_id)
    if campus is None:
        raise ResourceNotFoundError("Campus", manager_id, field="staging manager id")
    return campus


async def find_by_hr_lead_id(db: AsyncSession, hr_lead_id: int) -> Campus:
    _require_valid_manager_id(hr_lead_id, "HR lead")
    campus = await campus_repo.get_campus_by_hr_lead(db, hr_lead_id)
    if campus is None:
        raise ResourceNotFoundError("Campus", hr_lead_id, field="HR lead id")
    return campus


async def update(db: AsyncSession, payload: CampusUpdate) -> Campus:
    """Replace the stored campus wholesale; an unknown id is inserted."""
    campus = await campus_repo.merge_campus(db, Campus(**payload.model_dump()))
    logger.info("campus_updated", campus_id=campus.id)
    return campus


async def delete(db: AsyncSession, raw_id: str) -> None:
    campus_id = parse_campus_id(raw_id)
    await campus_repo.delete_campus(db, campus_id)
    logger.info("campus_deleted", campus_id=campus_id)
