"""Campus data-access layer.

Pure query functions: no business logic, no HTTP concerns. Buildings are
eager-loaded by the relationship's selectin strategy, including on refresh.
"""

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from campus_api.db.session import sync_id_sequence
from campus_api.models import Campus


async def save_campus(db: AsyncSession, campus: Campus) -> Campus:
    """Insert a new campus and return it with its assigned id and timestamps."""
    db.add(campus)
    await db.flush()
    await db.refresh(campus)
    return campus


async def merge_campus(db: AsyncSession, campus: Campus) -> Campus:
    """Upsert by id: overwrite the stored row, or insert it when the id is unknown."""
    merged = await db.merge(campus)
    inserted = merged in db.new
    await db.flush()
    if inserted:
        await sync_id_sequence(db, Campus.__table__)
    await db.refresh(merged)
    return merged


async def get_campus(db: AsyncSession, campus_id: int) -> Campus | None:
    return await db.get(Campus, campus_id)


async def list_campuses(db: AsyncSession) -> list[Campus]:
    result = await db.execute(select(Campus).order_by(Campus.id))
    return list(result.scalars().all())


async def get_campus_by_name(db: AsyncSession, name: str) -> Campus | None:
    """Match against the full name or the abbreviated name."""
    stmt = (
        select(Campus)
        .where(or_(Campus.name == name, Campus.abbr_name == name))
        .order_by(Campus.id)
        .limit(1)
    )
    result = await db.execute(stmt)
    return result.scalars().first()


async def _get_campus_by(
    db: AsyncSession, column: InstrumentedAttribute[int], value: int
) -> Campus | None:
    stmt = select(Campus).where(column == value).order_by(Campus.id).limit(1)
    result = await db.execute(stmt)
    return result.scalars().first()


async def get_campus_by_training_manager(db: AsyncSession, manager_id: int) -> Campus | None:
    return await _get_campus_by(db, Campus.training_manager_id, manager_id)


async def get_campus_by_staging_manager(db: AsyncSession, manager_id: int) -> Campus | None:
    return await _get_campus_by(db, Campus.staging_manager_id, manager_id)


async def get_campus_by_hr_lead(db: AsyncSession, hr_lead_id: int) -> Campus | None:
    return await _get_campus_by(db, Campus.hr_lead_id, hr_lead_id)


async def delete_campus(db: AsyncSession, campus_id: int) -> None:
    """Delete by id. Unknown ids are a no-op; member buildings keep existing with campus_id NULL."""
    await db.execute(delete(Campus).where(Campus.id == campus_id))
