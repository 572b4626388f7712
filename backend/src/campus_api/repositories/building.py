"""Building data-access layer.

Pure query functions: no business logic, no HTTP concerns. Each function
takes a session, flushes its writes and leaves committing to get_db().
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.db.session import sync_id_sequence
from campus_api.models import Building


async def save_building(db: AsyncSession, building: Building) -> Building:
    """Insert a new building and return it with its assigned id and timestamps."""
    db.add(building)
    await db.flush()
    await db.refresh(building)
    return building


async def merge_building(db: AsyncSession, building: Building) -> Building:
    """Upsert by id: overwrite the stored row, or insert it when the id is unknown."""
    merged = await db.merge(building)
    inserted = merged in db.new
    await db.flush()
    if inserted:
        await sync_id_sequence(db, Building.__table__)
    await db.refresh(merged)
    return merged


async def get_building(db: AsyncSession, building_id: int) -> Building | None:
    return await db.get(Building, building_id)


async def list_buildings(db: AsyncSession) -> list[Building]:
    result = await db.execute(select(Building).order_by(Building.id))
    return list(result.scalars().all())


async def list_buildings_by_owner(db: AsyncSession, owner_id: int) -> list[Building]:
    stmt = select(Building).where(Building.building_owner_id == owner_id).order_by(Building.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_building_by_training_lead(db: AsyncSession, training_lead_id: int) -> Building | None:
    """Return the lowest-id building led by this trainer, if any."""
    stmt = (
        select(Building)
        .where(Building.training_lead_id == training_lead_id)
        .order_by(Building.id)
        .limit(1)
    )
    result = await db.execute(stmt)
    return result.scalars().first()


async def delete_building(db: AsyncSession, building_id: int) -> None:
    """Delete by id. Unknown ids are a no-op."""
    await db.execute(delete(Building).where(Building.id == building_id))
