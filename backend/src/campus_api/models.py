"""SQLAlchemy models.

Every model inherits from Base so create_tables() picks it up. Embedded,
document-shaped values (address, associate ids) live in JSON columns.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from campus_api.db.session import Base


class Building(Base):
    __tablename__ = "buildings"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    address: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    building_owner_id: Mapped[int] = mapped_column(index=True)
    training_lead_id: Mapped[int] = mapped_column(index=True)
    campus_id: Mapped[int | None] = mapped_column(
        ForeignKey("campuses.id", ondelete="SET NULL"), index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class Campus(Base):
    __tablename__ = "campuses"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    abbr_name: Mapped[str] = mapped_column(String(20), index=True)
    address: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    training_manager_id: Mapped[int] = mapped_column(index=True)
    staging_manager_id: Mapped[int] = mapped_column(index=True)
    hr_lead_id: Mapped[int] = mapped_column(index=True)
    corporate_employee_ids: Mapped[list[int]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Selectin so buildings load alongside the campus; lazy loads can't run under asyncio.
    buildings: Mapped[list["Building"]] = relationship(
        order_by="Building.id", lazy="selectin", passive_deletes=True
    )
