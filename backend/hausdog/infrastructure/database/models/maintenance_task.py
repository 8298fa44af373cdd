"""SQLAlchemy ORM model for the MaintenanceTask entity."""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hausdog.infrastructure.database.base import Base


class MaintenanceTaskModel(Base):
    """ORM model — maps to the 'maintenance_tasks' table."""

    __tablename__ = "maintenance_tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    property_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("properties.id", ondelete="CASCADE"), nullable=False
    )
    system_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("systems.id", ondelete="CASCADE"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    interval_months: Mapped[int] = mapped_column(Integer, nullable=False)
    next_due_date: Mapped[date] = mapped_column(Date, nullable=False)
    last_completed_at: Mapped[date | None] = mapped_column(Date, nullable=True)
    source: Mapped[str] = mapped_column(String(32), nullable=False, default="user_created")
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="active")
    created_by_id: Mapped[str] = mapped_column(String(36), nullable=False)
    updated_by_id: Mapped[str] = mapped_column(String(36), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_maintenance_tasks_property", "property_id"),
        Index("ix_maintenance_tasks_system", "system_id"),
        Index("ix_maintenance_tasks_next_due_date", "next_due_date"),
        Index("ix_maintenance_tasks_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<MaintenanceTaskModel(id={self.id}, name='{self.name}')>"
