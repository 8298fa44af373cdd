"""SQLAlchemy ORM model for the ServiceRecord entity."""

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hausdog.infrastructure.database.base import Base


class ServiceRecordModel(Base):
    """ORM model — maps to the 'service_records' table.

    document_id is a bare reference: documents live in another service.
    """

    __tablename__ = "service_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    property_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("properties.id", ondelete="CASCADE"), nullable=False
    )
    system_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("systems.id", ondelete="CASCADE"), nullable=True
    )
    component_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("components.id", ondelete="CASCADE"), nullable=True
    )
    document_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    service_date: Mapped[date] = mapped_column(Date, nullable=False)
    service_type: Mapped[str] = mapped_column(String(255), nullable=False)
    provider: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cost: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
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
        Index("ix_service_records_property", "property_id"),
        Index("ix_service_records_system", "system_id"),
        Index("ix_service_records_component", "component_id"),
    )

    def __repr__(self) -> str:
        return f"<ServiceRecordModel(id={self.id}, type='{self.service_type}')>"
