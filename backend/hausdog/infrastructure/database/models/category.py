"""SQLAlchemy ORM model for the Category reference table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hausdog.infrastructure.database.base import Base


class CategoryModel(Base):
    """ORM model — maps to the 'categories' table."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name='{self.name}')>"
