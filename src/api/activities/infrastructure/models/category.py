"""SQLAlchemy ORM model for the activity_categories table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class CategoryModel(Base, TimestampMixin):
    """ORM model for activity_categories table."""

    __tablename__ = "activity_categories"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<CategoryModel(id={self.id}, name={self.name})>"
