"""SQLAlchemy ORM model for the activity_groups table.

Schedules, supervisor assignments and enrollments reference a group with
RESTRICT foreign keys: the application deletes them explicitly, in the same
transaction, before the group row.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ActivityGroupModel(Base, TimestampMixin):
    """ORM model for activity_groups table.

    Foreign Key Constraint:
    - category_id references activity_categories.id with RESTRICT delete,
      so a category in use cannot be removed
    """

    __tablename__ = "activity_groups"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    category_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("activity_categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    max_participants: Mapped[int] = mapped_column(Integer, nullable=False)
    created_by: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    room_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<ActivityGroupModel(id={self.id}, name={self.name}, "
            f"category_id={self.category_id})>"
        )
