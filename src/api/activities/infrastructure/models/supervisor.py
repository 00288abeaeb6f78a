"""SQLAlchemy ORM model for the activity_supervisors table."""

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class SupervisorModel(Base, TimestampMixin):
    """ORM model for activity_supervisors table.

    A staff member is assigned to a group at most once. The single-primary
    rule is maintained by the application inside each write transaction.
    """

    __tablename__ = "activity_supervisors"
    __table_args__ = (UniqueConstraint("group_id", "staff_id"),)

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    group_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("activity_groups.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    staff_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<SupervisorModel(id={self.id}, group_id={self.group_id}, "
            f"staff_id={self.staff_id}, is_primary={self.is_primary})>"
        )
