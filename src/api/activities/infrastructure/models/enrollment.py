"""SQLAlchemy ORM model for the activity_enrollments table."""

from datetime import date

from sqlalchemy import Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class EnrollmentModel(Base, TimestampMixin):
    """ORM model for activity_enrollments table.

    A student is enrolled in a group at most once.
    """

    __tablename__ = "activity_enrollments"
    __table_args__ = (UniqueConstraint("activity_group_id", "student_id"),)

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    student_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    activity_group_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("activity_groups.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    enrollment_date: Mapped[date] = mapped_column(Date, nullable=False)
    attendance_status: Mapped[str | None] = mapped_column(String(16), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<EnrollmentModel(id={self.id}, activity_group_id={self.activity_group_id}, "
            f"student_id={self.student_id})>"
        )
