"""SQLAlchemy ORM model for the activity_schedules table."""

from datetime import time

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ScheduleModel(Base, TimestampMixin):
    """ORM model for activity_schedules table."""

    __tablename__ = "activity_schedules"
    __table_args__ = (
        CheckConstraint("day_of_week BETWEEN 1 AND 7", name="day_of_week_range"),
        CheckConstraint("start_time < end_time", name="time_range"),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    activity_group_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("activity_groups.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<ScheduleModel(id={self.id}, activity_group_id={self.activity_group_id}, "
            f"day_of_week={self.day_of_week})>"
        )
