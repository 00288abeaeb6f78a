"""SQLAlchemy implementation of IScheduleRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from activities.domain.entities import Schedule
from activities.domain.value_objects import ActivityGroupId, ScheduleId, Weekday
from activities.infrastructure.models import ScheduleModel
from activities.infrastructure.observability import (
    ActivityRepositoryProbe,
    DefaultActivityRepositoryProbe,
)
from activities.ports.repositories import IScheduleRepository


class ScheduleRepository(IScheduleRepository):
    """Repository for weekly schedules of activity groups."""

    def __init__(
        self,
        session: Session,
        probe: ActivityRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultActivityRepositoryProbe()

    def create(self, schedule: Schedule) -> None:
        assert schedule.activity_group_id is not None
        self._session.add(
            ScheduleModel(
                id=schedule.id.value,
                activity_group_id=schedule.activity_group_id.value,
                day_of_week=int(schedule.day_of_week),
                start_time=schedule.start_time,
                end_time=schedule.end_time,
            )
        )
        self._session.flush()

    def update(self, schedule: Schedule) -> bool:
        """Update day and times; the owning group is never changed."""
        model = self._session.get(ScheduleModel, schedule.id.value)
        if model is None:
            self._probe.entity_not_found("schedule", schedule.id.value)
            return False

        model.day_of_week = int(schedule.day_of_week)
        model.start_time = schedule.start_time
        model.end_time = schedule.end_time
        self._session.flush()
        return True

    def delete(self, schedule_id: ScheduleId) -> bool:
        result = self._session.execute(
            delete(ScheduleModel).where(ScheduleModel.id == schedule_id.value)
        )
        return result.rowcount > 0

    def get_by_id(self, schedule_id: ScheduleId) -> Schedule | None:
        stmt = select(ScheduleModel).where(ScheduleModel.id == schedule_id.value)
        model = self._session.execute(stmt).scalar_one_or_none()

        if model is None:
            self._probe.entity_not_found("schedule", schedule_id.value)
            return None
        return self._to_domain(model)

    def find_by_group_id(self, group_id: ActivityGroupId) -> list[Schedule]:
        stmt = (
            select(ScheduleModel)
            .where(ScheduleModel.activity_group_id == group_id.value)
            .order_by(ScheduleModel.day_of_week, ScheduleModel.start_time)
        )
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    def delete_by_group_id(self, group_id: ActivityGroupId) -> int:
        result = self._session.execute(
            delete(ScheduleModel).where(ScheduleModel.activity_group_id == group_id.value)
        )
        return result.rowcount

    @staticmethod
    def _to_domain(model: ScheduleModel) -> Schedule:
        return Schedule(
            id=ScheduleId(value=model.id),
            activity_group_id=ActivityGroupId(value=model.activity_group_id),
            day_of_week=Weekday(model.day_of_week),
            start_time=model.start_time,
            end_time=model.end_time,
        )
