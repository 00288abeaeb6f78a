"""SQLAlchemy implementation of IActivityGroupRepository."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from activities.domain.entities import ActivityGroup
from activities.domain.value_objects import ActivityGroupId, CategoryId, StaffId
from activities.infrastructure.models import ActivityGroupModel
from activities.infrastructure.observability import (
    ActivityRepositoryProbe,
    DefaultActivityRepositoryProbe,
)
from activities.ports.repositories import GroupFilter, IActivityGroupRepository


class ActivityGroupRepository(IActivityGroupRepository):
    """Repository for activity groups.

    Only the group row is handled here; owned schedules, supervisors and
    enrollments live in their own repositories.
    """

    def __init__(
        self,
        session: Session,
        probe: ActivityRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultActivityRepositoryProbe()

    def create(self, group: ActivityGroup) -> None:
        assert group.category_id is not None and group.created_by is not None
        self._session.add(
            ActivityGroupModel(
                id=group.id.value,
                name=group.name,
                category_id=group.category_id.value,
                max_participants=group.max_participants,
                created_by=group.created_by.value,
                room_id=group.room_id,
                is_open=group.is_open,
            )
        )
        self._session.flush()

    def update(self, group: ActivityGroup) -> bool:
        """Update name, category, capacity, room and open flag.

        ``created_by`` is never changed.
        """
        model = self._session.get(ActivityGroupModel, group.id.value)
        if model is None:
            self._probe.entity_not_found("activity_group", group.id.value)
            return False

        assert group.category_id is not None
        model.name = group.name
        model.category_id = group.category_id.value
        model.max_participants = group.max_participants
        model.room_id = group.room_id
        model.is_open = group.is_open
        self._session.flush()
        return True

    def delete(self, group_id: ActivityGroupId) -> bool:
        result = self._session.execute(
            delete(ActivityGroupModel).where(ActivityGroupModel.id == group_id.value)
        )
        return result.rowcount > 0

    def get_by_id(self, group_id: ActivityGroupId) -> ActivityGroup | None:
        stmt = select(ActivityGroupModel).where(ActivityGroupModel.id == group_id.value)
        model = self._session.execute(stmt).scalar_one_or_none()

        if model is None:
            self._probe.entity_not_found("activity_group", group_id.value)
            return None
        return self._to_domain(model)

    def find_by_ids(self, group_ids: Sequence[ActivityGroupId]) -> list[ActivityGroup]:
        if not group_ids:
            return []
        stmt = (
            select(ActivityGroupModel)
            .where(ActivityGroupModel.id.in_([g.value for g in group_ids]))
            .order_by(ActivityGroupModel.name, ActivityGroupModel.id)
        )
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    def find_by_category(self, category_id: CategoryId) -> list[ActivityGroup]:
        return self.list_groups(GroupFilter(category_id=category_id))

    def find_open_groups(
        self, category_id: CategoryId | None = None
    ) -> list[ActivityGroup]:
        return self.list_groups(GroupFilter(category_id=category_id, is_open=True))

    def list_groups(self, filters: GroupFilter | None = None) -> list[ActivityGroup]:
        stmt = select(ActivityGroupModel)

        if filters is not None:
            if filters.category_id is not None:
                stmt = stmt.where(
                    ActivityGroupModel.category_id == filters.category_id.value
                )
            if filters.is_open is not None:
                stmt = stmt.where(ActivityGroupModel.is_open == filters.is_open)
            if filters.created_by is not None:
                stmt = stmt.where(
                    ActivityGroupModel.created_by == filters.created_by.value
                )
            if filters.room_id is not None:
                stmt = stmt.where(ActivityGroupModel.room_id == filters.room_id)

        stmt = stmt.order_by(ActivityGroupModel.name, ActivityGroupModel.id)
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    @staticmethod
    def _to_domain(model: ActivityGroupModel) -> ActivityGroup:
        return ActivityGroup(
            id=ActivityGroupId(value=model.id),
            name=model.name,
            category_id=CategoryId(value=model.category_id),
            max_participants=model.max_participants,
            created_by=StaffId(value=model.created_by),
            room_id=model.room_id,
            is_open=model.is_open,
        )
