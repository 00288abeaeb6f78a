"""SQLAlchemy implementation of ISupervisorRepository."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from activities.domain.entities import SupervisorAssignment
from activities.domain.exceptions import DuplicateSupervisorError
from activities.domain.value_objects import (
    ActivityGroupId,
    StaffId,
    SupervisorAssignmentId,
)
from activities.infrastructure.models import SupervisorModel
from activities.infrastructure.observability import (
    ActivityRepositoryProbe,
    DefaultActivityRepositoryProbe,
)
from activities.ports.repositories import ISupervisorRepository


class SupervisorRepository(ISupervisorRepository):
    """Repository for supervisor assignments.

    Assignments of a group are returned in insertion order, which is the
    order used to pick a successor when the primary is deleted.
    """

    def __init__(
        self,
        session: Session,
        probe: ActivityRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultActivityRepositoryProbe()

    def create(self, supervisor: SupervisorAssignment) -> None:
        """Insert an assignment.

        Raises:
            DuplicateSupervisorError: If the staff member is already assigned
                to the group (unique constraint)
        """
        self._session.add(
            SupervisorModel(
                id=supervisor.id.value,
                group_id=supervisor.group_id.value,
                staff_id=supervisor.staff_id.value,
                is_primary=supervisor.is_primary,
            )
        )
        self._flush_unique(supervisor)

    def update(self, supervisor: SupervisorAssignment) -> bool:
        model = self._session.get(SupervisorModel, supervisor.id.value)
        if model is None:
            self._probe.entity_not_found("supervisor", supervisor.id.value)
            return False

        model.staff_id = supervisor.staff_id.value
        model.is_primary = supervisor.is_primary
        # Flush per row so demotions reach the store before promotions
        self._flush_unique(supervisor)
        return True

    def delete(self, supervisor_id: SupervisorAssignmentId) -> bool:
        result = self._session.execute(
            delete(SupervisorModel).where(SupervisorModel.id == supervisor_id.value)
        )
        return result.rowcount > 0

    def get_by_id(
        self, supervisor_id: SupervisorAssignmentId
    ) -> SupervisorAssignment | None:
        stmt = select(SupervisorModel).where(SupervisorModel.id == supervisor_id.value)
        model = self._session.execute(stmt).scalar_one_or_none()

        if model is None:
            self._probe.entity_not_found("supervisor", supervisor_id.value)
            return None
        return self._to_domain(model)

    def find_by_group_id(self, group_id: ActivityGroupId) -> list[SupervisorAssignment]:
        stmt = (
            select(SupervisorModel)
            .where(SupervisorModel.group_id == group_id.value)
            .order_by(SupervisorModel.created_at, SupervisorModel.id)
        )
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    def find_by_group_ids(
        self, group_ids: Sequence[ActivityGroupId]
    ) -> list[SupervisorAssignment]:
        if not group_ids:
            return []
        stmt = (
            select(SupervisorModel)
            .where(SupervisorModel.group_id.in_([g.value for g in group_ids]))
            .order_by(SupervisorModel.created_at, SupervisorModel.id)
        )
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    def find_by_staff_id(self, staff_id: StaffId) -> list[SupervisorAssignment]:
        stmt = (
            select(SupervisorModel)
            .where(SupervisorModel.staff_id == staff_id.value)
            .order_by(SupervisorModel.created_at, SupervisorModel.id)
        )
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    def delete_by_group_id(self, group_id: ActivityGroupId) -> int:
        result = self._session.execute(
            delete(SupervisorModel).where(SupervisorModel.group_id == group_id.value)
        )
        return result.rowcount

    def _flush_unique(self, supervisor: SupervisorAssignment) -> None:
        try:
            self._session.flush()
        except IntegrityError as e:
            self._probe.duplicate_rejected(
                "supervisor", f"{supervisor.group_id}/{supervisor.staff_id}"
            )
            raise DuplicateSupervisorError(supervisor.staff_id) from e

    @staticmethod
    def _to_domain(model: SupervisorModel) -> SupervisorAssignment:
        return SupervisorAssignment(
            id=SupervisorAssignmentId(value=model.id),
            group_id=ActivityGroupId(value=model.group_id),
            staff_id=StaffId(value=model.staff_id),
            is_primary=model.is_primary,
        )
