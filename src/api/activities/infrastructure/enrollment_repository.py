"""SQLAlchemy implementation of IEnrollmentRepository."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from activities.domain.entities import Enrollment
from activities.domain.exceptions import DuplicateEnrollmentError
from activities.domain.value_objects import (
    ActivityGroupId,
    AttendanceStatus,
    EnrollmentId,
    StudentId,
)
from activities.infrastructure.models import EnrollmentModel
from activities.infrastructure.observability import (
    ActivityRepositoryProbe,
    DefaultActivityRepositoryProbe,
)
from activities.ports.repositories import IEnrollmentRepository


class EnrollmentRepository(IEnrollmentRepository):
    """Repository for student enrollments."""

    def __init__(
        self,
        session: Session,
        probe: ActivityRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultActivityRepositoryProbe()

    def create(self, enrollment: Enrollment) -> None:
        """Insert an enrollment.

        Raises:
            DuplicateEnrollmentError: If the student is already enrolled in
                the group (unique constraint)
        """
        self._session.add(
            EnrollmentModel(
                id=enrollment.id.value,
                student_id=enrollment.student_id.value,
                activity_group_id=enrollment.activity_group_id.value,
                enrollment_date=enrollment.enrollment_date,
                attendance_status=(
                    None
                    if enrollment.attendance_status is None
                    else enrollment.attendance_status.value
                ),
            )
        )
        try:
            self._session.flush()
        except IntegrityError as e:
            self._probe.duplicate_rejected(
                "enrollment",
                f"{enrollment.activity_group_id}/{enrollment.student_id}",
            )
            raise DuplicateEnrollmentError(enrollment.student_id) from e

    def update(self, enrollment: Enrollment) -> bool:
        """Update the attendance status; other columns are fixed."""
        model = self._session.get(EnrollmentModel, enrollment.id.value)
        if model is None:
            self._probe.entity_not_found("enrollment", enrollment.id.value)
            return False

        model.attendance_status = (
            None
            if enrollment.attendance_status is None
            else enrollment.attendance_status.value
        )
        self._session.flush()
        return True

    def delete(self, enrollment_id: EnrollmentId) -> bool:
        result = self._session.execute(
            delete(EnrollmentModel).where(EnrollmentModel.id == enrollment_id.value)
        )
        return result.rowcount > 0

    def get_by_id(self, enrollment_id: EnrollmentId) -> Enrollment | None:
        stmt = select(EnrollmentModel).where(EnrollmentModel.id == enrollment_id.value)
        model = self._session.execute(stmt).scalar_one_or_none()

        if model is None:
            self._probe.entity_not_found("enrollment", enrollment_id.value)
            return None
        return self._to_domain(model)

    def find_by_group_and_student(
        self, group_id: ActivityGroupId, student_id: StudentId
    ) -> Enrollment | None:
        stmt = select(EnrollmentModel).where(
            EnrollmentModel.activity_group_id == group_id.value,
            EnrollmentModel.student_id == student_id.value,
        )
        model = self._session.execute(stmt).scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    def find_by_group_id(self, group_id: ActivityGroupId) -> list[Enrollment]:
        stmt = (
            select(EnrollmentModel)
            .where(EnrollmentModel.activity_group_id == group_id.value)
            .order_by(EnrollmentModel.created_at, EnrollmentModel.id)
        )
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    def find_by_student_id(self, student_id: StudentId) -> list[Enrollment]:
        stmt = (
            select(EnrollmentModel)
            .where(EnrollmentModel.student_id == student_id.value)
            .order_by(EnrollmentModel.created_at, EnrollmentModel.id)
        )
        return [self._to_domain(m) for m in self._session.execute(stmt).scalars()]

    def count_by_group_ids(
        self, group_ids: Sequence[ActivityGroupId]
    ) -> dict[ActivityGroupId, int]:
        if not group_ids:
            return {}
        stmt = (
            select(EnrollmentModel.activity_group_id, func.count(EnrollmentModel.id))
            .where(EnrollmentModel.activity_group_id.in_([g.value for g in group_ids]))
            .group_by(EnrollmentModel.activity_group_id)
        )
        return {
            ActivityGroupId(value=group_id): count
            for group_id, count in self._session.execute(stmt).all()
        }

    def delete_by_group_id(self, group_id: ActivityGroupId) -> int:
        result = self._session.execute(
            delete(EnrollmentModel).where(
                EnrollmentModel.activity_group_id == group_id.value
            )
        )
        return result.rowcount

    @staticmethod
    def _to_domain(model: EnrollmentModel) -> Enrollment:
        return Enrollment(
            id=EnrollmentId(value=model.id),
            student_id=StudentId(value=model.student_id),
            activity_group_id=ActivityGroupId(value=model.activity_group_id),
            enrollment_date=model.enrollment_date,
            attendance_status=(
                None
                if model.attendance_status is None
                else AttendanceStatus(model.attendance_status)
            ),
        )
