"""Entities of the activities context.

An ActivityGroup owns its schedules, supervisor assignments and enrollments;
those rows never outlive the group and are deleted with it as a unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time

from activities.domain.value_objects import (
    ActivityGroupId,
    AttendanceStatus,
    CategoryId,
    EnrollmentId,
    ScheduleId,
    StaffId,
    StudentId,
    SupervisorAssignmentId,
    Weekday,
)


@dataclass
class Category:
    """Classification of activity groups (sports, music, crafts...).

    A category cannot be deleted while any group references it.
    """

    id: CategoryId
    name: str
    description: str | None = None

    @classmethod
    def create(cls, name: str, description: str | None = None) -> Category:
        """Create a new category with a generated ID."""
        return cls(id=CategoryId.generate(), name=name, description=description)


@dataclass
class ActivityGroup:
    """A named, schedulable activity with a capacity and supervising staff.

    Business rules:
    - While any supervisor exists, exactly one of them is primary
    - ``created_by`` is fixed at creation and is one of the ownership
      grounds for later modification
    """

    id: ActivityGroupId
    name: str
    category_id: CategoryId | None
    max_participants: int
    created_by: StaffId | None
    room_id: str | None = None
    is_open: bool = True

    @classmethod
    def create(
        cls,
        name: str,
        category_id: CategoryId | None,
        max_participants: int,
        created_by: StaffId | None,
        room_id: str | None = None,
        is_open: bool = True,
    ) -> ActivityGroup:
        """Factory method for creating a new group.

        Args:
            name: Display name of the group
            category_id: Category the group belongs to
            max_participants: Capacity, must be positive
            created_by: Staff member creating the group
            room_id: Optional room reference
            is_open: Whether students may currently enroll

        Returns:
            A new ActivityGroup with a generated ID (not yet persisted)
        """
        return cls(
            id=ActivityGroupId.generate(),
            name=name,
            category_id=category_id,
            max_participants=max_participants,
            created_by=created_by,
            room_id=room_id,
            is_open=is_open,
        )


@dataclass
class Schedule:
    """Weekly time slot of an activity group.

    ``activity_group_id`` is left empty until the schedule is attached to a
    group; once stored it can never change.
    """

    id: ScheduleId
    activity_group_id: ActivityGroupId | None
    day_of_week: Weekday | int
    start_time: time | None
    end_time: time | None

    @classmethod
    def create(
        cls,
        day_of_week: Weekday | int,
        start_time: time | None,
        end_time: time | None,
        activity_group_id: ActivityGroupId | None = None,
    ) -> Schedule:
        """Create a new schedule with a generated ID."""
        return cls(
            id=ScheduleId.generate(),
            activity_group_id=activity_group_id,
            day_of_week=day_of_week,
            start_time=start_time,
            end_time=end_time,
        )


@dataclass
class SupervisorAssignment:
    """A staff member supervising an activity group.

    Unique per (group_id, staff_id).
    """

    id: SupervisorAssignmentId
    group_id: ActivityGroupId
    staff_id: StaffId
    is_primary: bool = False

    @classmethod
    def create(
        cls, group_id: ActivityGroupId, staff_id: StaffId, is_primary: bool = False
    ) -> SupervisorAssignment:
        """Create a new assignment with a generated ID."""
        return cls(
            id=SupervisorAssignmentId.generate(),
            group_id=group_id,
            staff_id=staff_id,
            is_primary=is_primary,
        )


@dataclass
class Enrollment:
    """A student enrolled in an activity group.

    Unique per (activity_group_id, student_id).
    """

    id: EnrollmentId
    student_id: StudentId
    activity_group_id: ActivityGroupId
    enrollment_date: date
    attendance_status: AttendanceStatus | None = None

    @classmethod
    def create(
        cls,
        student_id: StudentId,
        activity_group_id: ActivityGroupId,
        enrollment_date: date | None = None,
    ) -> Enrollment:
        """Create a new enrollment dated today (UTC) unless a date is given."""
        return cls(
            id=EnrollmentId.generate(),
            student_id=student_id,
            activity_group_id=activity_group_id,
            enrollment_date=enrollment_date or datetime.now(UTC).date(),
        )
