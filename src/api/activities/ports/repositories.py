"""Repository protocols (ports) for the Activities bounded context.

Each protocol is the narrow store contract for one entity type. Lookups
return None (or False for update/delete) when no row matches; the
application layer turns that into its own not-found errors. Repositories
never commit: transaction boundaries belong to the unit of work.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from activities.domain.entities import (
    ActivityGroup,
    Category,
    Enrollment,
    Schedule,
    SupervisorAssignment,
)
from activities.domain.value_objects import (
    ActivityGroupId,
    CategoryId,
    EnrollmentId,
    ScheduleId,
    StaffId,
    StudentId,
    SupervisorAssignmentId,
)


@dataclass(frozen=True)
class GroupFilter:
    """Equality filters for listing activity groups.

    Fields left as None do not constrain the result.
    """

    category_id: CategoryId | None = None
    is_open: bool | None = None
    created_by: StaffId | None = None
    room_id: str | None = None


@runtime_checkable
class ICategoryRepository(Protocol):
    """Repository for Category persistence."""

    def create(self, category: Category) -> None:
        """Insert a new category."""
        ...

    def update(self, category: Category) -> bool:
        """Update an existing category.

        Returns:
            True if updated, False if not found
        """
        ...

    def delete(self, category_id: CategoryId) -> bool:
        """Delete a category.

        Returns:
            True if deleted, False if not found
        """
        ...

    def get_by_id(self, category_id: CategoryId) -> Category | None:
        """Retrieve a category by its ID, or None if not found."""
        ...

    def list_all(self) -> list[Category]:
        """List all categories ordered by name."""
        ...


@runtime_checkable
class IActivityGroupRepository(Protocol):
    """Repository for ActivityGroup persistence.

    Deleting a group does not touch its schedules, supervisors or
    enrollments; callers remove those first within the same transaction.
    """

    def create(self, group: ActivityGroup) -> None:
        """Insert a new activity group."""
        ...

    def update(self, group: ActivityGroup) -> bool:
        """Update an existing group.

        Returns:
            True if updated, False if not found
        """
        ...

    def delete(self, group_id: ActivityGroupId) -> bool:
        """Delete a group row.

        Returns:
            True if deleted, False if not found
        """
        ...

    def get_by_id(self, group_id: ActivityGroupId) -> ActivityGroup | None:
        """Retrieve a group by its ID, or None if not found."""
        ...

    def find_by_ids(self, group_ids: Sequence[ActivityGroupId]) -> list[ActivityGroup]:
        """Retrieve the groups with the given IDs, ordered by name.

        Unknown IDs are skipped.
        """
        ...

    def find_by_category(self, category_id: CategoryId) -> list[ActivityGroup]:
        """List groups belonging to a category."""
        ...

    def find_open_groups(
        self, category_id: CategoryId | None = None
    ) -> list[ActivityGroup]:
        """List groups accepting enrollments, optionally of one category."""
        ...

    def list_groups(self, filters: GroupFilter | None = None) -> list[ActivityGroup]:
        """List groups matching all given filters, ordered by name."""
        ...


@runtime_checkable
class IScheduleRepository(Protocol):
    """Repository for Schedule persistence."""

    def create(self, schedule: Schedule) -> None:
        """Insert a new schedule."""
        ...

    def update(self, schedule: Schedule) -> bool:
        """Update day and times of an existing schedule.

        Returns:
            True if updated, False if not found
        """
        ...

    def delete(self, schedule_id: ScheduleId) -> bool:
        """Delete a schedule.

        Returns:
            True if deleted, False if not found
        """
        ...

    def get_by_id(self, schedule_id: ScheduleId) -> Schedule | None:
        """Retrieve a schedule by its ID, or None if not found."""
        ...

    def find_by_group_id(self, group_id: ActivityGroupId) -> list[Schedule]:
        """List schedules of a group ordered by day and start time."""
        ...

    def delete_by_group_id(self, group_id: ActivityGroupId) -> int:
        """Delete every schedule of a group.

        Returns:
            Number of rows deleted
        """
        ...


@runtime_checkable
class ISupervisorRepository(Protocol):
    """Repository for SupervisorAssignment persistence.

    Implementations enforce uniqueness of (group_id, staff_id) at the store
    level as well.
    """

    def create(self, supervisor: SupervisorAssignment) -> None:
        """Insert a new supervisor assignment."""
        ...

    def update(self, supervisor: SupervisorAssignment) -> bool:
        """Update staff and primary flag of an existing assignment.

        Returns:
            True if updated, False if not found
        """
        ...

    def delete(self, supervisor_id: SupervisorAssignmentId) -> bool:
        """Delete an assignment.

        Returns:
            True if deleted, False if not found
        """
        ...

    def get_by_id(
        self, supervisor_id: SupervisorAssignmentId
    ) -> SupervisorAssignment | None:
        """Retrieve an assignment by its ID, or None if not found."""
        ...

    def find_by_group_id(self, group_id: ActivityGroupId) -> list[SupervisorAssignment]:
        """List assignments of a group in insertion (ID) order."""
        ...

    def find_by_group_ids(
        self, group_ids: Sequence[ActivityGroupId]
    ) -> list[SupervisorAssignment]:
        """List assignments of several groups with a single query."""
        ...

    def find_by_staff_id(self, staff_id: StaffId) -> list[SupervisorAssignment]:
        """List every assignment held by a staff member."""
        ...

    def delete_by_group_id(self, group_id: ActivityGroupId) -> int:
        """Delete every assignment of a group.

        Returns:
            Number of rows deleted
        """
        ...


@runtime_checkable
class IEnrollmentRepository(Protocol):
    """Repository for Enrollment persistence.

    Implementations enforce uniqueness of (activity_group_id, student_id) at
    the store level as well.
    """

    def create(self, enrollment: Enrollment) -> None:
        """Insert a new enrollment."""
        ...

    def update(self, enrollment: Enrollment) -> bool:
        """Update the attendance status of an enrollment.

        Returns:
            True if updated, False if not found
        """
        ...

    def delete(self, enrollment_id: EnrollmentId) -> bool:
        """Delete an enrollment.

        Returns:
            True if deleted, False if not found
        """
        ...

    def get_by_id(self, enrollment_id: EnrollmentId) -> Enrollment | None:
        """Retrieve an enrollment by its ID, or None if not found."""
        ...

    def find_by_group_and_student(
        self, group_id: ActivityGroupId, student_id: StudentId
    ) -> Enrollment | None:
        """Retrieve a student's enrollment in a group, or None."""
        ...

    def find_by_group_id(self, group_id: ActivityGroupId) -> list[Enrollment]:
        """List enrollments of a group in insertion (ID) order."""
        ...

    def find_by_student_id(self, student_id: StudentId) -> list[Enrollment]:
        """List every enrollment of a student."""
        ...

    def count_by_group_ids(
        self, group_ids: Sequence[ActivityGroupId]
    ) -> dict[ActivityGroupId, int]:
        """Count enrollments per group with a single query.

        Groups without enrollments are absent from the result.
        """
        ...

    def delete_by_group_id(self, group_id: ActivityGroupId) -> int:
        """Delete every enrollment of a group.

        Returns:
            Number of rows deleted
        """
        ...
