"""Activities domain module.

Contains entities, value objects, validation and the membership invariants
of the Activities bounded context.
"""

from activities.domain.entities import (
    ActivityGroup,
    Category,
    Enrollment,
    Schedule,
    SupervisorAssignment,
)
from activities.domain.primary_supervisor import SupervisorRoster
from activities.domain.reconciliation import MembershipDelta, reconcile
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

__all__ = [
    "ActivityGroup",
    "ActivityGroupId",
    "AttendanceStatus",
    "Category",
    "CategoryId",
    "Enrollment",
    "EnrollmentId",
    "MembershipDelta",
    "Schedule",
    "ScheduleId",
    "StaffId",
    "StudentId",
    "SupervisorAssignment",
    "SupervisorAssignmentId",
    "SupervisorRoster",
    "Weekday",
    "reconcile",
]
