"""Structural validation of activity entities.

Each validator is a pure function: no I/O, and the first failing constraint
raises ValidationFailedError naming the offending field. Validators run
before any write so a failure never leaves partial effects.
"""

from __future__ import annotations

from collections.abc import Iterable

from activities.domain.entities import (
    ActivityGroup,
    Category,
    Enrollment,
    Schedule,
    SupervisorAssignment,
)
from activities.domain.exceptions import ValidationFailedError
from activities.domain.value_objects import AttendanceStatus, Weekday

MAX_CATEGORY_NAME_LENGTH = 100
MAX_CATEGORY_DESCRIPTION_LENGTH = 1000
MAX_GROUP_NAME_LENGTH = 100


def _require_name(value: str | None, field: str, max_length: int) -> None:
    if value is None or not value.strip():
        raise ValidationFailedError(field, "must not be empty")
    if len(value) > max_length:
        raise ValidationFailedError(
            field, f"must be at most {max_length} characters"
        )


def _require(value: object, field: str) -> None:
    if value is None or not str(value).strip():
        raise ValidationFailedError(field, "is required")


def validate_category(category: Category) -> None:
    """Validate a category before it is written."""
    _require_name(category.name, "name", MAX_CATEGORY_NAME_LENGTH)
    if (
        category.description is not None
        and len(category.description) > MAX_CATEGORY_DESCRIPTION_LENGTH
    ):
        raise ValidationFailedError(
            "description",
            f"must be at most {MAX_CATEGORY_DESCRIPTION_LENGTH} characters",
        )


def validate_group(group: ActivityGroup) -> None:
    """Validate an activity group before it is written."""
    _require_name(group.name, "name", MAX_GROUP_NAME_LENGTH)
    if (
        not isinstance(group.max_participants, int)
        or isinstance(group.max_participants, bool)
        or group.max_participants <= 0
    ):
        raise ValidationFailedError(
            "max_participants", "must be greater than zero"
        )
    _require(group.category_id, "category_id")
    _require(group.created_by, "created_by")


def validate_schedule(schedule: Schedule) -> None:
    """Validate a schedule before it is written.

    The schedule must already be attached to a group.
    """
    _require(schedule.activity_group_id, "activity_group_id")
    try:
        Weekday(schedule.day_of_week)
    except ValueError:
        raise ValidationFailedError(
            "day_of_week", "must be between 1 (Monday) and 7 (Sunday)"
        ) from None
    if schedule.start_time is None:
        raise ValidationFailedError("start_time", "is required")
    if schedule.end_time is None:
        raise ValidationFailedError("end_time", "is required")
    if schedule.start_time >= schedule.end_time:
        raise ValidationFailedError("end_time", "must be after start_time")


def validate_supervisor(supervisor: SupervisorAssignment) -> None:
    """Validate a supervisor assignment before it is written."""
    _require(supervisor.group_id, "group_id")
    _require(supervisor.staff_id, "staff_id")


def validate_enrollment(enrollment: Enrollment) -> None:
    """Validate an enrollment before it is written."""
    _require(enrollment.student_id, "student_id")
    _require(enrollment.activity_group_id, "activity_group_id")
    if enrollment.attendance_status is not None:
        validate_attendance_status(enrollment.attendance_status)


def validate_attendance_status(status: str | None) -> None:
    """Validate an attendance status; None clears the status."""
    if status is None:
        return
    try:
        AttendanceStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationFailedError(
            "attendance_status", f"must be one of: {allowed}"
        ) from None


def validate_member_ids(ids: Iterable[object], field: str) -> None:
    """Validate a list of staff or student ids passed by a caller."""
    for member_id in ids:
        _require(member_id, field)
