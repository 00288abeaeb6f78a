"""Error taxonomy for the activities bounded context.

Every error raised by the activity engine is an ActivityError of one of five
kinds, so the boundary layer can map them without inspecting messages:

- NotFoundError: a category, group, schedule, supervisor, enrollment or
  staff member does not exist (404-equivalent)
- ValidationFailedError: structural validation of an input failed
  (400-equivalent)
- NotOwnerError: the caller may not modify the group (403-equivalent)
- ConflictError: the write would break a uniqueness rule or an invariant
  (400-equivalent)
- InternalError: the store or something unexpected failed (500-equivalent)

Errors carry ``op``, the name of the public operation that failed.
"""

from __future__ import annotations

from typing import ClassVar, Self


class ActivityError(Exception):
    """Base class for all activity engine errors."""

    status_code: ClassVar[int] = 500

    def __init__(self, message: str, *, op: str | None = None):
        super().__init__(message)
        self.message = message
        self.op = op

    def with_op(self, op: str) -> Self:
        """Record the failed operation unless an outer one already did."""
        if self.op is None:
            self.op = op
        return self

    def __str__(self) -> str:
        if self.op:
            return f"{self.op}: {self.message}"
        return self.message


# === Not found ===


class NotFoundError(ActivityError):
    """A referenced entity does not exist."""

    status_code = 404
    entity: ClassVar[str] = "resource"

    def __init__(self, identifier: object | None = None, *, op: str | None = None):
        self.identifier = None if identifier is None else str(identifier)
        if self.identifier is None:
            message = f"{self.entity} not found"
        else:
            message = f"{self.entity} {self.identifier} not found"
        super().__init__(message, op=op)


class CategoryNotFoundError(NotFoundError):
    entity = "category"


class GroupNotFoundError(NotFoundError):
    entity = "activity group"


class ScheduleNotFoundError(NotFoundError):
    entity = "schedule"


class SupervisorNotFoundError(NotFoundError):
    entity = "supervisor"


class EnrollmentNotFoundError(NotFoundError):
    entity = "enrollment"


class StaffNotFoundError(NotFoundError):
    entity = "staff member"


class NotEnrolledError(EnrollmentNotFoundError):
    """Raised when unenrolling a student who is not enrolled in the group."""

    def __init__(self, student_id: object, *, op: str | None = None):
        super().__init__(student_id, op=op)
        self.message = f"student {student_id} is not enrolled in this group"
        self.args = (self.message,)


# === Validation ===


class ValidationFailedError(ActivityError):
    """Raised when the first structural constraint of an input fails."""

    status_code = 400

    def __init__(self, field: str, detail: str, *, op: str | None = None):
        self.field = field
        self.detail = detail
        super().__init__(f"invalid {field}: {detail}", op=op)


# === Authorization ===


class NotOwnerError(ActivityError):
    """Raised when a caller is neither creator, supervisor, nor elevated."""

    status_code = 403

    def __init__(self, group_id: object, staff_id: object, *, op: str | None = None):
        self.group_id = str(group_id)
        self.staff_id = None if staff_id is None else str(staff_id)
        super().__init__(
            f"staff {self.staff_id} may not modify activity group {self.group_id}",
            op=op,
        )


# === Conflicts ===


class ConflictError(ActivityError):
    """Raised when a write would violate uniqueness or a group invariant."""

    status_code = 400


class DuplicateSupervisorError(ConflictError):
    def __init__(self, staff_id: object, *, op: str | None = None):
        self.staff_id = str(staff_id)
        super().__init__(
            f"supervisor {self.staff_id} already assigned to this group", op=op
        )


class DuplicateEnrollmentError(ConflictError):
    def __init__(self, student_id: object, *, op: str | None = None):
        self.student_id = str(student_id)
        super().__init__(
            f"student {self.student_id} is already enrolled in this group", op=op
        )


class CategoryInUseError(ConflictError):
    def __init__(self, category_id: object, *, op: str | None = None):
        self.category_id = str(category_id)
        super().__init__(
            "category is in use by one or more activity groups", op=op
        )


class LastSupervisorError(ConflictError):
    def __init__(self, *, op: str | None = None):
        super().__init__("cannot delete the only supervisor for an activity", op=op)


class EmptySupervisorSetError(ConflictError):
    def __init__(self, *, op: str | None = None):
        super().__init__("cannot remove all supervisors from an activity", op=op)


class PrimaryRequiredError(ConflictError):
    def __init__(self, *, op: str | None = None):
        super().__init__("at least one supervisor must remain primary", op=op)


class GroupReassignmentError(ConflictError):
    """Raised when a schedule or supervisor would move to a different group."""

    def __init__(self, entity: str, *, op: str | None = None):
        self.entity = entity
        super().__init__(
            f"cannot move a {entity} to a different activity group", op=op
        )


# === Internal ===


class InternalError(ActivityError):
    """Wraps a store failure or any other unexpected exception."""

    status_code = 500

    def __init__(self, cause: BaseException, *, op: str | None = None):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__, op=op)
