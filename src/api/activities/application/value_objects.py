"""Application-layer read models for the Activities bounded context.

These are read-only views assembled by the activity service from several
repositories; they are never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

from activities.domain.entities import (
    ActivityGroup,
    Category,
    Schedule,
    SupervisorAssignment,
)


@dataclass(frozen=True)
class ActivityGroupDetails:
    """A group with its category, supervisors and schedules.

    Supervisors are listed primary first, then in insertion order.
    """

    group: ActivityGroup
    category: Category | None
    supervisors: tuple[SupervisorAssignment, ...]
    schedules: tuple[Schedule, ...]

    @property
    def primary_supervisor(self) -> SupervisorAssignment | None:
        """The group's primary supervisor, if it has supervisors."""
        return next((s for s in self.supervisors if s.is_primary), None)


@dataclass(frozen=True)
class GroupWithEnrollmentCount:
    """A group together with its current number of enrolled students."""

    group: ActivityGroup
    enrollment_count: int

    @property
    def available_places(self) -> int:
        """Remaining capacity, never negative."""
        return max(self.group.max_participants - self.enrollment_count, 0)
