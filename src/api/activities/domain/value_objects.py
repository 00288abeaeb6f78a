"""Value objects for the activities domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Self

from ulid import ULID


@dataclass(frozen=True)
class _EntityId:
    """Identifier for an entity owned by the activities context.

    Uses ULID for sortability and distribution-friendly generation.
    Subclasses never compare equal to each other, even for the same value.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Generate a new identifier using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create an identifier from string value.

        Args:
            value: ULID string

        Returns:
            Identifier instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid {cls.__name__}: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class CategoryId(_EntityId):
    """Identifier for an activity Category."""


@dataclass(frozen=True)
class ActivityGroupId(_EntityId):
    """Identifier for an ActivityGroup."""


@dataclass(frozen=True)
class ScheduleId(_EntityId):
    """Identifier for a Schedule."""


@dataclass(frozen=True)
class SupervisorAssignmentId(_EntityId):
    """Identifier for a SupervisorAssignment row."""


@dataclass(frozen=True)
class EnrollmentId(_EntityId):
    """Identifier for an Enrollment."""


@dataclass(frozen=True)
class _ExternalId:
    """Reference to an entity owned outside the activities context.

    The owning directory decides the format, so only emptiness is checked.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create a reference from a non-empty string.

        Raises:
            ValueError: If value is empty or whitespace
        """
        if not value or not value.strip():
            raise ValueError(f"Invalid {cls.__name__}: value must not be empty")
        return cls(value=value.strip())


@dataclass(frozen=True)
class StaffId(_ExternalId):
    """Identifier of a staff member in the staff directory."""


@dataclass(frozen=True)
class StudentId(_ExternalId):
    """Identifier of a student."""


class Weekday(IntEnum):
    """Day of week for schedules (ISO numbering, Monday = 1)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class AttendanceStatus(StrEnum):
    """Attendance status recorded on an enrollment."""

    PRESENT = "present"
    ABSENT = "absent"
