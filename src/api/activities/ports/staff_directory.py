"""Staff directory port.

Staff members are owned outside the Activities context; the engine only
needs to know whether a referenced staff member exists.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from activities.domain.value_objects import StaffId


@runtime_checkable
class IStaffDirectory(Protocol):
    """Lookup of staff members by ID."""

    def exists(self, staff_id: StaffId) -> bool:
        """Check whether a staff member exists.

        Args:
            staff_id: The staff member to look up

        Returns:
            True if the directory knows the staff member
        """
        ...
