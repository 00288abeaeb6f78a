"""Primary-supervisor invariant for an activity group.

Supervisors are the accountable party for a group, so whenever a group has
supervisors exactly one of them is primary. SupervisorRoster holds the
supervisors of one group and applies every add/update/delete/reconcile
transition so that the invariant holds afterwards. It performs no I/O; the
application service loads the roster and persists what changed, all within
one transaction.
"""

from __future__ import annotations

from collections.abc import Iterable

from activities.domain.entities import SupervisorAssignment
from activities.domain.exceptions import (
    DuplicateSupervisorError,
    LastSupervisorError,
    PrimaryRequiredError,
    SupervisorNotFoundError,
)
from activities.domain.value_objects import (
    ActivityGroupId,
    StaffId,
    SupervisorAssignmentId,
)


class SupervisorRoster:
    """The supervisors of one activity group.

    Business rules:
    - While the roster is non-empty, exactly one supervisor is primary
    - A staff member is assigned to a group at most once
    - The only remaining supervisor cannot be removed

    Mutations change the loaded assignments in place. ``changed()`` reports
    the loaded assignments whose primary flag now differs, demotions first,
    so callers can persist them before inserting a new primary.
    """

    def __init__(
        self,
        group_id: ActivityGroupId,
        supervisors: Iterable[SupervisorAssignment],
    ):
        self.group_id = group_id
        self._supervisors = list(supervisors)
        self._loaded_flags = {s.id: s.is_primary for s in self._supervisors}

    def __len__(self) -> int:
        return len(self._supervisors)

    @property
    def supervisors(self) -> list[SupervisorAssignment]:
        """Current supervisors in iteration order."""
        return list(self._supervisors)

    @property
    def primary(self) -> SupervisorAssignment | None:
        """The primary supervisor, or None for an empty roster."""
        return next((s for s in self._supervisors if s.is_primary), None)

    def is_consistent(self) -> bool:
        """Check the invariant: empty, or exactly one primary."""
        primaries = sum(1 for s in self._supervisors if s.is_primary)
        return primaries == (1 if self._supervisors else 0)

    def get(self, assignment_id: SupervisorAssignmentId) -> SupervisorAssignment:
        """Return the assignment with this id.

        Raises:
            SupervisorNotFoundError: If it is not part of this group
        """
        for supervisor in self._supervisors:
            if supervisor.id == assignment_id:
                return supervisor
        raise SupervisorNotFoundError(assignment_id)

    def find_by_staff(self, staff_id: StaffId) -> SupervisorAssignment | None:
        """Return the assignment of a staff member, if any."""
        return next((s for s in self._supervisors if s.staff_id == staff_id), None)

    def add(self, staff_id: StaffId, is_primary: bool = False) -> SupervisorAssignment:
        """Assign a staff member to the group.

        The first supervisor of a group is always primary. Adding a primary
        demotes every other supervisor.

        Returns:
            The new assignment (not yet persisted)

        Raises:
            DuplicateSupervisorError: If the staff member is already assigned
        """
        if self.find_by_staff(staff_id) is not None:
            raise DuplicateSupervisorError(staff_id)

        if not self._supervisors:
            is_primary = True
        if is_primary:
            self._make_primary(None)

        assignment = SupervisorAssignment.create(
            group_id=self.group_id, staff_id=staff_id, is_primary=is_primary
        )
        self._supervisors.append(assignment)
        return assignment

    def promote(self, assignment_id: SupervisorAssignmentId) -> SupervisorAssignment:
        """Make this supervisor the only primary of the group."""
        target = self.get(assignment_id)
        self._make_primary(target.id)
        return target

    def demote(
        self,
        assignment_id: SupervisorAssignmentId,
        successor_id: SupervisorAssignmentId | None = None,
    ) -> SupervisorAssignment:
        """Clear the primary flag of a supervisor.

        A primary can only be demoted while another supervisor is promoted
        in its place.

        Raises:
            PrimaryRequiredError: If no distinct successor is given
            SupervisorNotFoundError: If the successor is not in this group
        """
        target = self.get(assignment_id)
        if not target.is_primary:
            return target
        if successor_id is None or successor_id == assignment_id:
            raise PrimaryRequiredError()

        successor = self.get(successor_id)
        self._make_primary(successor.id)
        return target

    def change_staff(
        self, assignment_id: SupervisorAssignmentId, staff_id: StaffId
    ) -> SupervisorAssignment:
        """Point an assignment at a different staff member.

        Raises:
            DuplicateSupervisorError: If that staff member is already assigned
        """
        target = self.get(assignment_id)
        existing = self.find_by_staff(staff_id)
        if existing is not None and existing.id != target.id:
            raise DuplicateSupervisorError(staff_id)
        target.staff_id = staff_id
        return target

    def remove(
        self, assignment_id: SupervisorAssignmentId
    ) -> SupervisorAssignment | None:
        """Remove a supervisor, promoting a successor if it was primary.

        The successor is the first remaining supervisor in iteration order.

        Returns:
            The promoted successor, or None if no promotion was needed

        Raises:
            LastSupervisorError: If this is the group's only supervisor
        """
        target = self.get(assignment_id)
        if len(self._supervisors) == 1:
            raise LastSupervisorError()

        self._supervisors = [s for s in self._supervisors if s.id != target.id]

        if target.is_primary:
            successor = self._supervisors[0]
            self._make_primary(successor.id)
            return successor
        return None

    def assign_primary_to(self, staff_id: StaffId) -> SupervisorAssignment:
        """Make the given staff member's assignment the only primary.

        Used after a full-set reconciliation, where the first desired staff
        id becomes primary.

        Raises:
            SupervisorNotFoundError: If the staff member is not assigned
        """
        target = self.find_by_staff(staff_id)
        if target is None:
            raise SupervisorNotFoundError(staff_id)
        self._make_primary(target.id)
        return target

    def changed(self) -> list[SupervisorAssignment]:
        """Loaded assignments whose primary flag changed, demotions first."""
        changed = [
            s
            for s in self._supervisors
            if s.id in self._loaded_flags and s.is_primary != self._loaded_flags[s.id]
        ]
        return sorted(changed, key=lambda s: s.is_primary)

    def _make_primary(self, assignment_id: SupervisorAssignmentId | None) -> None:
        for supervisor in self._supervisors:
            supervisor.is_primary = supervisor.id == assignment_id
