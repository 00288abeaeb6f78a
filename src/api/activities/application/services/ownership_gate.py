"""Ownership authorization for activity group modifications.

Decides whether a staff member may mutate a group. The decision order is
fixed and the first match wins:

1. elevated permission
2. the caller created the group
3. the caller currently supervises the group
4. otherwise deny

A failure while reading supervisors is logged and treated as "not a
supervisor", so a transient read error denies rather than crashes or allows.
"""

from __future__ import annotations

from activities.application.observability import (
    DefaultOwnershipProbe,
    OwnershipProbe,
)
from activities.domain.value_objects import ActivityGroupId, StaffId
from activities.ports.unit_of_work import ActivityRepositories, IUnitOfWork


class OwnershipGate:
    """Authorization check for group modification.

    Reads bypass this gate; it is consulted by update and delete.
    """

    def __init__(
        self,
        unit_of_work: IUnitOfWork[ActivityRepositories],
        probe: OwnershipProbe | None = None,
    ):
        self._unit_of_work = unit_of_work
        self._probe = probe or DefaultOwnershipProbe()

    def can_modify(
        self,
        group_id: ActivityGroupId,
        staff_id: StaffId | None,
        has_elevated_permission: bool,
    ) -> bool:
        """Check whether a caller may modify a group.

        Args:
            group_id: The group to be modified
            staff_id: The requesting staff member, if known
            has_elevated_permission: Caller holds an admin-level permission

        Returns:
            True if the caller may modify the group. False for a group that
            does not exist.
        """
        staff_value = None if staff_id is None else staff_id.value

        if has_elevated_permission:
            self._probe.modification_allowed(
                group_id.value, staff_value, reason="elevated_permission"
            )
            return True

        with self._unit_of_work.read() as repos:
            group = repos.groups.get_by_id(group_id)
            if group is None or staff_id is None:
                self._probe.modification_denied(group_id.value, staff_value)
                return False

            if group.created_by == staff_id:
                self._probe.modification_allowed(
                    group_id.value, staff_value, reason="creator"
                )
                return True

            try:
                supervisors = repos.supervisors.find_by_group_id(group_id)
            except Exception as e:
                self._probe.supervisor_lookup_failed(group_id.value, staff_value, str(e))
                supervisors = []

        if any(s.staff_id == staff_id for s in supervisors):
            self._probe.modification_allowed(
                group_id.value, staff_value, reason="supervisor"
            )
            return True

        self._probe.modification_denied(group_id.value, staff_value)
        return False
