"""Set reconciliation for group memberships.

Supervisor and enrollment updates accept the complete desired set of related
ids rather than incremental add/remove lists. ``reconcile`` turns the current
membership and the desired set into the rows to delete and the ids to insert;
both call sites share this one implementation.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
A = TypeVar("A")


@dataclass(frozen=True)
class MembershipDelta(Generic[K, A]):
    """Changes needed to turn a current membership into the desired one.

    Attributes:
        to_remove: Assignment ids whose related id is not desired
        to_add: Desired related ids with no current assignment, in the
            order the caller supplied them
    """

    to_remove: tuple[A, ...]
    to_add: tuple[K, ...]

    @property
    def is_empty(self) -> bool:
        """True when current and desired memberships already match."""
        return not self.to_remove and not self.to_add


def unique_in_order(ids: Iterable[K]) -> list[K]:
    """Drop repeated ids, keeping the first occurrence of each."""
    seen: set[K] = set()
    result: list[K] = []
    for related_id in ids:
        if related_id not in seen:
            seen.add(related_id)
            result.append(related_id)
    return result


def reconcile(current: Mapping[K, A], desired: Iterable[K]) -> MembershipDelta[K, A]:
    """Compute the membership delta.

    Args:
        current: Related id (staff or student) -> assignment id
        desired: Related ids the membership should consist of

    Returns:
        Removals are the current keys not in desired; additions are the
        desired ids not among the current keys.
    """
    wanted = unique_in_order(desired)
    wanted_set = set(wanted)

    to_remove = tuple(
        assignment_id
        for related_id, assignment_id in current.items()
        if related_id not in wanted_set
    )
    to_add = tuple(related_id for related_id in wanted if related_id not in current)

    return MembershipDelta(to_remove=to_remove, to_add=to_add)
