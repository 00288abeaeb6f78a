"""Unit-of-work port for the Activities bounded context.

A unit of work hands out repositories bound to one store transaction. The
protocol is generic over the repository bundle it yields, so services
receive already-typed repositories and never cast.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Protocol, TypeVar

from activities.ports.repositories import (
    IActivityGroupRepository,
    ICategoryRepository,
    IEnrollmentRepository,
    IScheduleRepository,
    ISupervisorRepository,
)
from activities.ports.staff_directory import IStaffDirectory

T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class ActivityRepositories:
    """Repositories and directory bound to the same transaction."""

    categories: ICategoryRepository
    groups: IActivityGroupRepository
    schedules: IScheduleRepository
    supervisors: ISupervisorRepository
    enrollments: IEnrollmentRepository
    staff: IStaffDirectory


class IUnitOfWork(Protocol[T_co]):
    """Factory for transaction-bound repository bundles."""

    def begin(self) -> AbstractContextManager[T_co]:
        """Open a write transaction.

        The transaction commits when the block exits normally and rolls
        back when it raises; the exception is re-raised either way.
        """
        ...

    def read(self) -> AbstractContextManager[T_co]:
        """Open a read-only scope.

        Reads are not transactional beyond what the store guarantees for a
        single session; nothing written inside the block is committed.
        """
        ...
