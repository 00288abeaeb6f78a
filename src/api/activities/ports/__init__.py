"""Ports (interfaces) for the Activities bounded context.

Ports define the contracts for repositories, the staff directory and the
unit of work without specifying implementation details.
"""

from activities.ports.repositories import (
    GroupFilter,
    IActivityGroupRepository,
    ICategoryRepository,
    IEnrollmentRepository,
    IScheduleRepository,
    ISupervisorRepository,
)
from activities.ports.staff_directory import IStaffDirectory
from activities.ports.unit_of_work import ActivityRepositories, IUnitOfWork

__all__ = [
    "ActivityRepositories",
    "GroupFilter",
    "IActivityGroupRepository",
    "ICategoryRepository",
    "IEnrollmentRepository",
    "IScheduleRepository",
    "IStaffDirectory",
    "ISupervisorRepository",
    "IUnitOfWork",
]
