"""Infrastructure adapters for the Activities bounded context.

SQLAlchemy repositories, the staff directory lookup and the unit of work
that binds them to one transaction.
"""

from activities.infrastructure.category_repository import CategoryRepository
from activities.infrastructure.enrollment_repository import EnrollmentRepository
from activities.infrastructure.group_repository import ActivityGroupRepository
from activities.infrastructure.schedule_repository import ScheduleRepository
from activities.infrastructure.staff_directory import SqlStaffDirectory
from activities.infrastructure.supervisor_repository import SupervisorRepository
from activities.infrastructure.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "ActivityGroupRepository",
    "CategoryRepository",
    "EnrollmentRepository",
    "ScheduleRepository",
    "SqlAlchemyUnitOfWork",
    "SqlStaffDirectory",
    "SupervisorRepository",
]
