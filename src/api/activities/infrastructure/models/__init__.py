"""SQLAlchemy ORM models for the Activities bounded context.

These models map to database tables and are used by repository implementations.
"""

from activities.infrastructure.models.category import CategoryModel
from activities.infrastructure.models.enrollment import EnrollmentModel
from activities.infrastructure.models.group import ActivityGroupModel
from activities.infrastructure.models.schedule import ScheduleModel
from activities.infrastructure.models.staff import StaffModel
from activities.infrastructure.models.supervisor import SupervisorModel

__all__ = [
    "ActivityGroupModel",
    "CategoryModel",
    "EnrollmentModel",
    "ScheduleModel",
    "StaffModel",
    "SupervisorModel",
]
