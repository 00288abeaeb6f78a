"""Application services for the Activities bounded context.

Application services orchestrate domain entities, repositories and the
unit of work to fulfill use cases. They are the "front door" to the
Activities context.
"""

from activities.application.services.activity_service import ActivityService
from activities.application.services.ownership_gate import OwnershipGate

__all__ = [
    "ActivityService",
    "OwnershipGate",
]
