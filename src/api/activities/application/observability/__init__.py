"""Domain-Oriented Observability for the Activities application layer."""

from activities.application.observability.activity_service_probe import (
    ActivityServiceProbe,
    DefaultActivityServiceProbe,
)
from activities.application.observability.ownership_probe import (
    DefaultOwnershipProbe,
    OwnershipProbe,
)

__all__ = [
    "ActivityServiceProbe",
    "DefaultActivityServiceProbe",
    "OwnershipProbe",
    "DefaultOwnershipProbe",
]
