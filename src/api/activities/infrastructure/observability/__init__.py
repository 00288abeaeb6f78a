"""Domain-Oriented Observability for Activities infrastructure."""

from activities.infrastructure.observability.repository_probe import (
    ActivityRepositoryProbe,
    DefaultActivityRepositoryProbe,
)

__all__ = [
    "ActivityRepositoryProbe",
    "DefaultActivityRepositoryProbe",
]
