"""Composition root for the Activities bounded context.

Wires the activity service to SQLAlchemy sessions, the unit of work and
the default structlog probes.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine

from activities.application.observability import (
    ActivityServiceProbe,
    DefaultActivityServiceProbe,
    DefaultOwnershipProbe,
    OwnershipProbe,
)
from activities.application.services import ActivityService, OwnershipGate
from activities.infrastructure import SqlAlchemyUnitOfWork
from activities.infrastructure.models import (  # noqa: F401 - registers tables
    ActivityGroupModel,
    CategoryModel,
    EnrollmentModel,
    ScheduleModel,
    StaffModel,
    SupervisorModel,
)
from activities.infrastructure.observability import (
    ActivityRepositoryProbe,
    DefaultActivityRepositoryProbe,
)
from infrastructure.database import (
    Base,
    close_database_connections,
    get_read_sessionmaker,
    get_write_sessionmaker,
)
from infrastructure.database.dependencies import get_write_engine
from infrastructure.logging import configure_logging


def get_activity_service_probe() -> ActivityServiceProbe:
    """Get ActivityServiceProbe instance."""
    return DefaultActivityServiceProbe()


def get_ownership_probe() -> OwnershipProbe:
    """Get OwnershipProbe instance."""
    return DefaultOwnershipProbe()


def get_repository_probe() -> ActivityRepositoryProbe:
    """Get ActivityRepositoryProbe instance."""
    return DefaultActivityRepositoryProbe()


def get_unit_of_work() -> SqlAlchemyUnitOfWork:
    """Get a unit of work on the shared write and read session factories."""
    return SqlAlchemyUnitOfWork(
        session_factory=get_write_sessionmaker(),
        read_session_factory=get_read_sessionmaker(),
        probe=get_repository_probe(),
    )


def get_activity_service(
    unit_of_work: SqlAlchemyUnitOfWork | None = None,
) -> ActivityService:
    """Get ActivityService instance.

    Args:
        unit_of_work: Unit of work to use; the shared one when omitted

    Returns:
        ActivityService with its ownership gate on the same unit of work
    """
    unit_of_work = unit_of_work or get_unit_of_work()
    return ActivityService(
        unit_of_work=unit_of_work,
        ownership_gate=OwnershipGate(unit_of_work, probe=get_ownership_probe()),
        probe=get_activity_service_probe(),
    )


def create_schema(engine: Engine | None = None) -> None:
    """Create the activities tables if they do not exist.

    Args:
        engine: Target engine; the shared write engine when omitted
    """
    Base.metadata.create_all(engine or get_write_engine())


@contextmanager
def activity_engine_lifespan() -> Iterator[ActivityService]:
    """Run the activity engine for the lifetime of a host process.

    Manages:
    - structlog configuration
    - creation of missing tables
    - engine disposal on shutdown (engines are created lazily)
    """
    configure_logging()
    create_schema()
    try:
        yield get_activity_service()
    finally:
        close_database_connections()
