"""SQLAlchemy implementation of the activities unit of work.

Each scope opens its own session and binds every repository to it, so all
writes of one operation share a single transaction.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session, sessionmaker

from activities.infrastructure.category_repository import CategoryRepository
from activities.infrastructure.enrollment_repository import EnrollmentRepository
from activities.infrastructure.group_repository import ActivityGroupRepository
from activities.infrastructure.observability import (
    ActivityRepositoryProbe,
    DefaultActivityRepositoryProbe,
)
from activities.infrastructure.schedule_repository import ScheduleRepository
from activities.infrastructure.staff_directory import SqlStaffDirectory
from activities.infrastructure.supervisor_repository import SupervisorRepository
from activities.ports.unit_of_work import ActivityRepositories, IUnitOfWork


class SqlAlchemyUnitOfWork(IUnitOfWork[ActivityRepositories]):
    """Unit of work backed by SQLAlchemy sessions.

    Writes go through ``session.begin()``: the block commits on success
    and rolls back when it raises.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        read_session_factory: sessionmaker[Session] | None = None,
        probe: ActivityRepositoryProbe | None = None,
    ) -> None:
        """Initialize the unit of work.

        Args:
            session_factory: Factory for write sessions
            read_session_factory: Factory for read sessions; defaults to
                the write factory
            probe: Optional domain probe shared with the repositories
        """
        self._session_factory = session_factory
        self._read_session_factory = read_session_factory or session_factory
        self._probe = probe or DefaultActivityRepositoryProbe()

    def _bind(self, session: Session) -> ActivityRepositories:
        return ActivityRepositories(
            categories=CategoryRepository(session, probe=self._probe),
            groups=ActivityGroupRepository(session, probe=self._probe),
            schedules=ScheduleRepository(session, probe=self._probe),
            supervisors=SupervisorRepository(session, probe=self._probe),
            enrollments=EnrollmentRepository(session, probe=self._probe),
            staff=SqlStaffDirectory(session),
        )

    @contextmanager
    def begin(self) -> Iterator[ActivityRepositories]:
        with self._session_factory() as session:
            try:
                with session.begin():
                    yield self._bind(session)
            except Exception as e:
                self._probe.transaction_rolled_back(str(e))
                raise

    @contextmanager
    def read(self) -> Iterator[ActivityRepositories]:
        with self._read_session_factory() as session:
            yield self._bind(session)
