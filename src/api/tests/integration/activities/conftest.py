"""Fixtures wiring the activity service to a real database."""

from collections.abc import Generator
from dataclasses import replace

import pytest
from sqlalchemy import Engine, delete, func, select
from sqlalchemy.orm import Session, sessionmaker

from activities.application.services import ActivityService
from activities.dependencies import create_schema, get_activity_service
from activities.domain.entities import ActivityGroup, Category
from activities.domain.value_objects import StaffId
from activities.infrastructure import ScheduleRepository, SqlAlchemyUnitOfWork
from activities.infrastructure.models import StaffModel
from activities.ports.unit_of_work import ActivityRepositories
from infrastructure.database import Base
from infrastructure.database.engines import create_write_engine
from infrastructure.settings import DatabaseSettings

STAFF = ("creator", "s1", "s2", "s3", "s4")


@pytest.fixture
def engine(integration_db_url) -> Generator[Engine, None, None]:
    """Provide an engine with a fresh schema and seeded staff members."""
    engine = create_write_engine(DatabaseSettings(url=integration_db_url))
    Base.metadata.drop_all(engine)
    create_schema(engine)
    with Session(engine) as session, session.begin():
        session.add_all(StaffModel(id=s, display_name=s.upper()) for s in STAFF)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False, class_=Session)


@pytest.fixture
def unit_of_work(session_factory) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory)


@pytest.fixture
def service(unit_of_work) -> ActivityService:
    return get_activity_service(unit_of_work)


@pytest.fixture
def category(service) -> Category:
    return service.create_category(Category.create(name="Sports"))


@pytest.fixture
def new_group(category):
    """Build unsaved groups created by the ``creator`` staff member."""

    def build(name: str = "Football", **overrides) -> ActivityGroup:
        fields = {
            "name": name,
            "category_id": category.id,
            "max_participants": 20,
            "created_by": StaffId(value="creator"),
        }
        fields.update(overrides)
        return ActivityGroup.create(**fields)

    return build


@pytest.fixture
def count_rows(session_factory):
    """Count rows of a model matching a column value."""

    def count(model, **criteria) -> int:
        with session_factory() as session:
            stmt = select(func.count()).select_from(model)
            for column, value in criteria.items():
                stmt = stmt.where(getattr(model, column) == value)
            return session.scalar(stmt)

    return count


class FailingScheduleRepository(ScheduleRepository):
    """Schedule repository whose writes fail like a lost connection."""

    def create(self, schedule):
        raise RuntimeError("injected schedule failure")

    def delete_by_group_id(self, group_id):
        raise RuntimeError("injected schedule failure")


class FailingScheduleUnitOfWork(SqlAlchemyUnitOfWork):
    """Unit of work whose write transactions fail on schedule writes."""

    def _bind(self, session: Session) -> ActivityRepositories:
        repos = super()._bind(session)
        return replace(repos, schedules=FailingScheduleRepository(session))


@pytest.fixture
def failing_service(session_factory) -> ActivityService:
    return get_activity_service(FailingScheduleUnitOfWork(session_factory))


@pytest.fixture
def remove_staff(session_factory):
    def remove(staff_id: str) -> None:
        with session_factory() as session, session.begin():
            session.execute(delete(StaffModel).where(StaffModel.id == staff_id))

    return remove
