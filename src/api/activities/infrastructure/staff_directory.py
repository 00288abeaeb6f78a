"""SQLAlchemy implementation of IStaffDirectory."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from activities.domain.value_objects import StaffId
from activities.infrastructure.models import StaffModel
from activities.ports.staff_directory import IStaffDirectory


class SqlStaffDirectory(IStaffDirectory):
    """Staff lookup against the staff table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def exists(self, staff_id: StaffId) -> bool:
        stmt = select(StaffModel.id).where(StaffModel.id == staff_id.value).limit(1)
        return self._session.execute(stmt).scalar_one_or_none() is not None
