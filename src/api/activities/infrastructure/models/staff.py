"""SQLAlchemy ORM model for the staff table.

Staff members are provisioned by the staff directory; this context only
reads the table to check that a referenced staff member exists.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class StaffModel(Base, TimestampMixin):
    """ORM model for staff table (lookup only).

    Note: id is VARCHAR(255) to accommodate identifiers issued elsewhere.
    """

    __tablename__ = "staff"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<StaffModel(id={self.id})>"
