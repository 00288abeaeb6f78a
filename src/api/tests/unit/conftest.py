"""Unit test fixtures with mocked dependencies."""

from contextlib import nullcontext
from unittest.mock import MagicMock, create_autospec

import pytest

from activities.ports.repositories import (
    IActivityGroupRepository,
    ICategoryRepository,
    IEnrollmentRepository,
    IScheduleRepository,
    ISupervisorRepository,
)
from activities.ports.staff_directory import IStaffDirectory
from activities.ports.unit_of_work import ActivityRepositories


@pytest.fixture
def mock_repositories() -> ActivityRepositories:
    """Provide autospecced repositories bundled like a real transaction."""
    return ActivityRepositories(
        categories=create_autospec(ICategoryRepository, instance=True),
        groups=create_autospec(IActivityGroupRepository, instance=True),
        schedules=create_autospec(IScheduleRepository, instance=True),
        supervisors=create_autospec(ISupervisorRepository, instance=True),
        enrollments=create_autospec(IEnrollmentRepository, instance=True),
        staff=create_autospec(IStaffDirectory, instance=True),
    )


@pytest.fixture
def mock_unit_of_work(mock_repositories):
    """Provide a unit of work whose scopes yield the mock repositories.

    ``begin`` and ``read`` stay MagicMocks so tests can assert on the order
    of transaction scopes relative to other calls.
    """
    unit_of_work = MagicMock()
    unit_of_work.begin.side_effect = lambda: nullcontext(mock_repositories)
    unit_of_work.read.side_effect = lambda: nullcontext(mock_repositories)
    return unit_of_work
