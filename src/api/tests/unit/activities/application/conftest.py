"""Fixtures for activity application service tests."""

from unittest.mock import create_autospec

import pytest

from activities.application.observability import ActivityServiceProbe
from activities.application.services import ActivityService, OwnershipGate
from activities.domain.entities import ActivityGroup, Category
from activities.domain.value_objects import StaffId


@pytest.fixture
def mock_service_probe():
    """Create mock activity service probe."""
    return create_autospec(ActivityServiceProbe, instance=True)


@pytest.fixture
def mock_gate():
    """Create mock ownership gate that allows by default."""
    gate = create_autospec(OwnershipGate, instance=True)
    gate.can_modify.return_value = True
    return gate


@pytest.fixture
def service(mock_unit_of_work, mock_gate, mock_service_probe) -> ActivityService:
    return ActivityService(
        unit_of_work=mock_unit_of_work,
        ownership_gate=mock_gate,
        probe=mock_service_probe,
    )


@pytest.fixture
def creator() -> StaffId:
    return StaffId(value="staff-creator")


@pytest.fixture
def category() -> Category:
    return Category.create(name="Sports")


@pytest.fixture
def group(category, creator) -> ActivityGroup:
    return ActivityGroup.create(
        name="Football",
        category_id=category.id,
        max_participants=20,
        created_by=creator,
    )


@pytest.fixture
def stored_group(mock_repositories, group, category) -> ActivityGroup:
    """Make the group and its category visible to the mocked store."""
    mock_repositories.groups.get_by_id.return_value = group
    mock_repositories.categories.get_by_id.return_value = category
    mock_repositories.supervisors.find_by_group_id.return_value = []
    mock_repositories.schedules.find_by_group_id.return_value = []
    mock_repositories.enrollments.find_by_group_id.return_value = []
    mock_repositories.staff.exists.return_value = True
    return group
