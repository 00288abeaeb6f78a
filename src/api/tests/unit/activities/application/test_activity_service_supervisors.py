"""Unit tests for ActivityService supervisor operations.

Every supervisor write must leave the group with exactly one primary while
it has supervisors.
"""

import pytest

from activities.domain.entities import SupervisorAssignment
from activities.domain.exceptions import (
    DuplicateSupervisorError,
    EmptySupervisorSetError,
    GroupReassignmentError,
    LastSupervisorError,
    PrimaryRequiredError,
    StaffNotFoundError,
)
from activities.domain.value_objects import ActivityGroupId, StaffId


def staff(name: str) -> StaffId:
    return StaffId(value=name)


@pytest.fixture
def roster(stored_group, mock_repositories):
    """Two stored supervisors, the first primary."""
    primary = SupervisorAssignment.create(stored_group.id, staff("s1"), is_primary=True)
    second = SupervisorAssignment.create(stored_group.id, staff("s2"))
    supervisors = [primary, second]
    mock_repositories.supervisors.find_by_group_id.return_value = supervisors
    mock_repositories.supervisors.get_by_id.side_effect = lambda sid: next(
        (s for s in supervisors if s.id == sid), None
    )
    return primary, second


def updated_rows(mock_repositories):
    return [c.args[0] for c in mock_repositories.supervisors.update.call_args_list]


class TestAddSupervisor:
    def test_first_supervisor_is_primary(self, service, stored_group, mock_repositories):
        assignment = service.add_supervisor(stored_group.id, staff("s1"))

        assert assignment.is_primary
        mock_repositories.supervisors.create.assert_called_once_with(assignment)

    def test_adding_primary_demotes_current_before_insert(
        self, service, stored_group, roster, mock_repositories
    ):
        primary, _ = roster
        calls = []
        mock_repositories.supervisors.update.side_effect = lambda s: calls.append(
            ("update", s.staff_id.value, s.is_primary)
        )
        mock_repositories.supervisors.create.side_effect = lambda s: calls.append(
            ("create", s.staff_id.value, s.is_primary)
        )

        service.add_supervisor(stored_group.id, staff("s3"), is_primary=True)

        assert calls == [("update", "s1", False), ("create", "s3", True)]
        assert primary.is_primary is False

    def test_duplicate_staff(self, service, stored_group, roster, mock_repositories):
        with pytest.raises(DuplicateSupervisorError):
            service.add_supervisor(stored_group.id, staff("s2"))

        mock_repositories.supervisors.create.assert_not_called()

    def test_unknown_staff(self, service, stored_group, mock_repositories):
        mock_repositories.staff.exists.return_value = False

        with pytest.raises(StaffNotFoundError) as exc_info:
            service.add_supervisor(stored_group.id, staff("ghost"))

        assert exc_info.value.status_code == 404


class TestUpdateSupervisor:
    def test_promote_demotes_previous_primary(
        self, service, roster, mock_repositories, mock_service_probe
    ):
        primary, second = roster
        change = SupervisorAssignment(
            id=second.id, group_id=second.group_id, staff_id=second.staff_id, is_primary=True
        )

        result = service.update_supervisor(change)

        assert result.is_primary
        assert primary.is_primary is False
        assert [(s.staff_id.value, s.is_primary) for s in updated_rows(mock_repositories)][
            0
        ] == ("s1", False)
        mock_service_probe.supervisor_promoted.assert_called_once()

    def test_demoting_primary_without_successor_is_rejected(
        self, service, roster, mock_repositories
    ):
        primary, _ = roster
        change = SupervisorAssignment(
            id=primary.id, group_id=primary.group_id, staff_id=primary.staff_id
        )

        with pytest.raises(PrimaryRequiredError):
            service.update_supervisor(change)

        mock_repositories.supervisors.update.assert_not_called()

    def test_demoting_primary_with_successor(self, service, roster):
        primary, second = roster
        change = SupervisorAssignment(
            id=primary.id, group_id=primary.group_id, staff_id=primary.staff_id
        )

        service.update_supervisor(change, successor_id=second.id)

        assert second.is_primary
        assert not primary.is_primary

    def test_moving_to_another_group_is_rejected(self, service, roster):
        _, second = roster
        change = SupervisorAssignment(
            id=second.id, group_id=ActivityGroupId.generate(), staff_id=second.staff_id
        )

        with pytest.raises(GroupReassignmentError):
            service.update_supervisor(change)

    def test_changing_staff_to_assigned_member_conflicts(self, service, roster):
        _, second = roster
        change = SupervisorAssignment(
            id=second.id, group_id=second.group_id, staff_id=staff("s1")
        )

        with pytest.raises(DuplicateSupervisorError):
            service.update_supervisor(change)


class TestDeleteSupervisor:
    def test_deleting_primary_promotes_successor(
        self, service, roster, mock_repositories, mock_service_probe
    ):
        primary, second = roster

        service.delete_supervisor(primary.id)

        mock_repositories.supervisors.delete.assert_called_once_with(primary.id)
        assert updated_rows(mock_repositories) == [second]
        assert second.is_primary
        mock_service_probe.supervisor_promoted.assert_called_once_with(
            group_id=second.group_id.value,
            supervisor_id=second.id.value,
            staff_id="s2",
        )

    def test_deleting_non_primary_changes_nothing_else(
        self, service, roster, mock_repositories, mock_service_probe
    ):
        _, second = roster

        service.delete_supervisor(second.id)

        mock_repositories.supervisors.update.assert_not_called()
        mock_service_probe.supervisor_promoted.assert_not_called()

    def test_deleting_only_supervisor_is_rejected(
        self, service, stored_group, mock_repositories
    ):
        only = SupervisorAssignment.create(stored_group.id, staff("s1"), is_primary=True)
        mock_repositories.supervisors.get_by_id.return_value = only
        mock_repositories.supervisors.find_by_group_id.return_value = [only]

        with pytest.raises(LastSupervisorError) as exc_info:
            service.delete_supervisor(only.id)

        assert exc_info.value.op == "delete_supervisor"
        mock_repositories.supervisors.delete.assert_not_called()


class TestUpdateGroupSupervisors:
    def test_first_desired_staff_becomes_primary(
        self, service, stored_group, roster, mock_repositories
    ):
        primary, second = roster

        result = service.update_group_supervisors(
            stored_group.id, [staff("s3"), staff("s2")]
        )

        mock_repositories.supervisors.delete.assert_called_once_with(primary.id)
        created = mock_repositories.supervisors.create.call_args.args[0]
        assert (created.staff_id, created.is_primary) == (staff("s3"), True)
        assert second.is_primary is False
        assert [s.staff_id.value for s in result] == ["s3", "s2"]

    def test_existing_member_promoted_when_listed_first(
        self, service, stored_group, roster, mock_repositories
    ):
        _, second = roster

        result = service.update_group_supervisors(
            stored_group.id, [staff("s2"), staff("s4")]
        )

        assert updated_rows(mock_repositories) == [second]
        assert second.is_primary
        assert result[0] is second
        assert sum(s.is_primary for s in result) == 1

    def test_empty_set_with_supervisors_is_rejected(
        self, service, stored_group, roster, mock_repositories
    ):
        with pytest.raises(EmptySupervisorSetError):
            service.update_group_supervisors(stored_group.id, [])

        mock_repositories.supervisors.delete.assert_not_called()

    def test_empty_set_for_unsupervised_group(self, service, stored_group):
        assert service.update_group_supervisors(stored_group.id, []) == []

    def test_repeated_ids_count_once(
        self, service, stored_group, mock_repositories, mock_service_probe
    ):
        result = service.update_group_supervisors(
            stored_group.id, [staff("s1"), staff("s1")]
        )

        assert len(result) == 1
        assert mock_repositories.supervisors.create.call_count == 1
        mock_service_probe.supervisors_reconciled.assert_called_once_with(
            group_id=stored_group.id.value,
            added=1,
            removed=0,
            primary_staff_id="s1",
        )

    def test_unchanged_set_writes_nothing(
        self, service, stored_group, roster, mock_repositories
    ):
        service.update_group_supervisors(stored_group.id, [staff("s1"), staff("s2")])

        mock_repositories.supervisors.delete.assert_not_called()
        mock_repositories.supervisors.create.assert_not_called()
        mock_repositories.supervisors.update.assert_not_called()


class TestSupervisorReads:
    def test_group_supervisors_primary_first(
        self, service, stored_group, mock_repositories
    ):
        first = SupervisorAssignment.create(stored_group.id, staff("s1"))
        primary = SupervisorAssignment.create(stored_group.id, staff("s2"), is_primary=True)
        mock_repositories.supervisors.find_by_group_id.return_value = [first, primary]

        assert service.get_group_supervisors(stored_group.id) == [primary, first]

    def test_supervisors_for_groups_contains_every_requested_group(
        self, service, stored_group, mock_repositories
    ):
        other = ActivityGroupId.generate()
        assignment = SupervisorAssignment.create(stored_group.id, staff("s1"), True)
        mock_repositories.supervisors.find_by_group_ids.return_value = [assignment]

        result = service.get_supervisors_for_groups([stored_group.id, other])

        assert result == {stored_group.id: [assignment], other: []}
        mock_repositories.supervisors.find_by_group_ids.assert_called_once()

    def test_supervisors_for_no_groups_skips_the_store(
        self, service, mock_unit_of_work
    ):
        assert service.get_supervisors_for_groups([]) == {}
        mock_unit_of_work.read.assert_not_called()
