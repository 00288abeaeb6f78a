"""Unit tests for the activities error taxonomy."""

import pytest

from activities.domain.exceptions import (
    ActivityError,
    CategoryInUseError,
    ConflictError,
    DuplicateEnrollmentError,
    DuplicateSupervisorError,
    EmptySupervisorSetError,
    GroupNotFoundError,
    GroupReassignmentError,
    InternalError,
    LastSupervisorError,
    NotEnrolledError,
    NotFoundError,
    NotOwnerError,
    PrimaryRequiredError,
    StaffNotFoundError,
    ValidationFailedError,
)


class TestStatusCodes:
    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (GroupNotFoundError("g"), 404),
            (NotEnrolledError("s"), 404),
            (ValidationFailedError("name", "must not be empty"), 400),
            (NotOwnerError("g", "s"), 403),
            (DuplicateSupervisorError("s"), 400),
            (InternalError(RuntimeError("boom")), 500),
        ],
    )
    def test_each_kind_maps_to_its_status(self, error, status_code):
        assert error.status_code == status_code


class TestKinds:
    def test_not_enrolled_is_a_not_found(self):
        assert isinstance(NotEnrolledError("s"), NotFoundError)

    def test_staff_not_found_is_a_not_found(self):
        assert isinstance(StaffNotFoundError("s"), NotFoundError)

    @pytest.mark.parametrize(
        "error",
        [
            DuplicateSupervisorError("s"),
            DuplicateEnrollmentError("s"),
            CategoryInUseError("c"),
            LastSupervisorError(),
            EmptySupervisorSetError(),
            PrimaryRequiredError(),
            GroupReassignmentError("schedule"),
        ],
    )
    def test_conflicts(self, error):
        assert isinstance(error, ConflictError)
        assert isinstance(error, ActivityError)


class TestMessages:
    def test_not_found_names_entity_and_id(self):
        assert str(GroupNotFoundError("01ABC")) == "activity group 01ABC not found"

    def test_not_enrolled_message(self):
        assert str(NotEnrolledError("s-1")) == "student s-1 is not enrolled in this group"

    def test_duplicate_enrollment_message(self):
        assert "already enrolled in this group" in str(DuplicateEnrollmentError("s-1"))

    def test_last_supervisor_message(self):
        assert str(LastSupervisorError()) == (
            "cannot delete the only supervisor for an activity"
        )

    def test_category_in_use_message(self):
        assert str(CategoryInUseError("c")) == (
            "category is in use by one or more activity groups"
        )

    def test_validation_names_field(self):
        error = ValidationFailedError("max_participants", "must be greater than zero")
        assert error.field == "max_participants"
        assert str(error) == "invalid max_participants: must be greater than zero"


class TestOperationName:
    def test_with_op_prefixes_message(self):
        error = GroupNotFoundError("g-1").with_op("delete_group")

        assert error.op == "delete_group"
        assert str(error) == "delete_group: activity group g-1 not found"

    def test_with_op_keeps_innermost_operation(self):
        error = PrimaryRequiredError(op="update_supervisor")

        error.with_op("outer")

        assert error.op == "update_supervisor"

    def test_internal_error_keeps_cause(self):
        cause = RuntimeError("connection reset")

        error = InternalError(cause, op="create_group")

        assert error.cause is cause
        assert str(error) == "create_group: connection reset"

    def test_internal_error_without_message_uses_type_name(self):
        assert InternalError(KeyError()).message == "KeyError"
