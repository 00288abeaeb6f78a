"""Activity application service for the Activities bounded context.

Orchestrates categories, activity groups, schedules, supervisors and
enrollments. Every multi-row write runs inside one unit-of-work transaction,
so an operation is either applied completely or not at all.

Every public method runs inside an operation scope: engine errors are
stamped with the operation name, and any other exception is surfaced as an
InternalError wrapping it. Nothing is retried.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from activities.application.observability import (
    ActivityServiceProbe,
    DefaultActivityServiceProbe,
)
from activities.application.services.ownership_gate import OwnershipGate
from activities.application.value_objects import (
    ActivityGroupDetails,
    GroupWithEnrollmentCount,
)
from activities.domain.entities import (
    ActivityGroup,
    Category,
    Enrollment,
    Schedule,
    SupervisorAssignment,
)
from activities.domain.exceptions import (
    ActivityError,
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateEnrollmentError,
    EmptySupervisorSetError,
    EnrollmentNotFoundError,
    GroupNotFoundError,
    GroupReassignmentError,
    InternalError,
    NotEnrolledError,
    NotOwnerError,
    ScheduleNotFoundError,
    StaffNotFoundError,
    SupervisorNotFoundError,
)
from activities.domain.primary_supervisor import SupervisorRoster
from activities.domain.reconciliation import reconcile, unique_in_order
from activities.domain.validation import (
    validate_attendance_status,
    validate_category,
    validate_enrollment,
    validate_group,
    validate_member_ids,
    validate_schedule,
    validate_supervisor,
)
from activities.domain.value_objects import (
    ActivityGroupId,
    AttendanceStatus,
    CategoryId,
    EnrollmentId,
    ScheduleId,
    StaffId,
    StudentId,
    SupervisorAssignmentId,
)
from activities.ports.repositories import GroupFilter
from activities.ports.unit_of_work import ActivityRepositories, IUnitOfWork


def _primary_first(
    supervisors: Sequence[SupervisorAssignment],
) -> list[SupervisorAssignment]:
    return sorted(supervisors, key=lambda s: not s.is_primary)


class ActivityService:
    """Application service for activity groups and their memberships.

    The service keeps a group's supervisors, schedules and enrollments
    consistent: exactly one primary supervisor whenever supervisors exist,
    no rows left behind when a group is deleted, and full-set replacement
    of supervisors and enrollments.
    """

    def __init__(
        self,
        unit_of_work: IUnitOfWork[ActivityRepositories],
        ownership_gate: OwnershipGate | None = None,
        probe: ActivityServiceProbe | None = None,
    ):
        """Initialize ActivityService with dependencies.

        Args:
            unit_of_work: Factory for transaction-bound repositories
            ownership_gate: Authorization check for update and delete;
                built on the same unit of work when not provided
            probe: Optional domain probe for observability
        """
        self._unit_of_work = unit_of_work
        self._ownership_gate = ownership_gate or OwnershipGate(unit_of_work)
        self._probe = probe or DefaultActivityServiceProbe()

    @contextmanager
    def _operation(self, op: str) -> Iterator[None]:
        try:
            yield
        except ActivityError as e:
            e.with_op(op)
            self._probe.operation_failed(
                operation=op, error_kind=type(e).__name__, error=str(e)
            )
            raise
        except Exception as e:
            self._probe.operation_failed(
                operation=op, error_kind=InternalError.__name__, error=str(e)
            )
            raise InternalError(e, op=op) from e

    # === Lookups shared by operations ===

    @staticmethod
    def _require_group(
        repos: ActivityRepositories, group_id: ActivityGroupId
    ) -> ActivityGroup:
        group = repos.groups.get_by_id(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)
        return group

    @staticmethod
    def _require_category(
        repos: ActivityRepositories, category_id: CategoryId | None
    ) -> Category:
        category = None if category_id is None else repos.categories.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    @staticmethod
    def _require_staff(repos: ActivityRepositories, staff_id: StaffId) -> None:
        if not repos.staff.exists(staff_id):
            raise StaffNotFoundError(staff_id)

    @staticmethod
    def _require_supervisor(
        repos: ActivityRepositories, supervisor_id: SupervisorAssignmentId
    ) -> SupervisorAssignment:
        supervisor = repos.supervisors.get_by_id(supervisor_id)
        if supervisor is None:
            raise SupervisorNotFoundError(supervisor_id)
        return supervisor

    @staticmethod
    def _persist_primary_changes(
        repos: ActivityRepositories, roster: SupervisorRoster
    ) -> None:
        # Demotions are written before promotions.
        for supervisor in roster.changed():
            repos.supervisors.update(supervisor)

    def _attach_schedules(
        self, group_id: ActivityGroupId, schedules: Sequence[Schedule]
    ) -> None:
        for schedule in schedules:
            if schedule.activity_group_id is None:
                schedule.activity_group_id = group_id
            elif schedule.activity_group_id != group_id:
                raise GroupReassignmentError("schedule")
            validate_schedule(schedule)

    def _read_details(
        self, repos: ActivityRepositories, group_id: ActivityGroupId
    ) -> ActivityGroupDetails:
        group = self._require_group(repos, group_id)
        category = (
            None
            if group.category_id is None
            else repos.categories.get_by_id(group.category_id)
        )
        return ActivityGroupDetails(
            group=group,
            category=category,
            supervisors=tuple(
                _primary_first(repos.supervisors.find_by_group_id(group_id))
            ),
            schedules=tuple(repos.schedules.find_by_group_id(group_id)),
        )

    def _with_counts(
        self, repos: ActivityRepositories, groups: Sequence[ActivityGroup]
    ) -> list[GroupWithEnrollmentCount]:
        counts = repos.enrollments.count_by_group_ids([g.id for g in groups])
        return [
            GroupWithEnrollmentCount(group=g, enrollment_count=counts.get(g.id, 0))
            for g in groups
        ]

    # === Categories ===

    def create_category(self, category: Category) -> Category:
        """Validate and persist a new category."""
        with self._operation("create_category"):
            validate_category(category)
            with self._unit_of_work.begin() as repos:
                repos.categories.create(category)
            return category

    def get_category(self, category_id: CategoryId) -> Category:
        with self._operation("get_category"):
            with self._unit_of_work.read() as repos:
                return self._require_category(repos, category_id)

    def update_category(self, category: Category) -> Category:
        """Validate and persist changes to an existing category."""
        with self._operation("update_category"):
            validate_category(category)
            with self._unit_of_work.begin() as repos:
                if not repos.categories.update(category):
                    raise CategoryNotFoundError(category.id)
            return category

    def delete_category(self, category_id: CategoryId) -> None:
        """Delete a category that no group references.

        Raises:
            CategoryNotFoundError: If the category does not exist
            CategoryInUseError: If any activity group belongs to it
        """
        with self._operation("delete_category"):
            with self._unit_of_work.begin() as repos:
                self._require_category(repos, category_id)
                if repos.groups.find_by_category(category_id):
                    raise CategoryInUseError(category_id)
                repos.categories.delete(category_id)

    def list_categories(self) -> list[Category]:
        with self._operation("list_categories"):
            with self._unit_of_work.read() as repos:
                return repos.categories.list_all()

    # === Groups ===

    def create_group(
        self,
        group: ActivityGroup,
        supervisor_ids: Sequence[StaffId] = (),
        schedules: Sequence[Schedule] = (),
    ) -> ActivityGroupDetails:
        """Create a group with its supervisors and schedules in one transaction.

        The first supervisor id becomes the primary supervisor. Any failure
        rolls back the whole operation; no half-built group is left behind.

        Args:
            group: The group to create (not yet persisted)
            supervisor_ids: Staff members supervising the group, primary first
            schedules: Weekly time slots of the group

        Returns:
            The group as stored, with category, supervisors and schedules

        Raises:
            ValidationFailedError: If the group or a schedule is invalid
            CategoryNotFoundError: If the category does not exist
            StaffNotFoundError: If a supervisor is unknown to the staff directory
            DuplicateSupervisorError: If a staff id is listed twice
        """
        with self._operation("create_group"):
            validate_group(group)
            validate_member_ids(supervisor_ids, "supervisor_ids")
            self._attach_schedules(group.id, schedules)

            try:
                with self._unit_of_work.begin() as repos:
                    self._require_category(repos, group.category_id)
                    repos.groups.create(group)

                    roster = SupervisorRoster(group.id, [])
                    for staff_id in supervisor_ids:
                        self._require_staff(repos, staff_id)
                        assignment = roster.add(staff_id)
                        validate_supervisor(assignment)
                        repos.supervisors.create(assignment)

                    for schedule in schedules:
                        repos.schedules.create(schedule)
            except Exception as e:
                self._probe.group_creation_failed(name=group.name, error=str(e))
                raise

            self._probe.group_created(
                group_id=group.id.value,
                name=group.name,
                supervisor_count=len(supervisor_ids),
                schedule_count=len(schedules),
            )

            with self._unit_of_work.read() as repos:
                return self._read_details(repos, group.id)

    def get_group(self, group_id: ActivityGroupId) -> ActivityGroup:
        with self._operation("get_group"):
            with self._unit_of_work.read() as repos:
                return self._require_group(repos, group_id)

    def get_group_details(self, group_id: ActivityGroupId) -> ActivityGroupDetails:
        """Get a group with its category, supervisors and schedules."""
        with self._operation("get_group_details"):
            with self._unit_of_work.read() as repos:
                return self._read_details(repos, group_id)

    def list_groups(self, filters: GroupFilter | None = None) -> list[ActivityGroup]:
        """List groups matching all given equality filters."""
        with self._operation("list_groups"):
            with self._unit_of_work.read() as repos:
                return repos.groups.list_groups(filters)

    def get_groups_with_enrollment_counts(self) -> list[GroupWithEnrollmentCount]:
        with self._operation("get_groups_with_enrollment_counts"):
            with self._unit_of_work.read() as repos:
                return self._with_counts(repos, repos.groups.list_groups())

    def get_public_groups(
        self, category_id: CategoryId | None = None
    ) -> list[GroupWithEnrollmentCount]:
        """List open groups, optionally of one category, with enrollment counts."""
        with self._operation("get_public_groups"):
            with self._unit_of_work.read() as repos:
                groups = repos.groups.find_open_groups(category_id)
                return self._with_counts(repos, groups)

    def can_modify_group(
        self,
        group_id: ActivityGroupId,
        staff_id: StaffId | None,
        has_elevated_permission: bool = False,
    ) -> bool:
        """Check whether a caller may modify a group, without modifying it."""
        with self._operation("can_modify_group"):
            return self._ownership_gate.can_modify(
                group_id, staff_id, has_elevated_permission
            )

    def _authorize(
        self,
        group_id: ActivityGroupId,
        staff_id: StaffId | None,
        has_elevated_permission: bool,
    ) -> None:
        with self._unit_of_work.read() as repos:
            self._require_group(repos, group_id)
        if not self._ownership_gate.can_modify(
            group_id, staff_id, has_elevated_permission
        ):
            raise NotOwnerError(group_id, staff_id)

    def update_group(
        self,
        group: ActivityGroup,
        requesting_staff_id: StaffId | None,
        has_elevated_permission: bool = False,
    ) -> ActivityGroup:
        """Update a group's attributes.

        The creator of a group never changes; ``created_by`` on the passed
        group is ignored.

        Raises:
            ValidationFailedError: If the group is invalid
            GroupNotFoundError: If the group does not exist
            NotOwnerError: If the caller may not modify the group
            CategoryNotFoundError: If the new category does not exist
        """
        with self._operation("update_group"):
            validate_group(group)
            self._authorize(group.id, requesting_staff_id, has_elevated_permission)

            with self._unit_of_work.begin() as repos:
                self._require_category(repos, group.category_id)
                if not repos.groups.update(group):
                    raise GroupNotFoundError(group.id)
                updated = self._require_group(repos, group.id)

            self._probe.group_updated(
                group_id=group.id.value,
                staff_id=None if requesting_staff_id is None else requesting_staff_id.value,
            )
            return updated

    def delete_group(
        self,
        group_id: ActivityGroupId,
        requesting_staff_id: StaffId | None,
        has_elevated_permission: bool = False,
    ) -> None:
        """Delete a group together with everything it owns.

        Authorization happens before the transaction is opened. Inside it,
        enrollments, supervisors and schedules are deleted, then the group.

        Raises:
            GroupNotFoundError: If the group does not exist
            NotOwnerError: If the caller may not modify the group
        """
        with self._operation("delete_group"):
            self._authorize(group_id, requesting_staff_id, has_elevated_permission)

            with self._unit_of_work.begin() as repos:
                self._require_group(repos, group_id)
                enrollments_removed = repos.enrollments.delete_by_group_id(group_id)
                supervisors_removed = repos.supervisors.delete_by_group_id(group_id)
                schedules_removed = repos.schedules.delete_by_group_id(group_id)
                if not repos.groups.delete(group_id):
                    raise GroupNotFoundError(group_id)

            self._probe.group_deleted(
                group_id=group_id.value,
                enrollments_removed=enrollments_removed,
                supervisors_removed=supervisors_removed,
                schedules_removed=schedules_removed,
            )

    # === Schedules ===

    def add_schedule(self, group_id: ActivityGroupId, schedule: Schedule) -> Schedule:
        """Attach a new schedule to a group."""
        with self._operation("add_schedule"):
            self._attach_schedules(group_id, [schedule])
            with self._unit_of_work.begin() as repos:
                self._require_group(repos, group_id)
                repos.schedules.create(schedule)
            return schedule

    def get_schedule(self, schedule_id: ScheduleId) -> Schedule:
        with self._operation("get_schedule"):
            with self._unit_of_work.read() as repos:
                schedule = repos.schedules.get_by_id(schedule_id)
                if schedule is None:
                    raise ScheduleNotFoundError(schedule_id)
                return schedule

    def get_group_schedules(self, group_id: ActivityGroupId) -> list[Schedule]:
        with self._operation("get_group_schedules"):
            with self._unit_of_work.read() as repos:
                self._require_group(repos, group_id)
                return repos.schedules.find_by_group_id(group_id)

    def update_schedule(self, schedule: Schedule) -> Schedule:
        """Update day and times of a schedule.

        Raises:
            ValidationFailedError: If the schedule is invalid
            ScheduleNotFoundError: If the schedule does not exist
            GroupReassignmentError: If the schedule would move to another group
        """
        with self._operation("update_schedule"):
            validate_schedule(schedule)
            with self._unit_of_work.begin() as repos:
                stored = repos.schedules.get_by_id(schedule.id)
                if stored is None:
                    raise ScheduleNotFoundError(schedule.id)
                if stored.activity_group_id != schedule.activity_group_id:
                    raise GroupReassignmentError("schedule")
                repos.schedules.update(schedule)
            return schedule

    def delete_schedule(self, schedule_id: ScheduleId) -> None:
        with self._operation("delete_schedule"):
            with self._unit_of_work.begin() as repos:
                if not repos.schedules.delete(schedule_id):
                    raise ScheduleNotFoundError(schedule_id)

    # === Supervisors ===

    def add_supervisor(
        self,
        group_id: ActivityGroupId,
        staff_id: StaffId,
        is_primary: bool = False,
    ) -> SupervisorAssignment:
        """Assign a staff member to a group.

        Adding a primary demotes the current primary in the same
        transaction. The first supervisor of a group is always primary.

        Raises:
            GroupNotFoundError: If the group does not exist
            StaffNotFoundError: If the staff member is unknown
            DuplicateSupervisorError: If the staff member is already assigned
        """
        with self._operation("add_supervisor"):
            validate_member_ids([staff_id], "staff_id")
            with self._unit_of_work.begin() as repos:
                self._require_group(repos, group_id)
                self._require_staff(repos, staff_id)

                roster = SupervisorRoster(
                    group_id, repos.supervisors.find_by_group_id(group_id)
                )
                assignment = roster.add(staff_id, is_primary=is_primary)
                validate_supervisor(assignment)

                self._persist_primary_changes(repos, roster)
                repos.supervisors.create(assignment)
            return assignment

    def get_supervisor(
        self, supervisor_id: SupervisorAssignmentId
    ) -> SupervisorAssignment:
        with self._operation("get_supervisor"):
            with self._unit_of_work.read() as repos:
                return self._require_supervisor(repos, supervisor_id)

    def get_group_supervisors(
        self, group_id: ActivityGroupId
    ) -> list[SupervisorAssignment]:
        """List a group's supervisors, primary first."""
        with self._operation("get_group_supervisors"):
            with self._unit_of_work.read() as repos:
                self._require_group(repos, group_id)
                return _primary_first(repos.supervisors.find_by_group_id(group_id))

    def get_supervisors_for_groups(
        self, group_ids: Sequence[ActivityGroupId]
    ) -> dict[ActivityGroupId, list[SupervisorAssignment]]:
        """Map each requested group to its supervisors, using a single query.

        Every requested group appears in the result, with an empty list when
        it has no supervisors.
        """
        with self._operation("get_supervisors_for_groups"):
            result: dict[ActivityGroupId, list[SupervisorAssignment]] = {
                group_id: [] for group_id in group_ids
            }
            if not result:
                return result
            with self._unit_of_work.read() as repos:
                supervisors = repos.supervisors.find_by_group_ids(list(result))
            for supervisor in _primary_first(supervisors):
                result.setdefault(supervisor.group_id, []).append(supervisor)
            return result

    def get_staff_assignments(self, staff_id: StaffId) -> list[SupervisorAssignment]:
        """List every group assignment of a staff member."""
        with self._operation("get_staff_assignments"):
            with self._unit_of_work.read() as repos:
                return repos.supervisors.find_by_staff_id(staff_id)

    def update_supervisor(
        self,
        supervisor: SupervisorAssignment,
        successor_id: SupervisorAssignmentId | None = None,
    ) -> SupervisorAssignment:
        """Update a supervisor assignment.

        Promoting a supervisor demotes the current primary. Demoting the
        primary requires ``successor_id``, another supervisor of the same
        group who is promoted in the same transaction.

        Args:
            supervisor: The assignment with its new staff id and primary flag
            successor_id: Supervisor to promote when demoting the primary

        Raises:
            SupervisorNotFoundError: If the assignment or successor is unknown
            GroupReassignmentError: If the assignment would move to another group
            PrimaryRequiredError: If the primary is demoted without a successor
            StaffNotFoundError: If a changed staff id is unknown
            DuplicateSupervisorError: If the new staff member is already assigned
        """
        with self._operation("update_supervisor"):
            validate_supervisor(supervisor)
            with self._unit_of_work.begin() as repos:
                stored = self._require_supervisor(repos, supervisor.id)
                if stored.group_id != supervisor.group_id:
                    raise GroupReassignmentError("supervisor")

                roster = SupervisorRoster(
                    stored.group_id, repos.supervisors.find_by_group_id(stored.group_id)
                )
                previous_primary = roster.primary

                if supervisor.staff_id != stored.staff_id:
                    self._require_staff(repos, supervisor.staff_id)
                    roster.change_staff(supervisor.id, supervisor.staff_id)

                if supervisor.is_primary:
                    roster.promote(supervisor.id)
                else:
                    roster.demote(supervisor.id, successor_id)

                self._persist_primary_changes(repos, roster)
                updated = roster.get(supervisor.id)
                repos.supervisors.update(updated)
                primary = roster.primary

            if primary is not None and primary is not previous_primary:
                self._probe.supervisor_promoted(
                    group_id=primary.group_id.value,
                    supervisor_id=primary.id.value,
                    staff_id=primary.staff_id.value,
                )
            return updated

    def delete_supervisor(self, supervisor_id: SupervisorAssignmentId) -> None:
        """Remove a supervisor from its group.

        Deleting the primary promotes the first remaining supervisor in the
        same transaction.

        Raises:
            SupervisorNotFoundError: If the assignment does not exist
            LastSupervisorError: If it is the group's only supervisor
        """
        with self._operation("delete_supervisor"):
            with self._unit_of_work.begin() as repos:
                stored = self._require_supervisor(repos, supervisor_id)
                roster = SupervisorRoster(
                    stored.group_id, repos.supervisors.find_by_group_id(stored.group_id)
                )
                successor = roster.remove(supervisor_id)

                repos.supervisors.delete(supervisor_id)
                self._persist_primary_changes(repos, roster)

            if successor is not None:
                self._probe.supervisor_promoted(
                    group_id=successor.group_id.value,
                    supervisor_id=successor.id.value,
                    staff_id=successor.staff_id.value,
                )

    def set_primary_supervisor(
        self, supervisor_id: SupervisorAssignmentId
    ) -> SupervisorAssignment:
        """Make a supervisor the only primary of its group."""
        with self._operation("set_primary_supervisor"):
            with self._unit_of_work.begin() as repos:
                stored = self._require_supervisor(repos, supervisor_id)
                roster = SupervisorRoster(
                    stored.group_id, repos.supervisors.find_by_group_id(stored.group_id)
                )
                promoted = roster.promote(supervisor_id)
                self._persist_primary_changes(repos, roster)

            self._probe.supervisor_promoted(
                group_id=promoted.group_id.value,
                supervisor_id=promoted.id.value,
                staff_id=promoted.staff_id.value,
            )
            return promoted

    def update_group_supervisors(
        self, group_id: ActivityGroupId, staff_ids: Sequence[StaffId]
    ) -> list[SupervisorAssignment]:
        """Replace a group's supervisors with the given set.

        Supervisors not listed are removed, listed staff without an
        assignment are added, and the first listed staff member becomes the
        only primary. Repeated ids count once.

        Returns:
            The group's supervisors after the change, primary first

        Raises:
            GroupNotFoundError: If the group does not exist
            EmptySupervisorSetError: If the set is empty while the group has
                supervisors
            StaffNotFoundError: If a newly added staff member is unknown
        """
        with self._operation("update_group_supervisors"):
            validate_member_ids(staff_ids, "staff_ids")
            desired = unique_in_order(staff_ids)

            with self._unit_of_work.begin() as repos:
                self._require_group(repos, group_id)
                current = repos.supervisors.find_by_group_id(group_id)
                if not desired:
                    if current:
                        raise EmptySupervisorSetError()
                    return []

                delta = reconcile({s.staff_id: s.id for s in current}, desired)

                for assignment_id in delta.to_remove:
                    repos.supervisors.delete(assignment_id)

                removed = set(delta.to_remove)
                roster = SupervisorRoster(
                    group_id, [s for s in current if s.id not in removed]
                )
                added = []
                for staff_id in delta.to_add:
                    self._require_staff(repos, staff_id)
                    added.append(roster.add(staff_id))

                roster.assign_primary_to(desired[0])

                self._persist_primary_changes(repos, roster)
                for assignment in added:
                    validate_supervisor(assignment)
                    repos.supervisors.create(assignment)

                result = _primary_first(roster.supervisors)

            self._probe.supervisors_reconciled(
                group_id=group_id.value,
                added=len(delta.to_add),
                removed=len(delta.to_remove),
                primary_staff_id=desired[0].value,
            )
            return result

    # === Enrollments ===

    def enroll_student(
        self, group_id: ActivityGroupId, student_id: StudentId
    ) -> Enrollment:
        """Enroll a student in a group.

        Raises:
            GroupNotFoundError: If the group does not exist
            DuplicateEnrollmentError: If the student is already enrolled
        """
        with self._operation("enroll_student"):
            enrollment = Enrollment.create(student_id=student_id, activity_group_id=group_id)
            validate_enrollment(enrollment)
            with self._unit_of_work.begin() as repos:
                self._require_group(repos, group_id)
                if repos.enrollments.find_by_group_and_student(group_id, student_id):
                    raise DuplicateEnrollmentError(student_id)
                repos.enrollments.create(enrollment)
            return enrollment

    def unenroll_student(self, group_id: ActivityGroupId, student_id: StudentId) -> None:
        """Remove a student from a group.

        Raises:
            GroupNotFoundError: If the group does not exist
            NotEnrolledError: If the student is not enrolled in the group
        """
        with self._operation("unenroll_student"):
            with self._unit_of_work.begin() as repos:
                self._require_group(repos, group_id)
                enrollment = repos.enrollments.find_by_group_and_student(
                    group_id, student_id
                )
                if enrollment is None:
                    raise NotEnrolledError(student_id)
                repos.enrollments.delete(enrollment.id)

    def update_group_enrollments(
        self, group_id: ActivityGroupId, student_ids: Sequence[StudentId]
    ) -> list[Enrollment]:
        """Replace a group's enrollments with the given set of students.

        An empty set unenrolls everyone. Repeated ids count once.

        Returns:
            The group's enrollments after the change
        """
        with self._operation("update_group_enrollments"):
            validate_member_ids(student_ids, "student_ids")
            with self._unit_of_work.begin() as repos:
                self._require_group(repos, group_id)
                current = repos.enrollments.find_by_group_id(group_id)
                delta = reconcile({e.student_id: e.id for e in current}, student_ids)

                for enrollment_id in delta.to_remove:
                    repos.enrollments.delete(enrollment_id)

                for student_id in delta.to_add:
                    enrollment = Enrollment.create(
                        student_id=student_id, activity_group_id=group_id
                    )
                    validate_enrollment(enrollment)
                    repos.enrollments.create(enrollment)

                result = repos.enrollments.find_by_group_id(group_id)

            self._probe.enrollments_reconciled(
                group_id=group_id.value,
                added=len(delta.to_add),
                removed=len(delta.to_remove),
            )
            return result

    def get_group_enrollments(self, group_id: ActivityGroupId) -> list[Enrollment]:
        with self._operation("get_group_enrollments"):
            with self._unit_of_work.read() as repos:
                self._require_group(repos, group_id)
                return repos.enrollments.find_by_group_id(group_id)

    def get_student_enrollments(self, student_id: StudentId) -> list[ActivityGroup]:
        """List the groups a student is enrolled in."""
        with self._operation("get_student_enrollments"):
            with self._unit_of_work.read() as repos:
                enrollments = repos.enrollments.find_by_student_id(student_id)
                if not enrollments:
                    return []
                return repos.groups.find_by_ids(
                    [e.activity_group_id for e in enrollments]
                )

    def get_available_groups(self, student_id: StudentId) -> list[ActivityGroup]:
        """List open groups the student is not enrolled in."""
        with self._operation("get_available_groups"):
            with self._unit_of_work.read() as repos:
                enrolled = {
                    e.activity_group_id
                    for e in repos.enrollments.find_by_student_id(student_id)
                }
                return [
                    g for g in repos.groups.find_open_groups() if g.id not in enrolled
                ]

    def update_attendance_status(
        self,
        enrollment_id: EnrollmentId,
        status: AttendanceStatus | str | None,
    ) -> Enrollment:
        """Record attendance on an enrollment; None clears it."""
        with self._operation("update_attendance_status"):
            validate_attendance_status(status)
            with self._unit_of_work.begin() as repos:
                enrollment = repos.enrollments.get_by_id(enrollment_id)
                if enrollment is None:
                    raise EnrollmentNotFoundError(enrollment_id)
                enrollment.attendance_status = (
                    None if status is None else AttendanceStatus(status)
                )
                repos.enrollments.update(enrollment)
            return enrollment
