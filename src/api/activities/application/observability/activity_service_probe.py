"""Protocol for activity application service observability.

Defines the interface for domain probes that capture application-level
domain events for activity group operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ActivityServiceProbe(Protocol):
    """Domain probe for activity service operations."""

    def group_created(
        self,
        group_id: str,
        name: str,
        supervisor_count: int,
        schedule_count: int,
    ) -> None:
        """Record that a group was created with its supervisors and schedules."""
        ...

    def group_creation_failed(self, name: str, error: str) -> None:
        """Record that group creation failed and was rolled back."""
        ...

    def group_updated(self, group_id: str, staff_id: str | None) -> None:
        """Record that a group was updated."""
        ...

    def group_deleted(
        self,
        group_id: str,
        enrollments_removed: int,
        supervisors_removed: int,
        schedules_removed: int,
    ) -> None:
        """Record that a group and everything it owns was deleted."""
        ...

    def supervisors_reconciled(
        self,
        group_id: str,
        added: int,
        removed: int,
        primary_staff_id: str | None,
    ) -> None:
        """Record that a group's supervisor set was replaced."""
        ...

    def enrollments_reconciled(self, group_id: str, added: int, removed: int) -> None:
        """Record that a group's enrollment set was replaced."""
        ...

    def supervisor_promoted(
        self, group_id: str, supervisor_id: str, staff_id: str
    ) -> None:
        """Record that a supervisor became the group's primary."""
        ...

    def operation_failed(self, operation: str, error_kind: str, error: str) -> None:
        """Record that a public operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> ActivityServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultActivityServiceProbe:
    """Default implementation of ActivityServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def _fields(self, **fields: Any) -> dict[str, Any]:
        # Event fields win over context fields of the same name.
        return {**self._get_context_kwargs(), **fields}

    def with_context(
        self, context: ObservationContext
    ) -> DefaultActivityServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultActivityServiceProbe(logger=self._logger, context=context)

    def group_created(
        self,
        group_id: str,
        name: str,
        supervisor_count: int,
        schedule_count: int,
    ) -> None:
        """Record that a group was created with its supervisors and schedules."""
        self._logger.info(
            "activity_group_created",
            **self._fields(
                group_id=group_id,
                name=name,
                supervisor_count=supervisor_count,
                schedule_count=schedule_count,
            ),
        )

    def group_creation_failed(self, name: str, error: str) -> None:
        """Record that group creation failed and was rolled back."""
        self._logger.error(
            "activity_group_creation_failed",
            **self._fields(name=name, error=error),
        )

    def group_updated(self, group_id: str, staff_id: str | None) -> None:
        """Record that a group was updated."""
        self._logger.info(
            "activity_group_updated",
            **self._fields(group_id=group_id, staff_id=staff_id),
        )

    def group_deleted(
        self,
        group_id: str,
        enrollments_removed: int,
        supervisors_removed: int,
        schedules_removed: int,
    ) -> None:
        """Record that a group and everything it owns was deleted."""
        self._logger.info(
            "activity_group_deleted",
            **self._fields(
                group_id=group_id,
                enrollments_removed=enrollments_removed,
                supervisors_removed=supervisors_removed,
                schedules_removed=schedules_removed,
            ),
        )

    def supervisors_reconciled(
        self,
        group_id: str,
        added: int,
        removed: int,
        primary_staff_id: str | None,
    ) -> None:
        """Record that a group's supervisor set was replaced."""
        self._logger.info(
            "activity_supervisors_reconciled",
            **self._fields(
                group_id=group_id,
                added=added,
                removed=removed,
                primary_staff_id=primary_staff_id,
            ),
        )

    def enrollments_reconciled(self, group_id: str, added: int, removed: int) -> None:
        """Record that a group's enrollment set was replaced."""
        self._logger.info(
            "activity_enrollments_reconciled",
            **self._fields(group_id=group_id, added=added, removed=removed),
        )

    def supervisor_promoted(
        self, group_id: str, supervisor_id: str, staff_id: str
    ) -> None:
        """Record that a supervisor became the group's primary."""
        self._logger.info(
            "activity_supervisor_promoted",
            **self._fields(
                group_id=group_id, supervisor_id=supervisor_id, staff_id=staff_id
            ),
        )

    def operation_failed(self, operation: str, error_kind: str, error: str) -> None:
        """Record that a public operation failed."""
        self._logger.warning(
            "activity_operation_failed",
            **self._fields(operation=operation, error_kind=error_kind, error=error),
        )
