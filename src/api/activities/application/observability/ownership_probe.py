"""Protocol for ownership authorization observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class OwnershipProbe(Protocol):
    """Domain probe for group modification decisions."""

    def modification_allowed(
        self, group_id: str, staff_id: str | None, reason: str
    ) -> None:
        """Record that a caller may modify a group, and on which ground."""
        ...

    def modification_denied(self, group_id: str, staff_id: str | None) -> None:
        """Record that a caller may not modify a group."""
        ...

    def supervisor_lookup_failed(
        self, group_id: str, staff_id: str | None, error: str
    ) -> None:
        """Record that supervisors could not be read; the caller is denied."""
        ...

    def with_context(self, context: ObservationContext) -> OwnershipProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultOwnershipProbe:
    """Default implementation of OwnershipProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultOwnershipProbe:
        """Create a new probe with observation context bound."""
        return DefaultOwnershipProbe(logger=self._logger, context=context)

    def modification_allowed(
        self, group_id: str, staff_id: str | None, reason: str
    ) -> None:
        """Record that a caller may modify a group, and on which ground."""
        self._logger.debug(
            "group_modification_allowed",
            **{
                **self._get_context_kwargs(),
                "group_id": group_id,
                "staff_id": staff_id,
                "reason": reason,
            },
        )

    def modification_denied(self, group_id: str, staff_id: str | None) -> None:
        """Record that a caller may not modify a group."""
        self._logger.info(
            "group_modification_denied",
            **{
                **self._get_context_kwargs(),
                "group_id": group_id,
                "staff_id": staff_id,
            },
        )

    def supervisor_lookup_failed(
        self, group_id: str, staff_id: str | None, error: str
    ) -> None:
        """Record that supervisors could not be read; the caller is denied."""
        self._logger.warning(
            "group_supervisor_lookup_failed",
            **{
                **self._get_context_kwargs(),
                "group_id": group_id,
                "staff_id": staff_id,
                "error": error,
            },
        )
