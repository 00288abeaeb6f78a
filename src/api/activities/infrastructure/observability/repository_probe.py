"""Domain probe for activities repository and unit-of-work operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the persistence adapters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ActivityRepositoryProbe(Protocol):
    """Domain probe for activities persistence."""

    def entity_not_found(self, entity: str, entity_id: str) -> None:
        """Record that a looked-up row does not exist."""
        ...

    def duplicate_rejected(self, entity: str, key: str) -> None:
        """Record that the store rejected a duplicate row."""
        ...

    def transaction_rolled_back(self, error: str) -> None:
        """Record that a write transaction was rolled back."""
        ...

    def with_context(self, context: ObservationContext) -> ActivityRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultActivityRepositoryProbe:
    """Default implementation of ActivityRepositoryProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultActivityRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultActivityRepositoryProbe(logger=self._logger, context=context)

    def entity_not_found(self, entity: str, entity_id: str) -> None:
        """Record that a looked-up row does not exist."""
        self._logger.debug(
            "activity_entity_not_found",
            **{**self._get_context_kwargs(), "entity": entity, "entity_id": entity_id},
        )

    def duplicate_rejected(self, entity: str, key: str) -> None:
        """Record that the store rejected a duplicate row."""
        self._logger.warning(
            "activity_duplicate_rejected",
            **{**self._get_context_kwargs(), "entity": entity, "key": key},
        )

    def transaction_rolled_back(self, error: str) -> None:
        """Record that a write transaction was rolled back."""
        self._logger.warning(
            "activity_transaction_rolled_back",
            **{**self._get_context_kwargs(), "error": error},
        )
