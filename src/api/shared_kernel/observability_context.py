"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped and domain-relevant metadata that should be
    included with all instrumentation events. This enables correlation
    of events across callers acting on the same activity group.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        staff_id: Staff member performing the operation (if applicable).
        group_id: Activity group being operated on (if applicable).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123", staff_id="staff-7")
        probe = DefaultActivityServiceProbe().with_context(context)
    """

    request_id: str | None = None
    staff_id: str | None = None
    group_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.staff_id is not None:
            result["staff_id"] = self.staff_id
        if self.group_id is not None:
            result["group_id"] = self.group_id
        result.update(self.extra)
        return result

    def with_group(self, group_id: str) -> ObservationContext:
        """Create a new context scoped to an activity group."""
        return ObservationContext(
            request_id=self.request_id,
            staff_id=self.staff_id,
            group_id=group_id,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return ObservationContext(
            request_id=self.request_id,
            staff_id=self.staff_id,
            group_id=self.group_id,
            extra={**self.extra, **kwargs},
        )
