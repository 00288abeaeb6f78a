"""Unit tests for the activities repository probe."""

from unittest.mock import MagicMock

import structlog

from activities.infrastructure.observability import DefaultActivityRepositoryProbe
from shared_kernel.observability_context import ObservationContext


class TestDefaultActivityRepositoryProbe:
    def test_entity_not_found_logs_debug(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultActivityRepositoryProbe(logger=mock_logger)

        probe.entity_not_found("activity_group", "01ARZ3NDEKTSV4RRFFQ69G5FAV")

        mock_logger.debug.assert_called_once_with(
            "activity_entity_not_found",
            entity="activity_group",
            entity_id="01ARZ3NDEKTSV4RRFFQ69G5FAV",
        )

    def test_duplicate_rejected_logs_warning(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultActivityRepositoryProbe(logger=mock_logger)

        probe.duplicate_rejected("supervisor", "staff-1")

        mock_logger.warning.assert_called_once_with(
            "activity_duplicate_rejected", entity="supervisor", key="staff-1"
        )

    def test_rollback_includes_context(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        context = ObservationContext(request_id="req-1")
        probe = DefaultActivityRepositoryProbe(logger=mock_logger).with_context(
            context
        )

        probe.transaction_rolled_back("staff member s9 not found")

        mock_logger.warning.assert_called_once_with(
            "activity_transaction_rolled_back",
            request_id="req-1",
            error="staff member s9 not found",
        )
