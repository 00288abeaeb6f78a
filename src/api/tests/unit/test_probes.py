"""Unit tests for infrastructure domain probes.

Tests that domain probes correctly capture domain events
following the Domain Oriented Observability pattern.
"""

from unittest.mock import MagicMock

import structlog

from infrastructure.observability import ObservationContext
from infrastructure.observability.probes import DefaultConnectionProbe


class TestConnectionProbe:
    """Tests for ConnectionProbe protocol and implementation."""

    def test_default_probe_creates_with_default_logger(self):
        """Default probe should work without explicit logger."""
        probe = DefaultConnectionProbe()
        assert probe._logger is not None

    def test_default_probe_accepts_custom_logger(self):
        """Default probe should accept a custom logger."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultConnectionProbe(logger=mock_logger)
        assert probe._logger is mock_logger

    def test_engine_created_logs_info(self):
        """engine_created should log with role and database."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultConnectionProbe(logger=mock_logger)

        probe.engine_created(role="write", database="localhost:5432/activities")

        mock_logger.info.assert_called_once_with(
            "database_engine_created",
            role="write",
            database="localhost:5432/activities",
        )

    def test_engine_disposed_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultConnectionProbe(logger=mock_logger)

        probe.engine_disposed(role="read")

        mock_logger.info.assert_called_once_with(
            "database_engine_disposed",
            role="read",
        )

    def test_with_context_includes_context_fields(self):
        """Bound context metadata is added to every event."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        context = ObservationContext(request_id="req-1", staff_id="staff-7")
        probe = DefaultConnectionProbe(logger=mock_logger).with_context(context)

        probe.engine_disposed(role="write")

        mock_logger.info.assert_called_once_with(
            "database_engine_disposed",
            role="write",
            request_id="req-1",
            staff_id="staff-7",
        )


class TestObservationContext:
    """Tests for ObservationContext."""

    def test_as_dict_omits_none_values(self):
        context = ObservationContext(request_id="req-1")
        assert context.as_dict() == {"request_id": "req-1"}

    def test_as_dict_includes_extra(self):
        context = ObservationContext(group_id="g-1", extra={"source": "import"})
        assert context.as_dict() == {"group_id": "g-1", "source": "import"}

    def test_with_group_keeps_other_fields(self):
        context = ObservationContext(request_id="req-1", staff_id="staff-7")

        scoped = context.with_group("g-1")

        assert scoped.group_id == "g-1"
        assert scoped.request_id == "req-1"
        assert scoped.staff_id == "staff-7"
        assert context.group_id is None

    def test_with_extra_merges(self):
        context = ObservationContext(extra={"a": 1})

        extended = context.with_extra(b=2)

        assert extended.extra == {"a": 1, "b": 2}
        assert context.extra == {"a": 1}
