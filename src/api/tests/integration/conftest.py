"""Integration test fixtures.

Integration tests run the real SQLAlchemy adapters against a database. By
default an in-memory SQLite database is used; set ``ACTIVITIES_DB_URL`` to
run them against another database.
"""

import os

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_url() -> str:
    return os.getenv("ACTIVITIES_DB_URL", "sqlite://")
