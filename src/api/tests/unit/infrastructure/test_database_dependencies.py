"""Unit tests for engine and session factory management."""

import pytest
from sqlalchemy import Engine, text
from sqlalchemy.orm import Session

from infrastructure.database.dependencies import (
    close_database_connections,
    get_read_engine,
    get_read_sessionmaker,
    get_write_engine,
    get_write_sessionmaker,
)
from infrastructure.settings import get_database_settings


@pytest.fixture
def in_memory_database(monkeypatch):
    """Point the shared engines at an in-memory SQLite database."""
    monkeypatch.setenv("ACTIVITIES_DB_URL", "sqlite://")
    close_database_connections()
    get_database_settings.cache_clear()
    yield
    close_database_connections()
    get_database_settings.cache_clear()


@pytest.fixture
def file_database(monkeypatch, tmp_path):
    """Point the shared engines at a SQLite file."""
    monkeypatch.setenv("ACTIVITIES_DB_URL", f"sqlite:///{tmp_path / 'activities.db'}")
    close_database_connections()
    get_database_settings.cache_clear()
    yield
    close_database_connections()
    get_database_settings.cache_clear()


def test_engines_are_singletons(file_database):
    """Engines are created once and reused."""
    assert get_write_engine() is get_write_engine()
    assert get_read_engine() is get_read_engine()
    assert isinstance(get_write_engine(), Engine)


def test_read_and_write_engines_differ_for_file_database(file_database):
    assert get_write_engine() is not get_read_engine()


def test_in_memory_database_shares_one_engine(in_memory_database):
    """Reads must see the single in-memory database the writes use."""
    assert get_read_engine() is get_write_engine()


def test_sessionmakers_produce_sessions(in_memory_database):
    with get_write_sessionmaker()() as session:
        assert isinstance(session, Session)
        assert session.execute(text("SELECT 1")).scalar_one() == 1

    with get_read_sessionmaker()() as session:
        assert isinstance(session, Session)


def test_close_allows_reinitialization(file_database):
    """Closing disposes engines so the next call creates new ones."""
    first = get_write_engine()

    close_database_connections()

    assert get_write_engine() is not first
