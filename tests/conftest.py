"""Shared pytest fixtures for stdshims tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from stdshims.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate every test from cached settings and ambient STDSHIMS_* env vars."""
    monkeypatch.delenv("STDSHIMS_CONFIG", raising=False)
    monkeypatch.delenv("STDSHIMS_PROGRESS__STEP", raising=False)
    monkeypatch.delenv("STDSHIMS_PROGRESS__INTERVAL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def db_engine() -> Generator[Engine]:
    """In-memory SQLite engine with a small ``samples`` table."""
    engine = create_engine("sqlite://", echo=False)
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE samples (id INTEGER PRIMARY KEY, name TEXT, score REAL)"))
        conn.execute(
            text("INSERT INTO samples (id, name, score) VALUES (1, 'alpha', 1.5), (2, NULL, NULL)")
        )
    try:
        yield engine
    finally:
        engine.dispose()
