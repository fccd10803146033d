# This project was developed with assistance from AI tools.
"""Shared fixtures for API unit tests.

``TestClient`` is used without a ``with`` block so the app lifespan (which
would connect to PostgreSQL) never runs. Routes that need the database get
mocks through ``app.dependency_overrides``.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.main import app as real_app


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    return real_app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def valid_payload() -> dict:
    """Affordable scenario used throughout the calculator tests."""
    return {
        "movingAndSetupCost": 1000,
        "monthlyLivingCost": 200,
        "rent": 1500,
        "securityDeposit": 1500,
        "totalMonthlyIncome": 4000,
        "totalSavings": 5000,
        "monthsToEvaluate": 6,
    }


@pytest.fixture
def make_session_factory():
    """Factory fixture: mock ``async_sessionmaker`` for the feedback insert.

    Returns (factory, session). ``session.execute`` returns a result whose
    ``.one()`` is ``row``, or raises ``execute_error`` when given.
    """

    def _make(row=None, execute_error: Exception | None = None):
        if row is None:
            row = SimpleNamespace(id=1, content="Great app!", created_at="2026-10-19T12:00:00+00:00")

        session = AsyncMock()
        if execute_error is not None:
            session.execute = AsyncMock(side_effect=execute_error)
        else:
            mock_result = MagicMock()
            mock_result.one.return_value = row
            session.execute = AsyncMock(return_value=mock_result)

        session_cm = MagicMock()
        session_cm.__aenter__ = AsyncMock(return_value=session)
        session_cm.__aexit__ = AsyncMock(return_value=False)

        factory = MagicMock(return_value=session_cm)
        return factory, session

    return _make
