"""
Main Application Unit Tests

Tests for application startup and health endpoints with mocked infrastructure.
Runs without Docker - uses mocks for the database connection.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from ainotes.main import app


def test_health_check():
    """
    Verify /health endpoint returns correct response structure.

    TestClient triggers the lifespan handler, so the DB check must be mocked.
    """
    with (
        patch("ainotes.main.wait_for_db", new_callable=AsyncMock) as mock_db,
        patch("ainotes.main.dispose_engine", new_callable=AsyncMock) as mock_dispose,
    ):
        mock_db.return_value = True

        with TestClient(app) as client:
            response = client.get("/health")

            assert response.status_code == 200
            data = response.json()

            assert data["status"] == "ok"
            assert data["service"] == "ainotes"
            assert "environment" in data

    mock_dispose.assert_awaited_once()


def test_startup_fails_without_database():
    with (
        patch("ainotes.main.wait_for_db", new_callable=AsyncMock) as mock_db,
        patch("ainotes.main.dispose_engine", new_callable=AsyncMock),
    ):
        mock_db.return_value = False

        with pytest.raises(RuntimeError, match="Database connection failed"):
            with TestClient(app):
                pass
