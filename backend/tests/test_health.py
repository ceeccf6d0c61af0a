"""Tests for GET /api/health"""
from unittest.mock import patch

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session


def test_health_returns_200(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["success"] is True
    assert data["message"] == "API is healthy"


def test_health_response_shape(client):
    """Has uptime, environment, version, database and memory blocks."""
    data = client.get("/api/health").json()
    assert data["environment"] == "test"
    assert data["version"] == "1.0.0"
    assert data["database"] == {"status": "connected", "dialect": "sqlite"}
    assert data["memory"]["used"].endswith(" MB")
    assert data["memory"]["total"].endswith(" MB")
    assert isinstance(data["uptime"], (int, float))
    assert "timestamp" in data


def test_health_database_down_returns_503(client):
    """Store unreachable: 503 with disconnected database status."""
    error = OperationalError("SELECT 1", {}, Exception("unable to open database file"))
    with patch.object(Session, "execute", side_effect=error):
        r = client.get("/api/health")
    assert r.status_code == 503
    data = r.json()
    assert data["success"] is False
    assert data["message"] == "Service Unavailable"
    assert data["database"]["status"] == "disconnected"
    assert "unable to open database file" in data["error"]


def test_root_endpoint(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["message"] == "Portfolio API"
