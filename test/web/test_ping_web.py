#!/usr/bin/env python3
"""Test ping and config endpoints for the web server"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from app import __version__


def test_ping_endpoint_returns_200(client):
    """Test that ping endpoint returns 200 status"""
    response = client.get("/ping")
    assert response.status_code == 200


def test_ping_endpoint_returns_ok_status(client):
    """Test that ping endpoint returns 'ok' status"""
    data = client.get("/ping").json()

    assert "status" in data
    assert data["status"] == "ok"


def test_ping_endpoint_returns_timestamp(client):
    """Test that ping endpoint returns a timestamp"""
    data = client.get("/ping").json()

    assert "timestamp" in data
    assert isinstance(data["timestamp"], str)
    assert len(data["timestamp"]) > 0


def test_ping_endpoint_returns_service_name(client):
    """Test that ping endpoint returns service identifier"""
    data = client.get("/ping").json()

    assert data["service"] == "datagen"
    assert data["version"] == __version__
    assert data["uptime_seconds"] >= 0


def test_config_endpoint_publishes_limits(client):
    response = client.get("/config")
    assert response.status_code == 200
    limits = response.json()["config"]["limits"]

    assert limits["numFields"] == {"min": 1, "max": 300, "default": 5}
    assert limits["recordsPerPage"]["default"] == 100
    assert limits["totalRecords"]["max"] == 1_000_000
    assert limits["uniformFieldLength"] == {"default": False}
