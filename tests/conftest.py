# tests/conftest.py
"""
Pytest configuration and fixtures.
Each test gets its own registry and an API client bound to it.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app.backend.main import create_app
from shipport.core.registry import VesselRegistry
from shipport.core.resolver import NearestPortResolver
from shipport.models.vessel import Vessel


@pytest.fixture
def registry():
    return VesselRegistry(id_policy="count")


@pytest.fixture
def resolver(registry):
    return NearestPortResolver(registry)


@pytest.fixture
def client(registry):
    app = create_app(registry=registry, seed_vessels=0)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_vessel():
    def _make(**overrides):
        fields = {"id": 1, "name": "Alpha", "velocity": 10.0, "latitude": 10.0, "longitude": 10.0}
        fields.update(overrides)
        return Vessel(**fields)
    return _make
