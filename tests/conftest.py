"""
Shared test fixtures.
"""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from grpc_scenario_gen.main import app

SAMPLE_DIR = Path(__file__).parent / "fixtures" / "sample_services"


@pytest.fixture
def client():
    """Provide a FastAPI TestClient."""
    return TestClient(app)


@pytest.fixture
def test_service_json():
    """Raw JSON body of the two-method TestService fixture."""
    return json.loads((SAMPLE_DIR / "test_service.json").read_text())
