"""
Test configuration and fixtures for ColorScheme tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app
from colorscheme.utils.metrics import reset_metrics as _reset_metrics


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    _reset_metrics()
