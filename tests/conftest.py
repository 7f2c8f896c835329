"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An isolated application built through the factory
- Test client setup
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.config.settings import Settings


@pytest.fixture
def app() -> FastAPI:
    """Create a fresh application with default settings."""
    return create_app(Settings(log_level="info"))


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)
