"""
Pytest configuration and fixtures
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from posts_api.app.core.store import PostStore
from posts_api.app.main import create_app


@pytest.fixture
def store():
    """Empty store isolated to one test"""
    return PostStore()


@pytest.fixture
def request_logger():
    """Stand-in logger recording one call per request"""
    return MagicMock()


@pytest.fixture
def app(store, request_logger):
    return create_app(store=store, logger=request_logger)


@pytest.fixture
def client(app):
    """Create a test client"""
    return TestClient(app)
