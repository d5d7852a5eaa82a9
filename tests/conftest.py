"""
Employee Service: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_collection: AsyncMock standing in for an AsyncCollection
    ├── employees_collection: in-memory collection (mongomock-motor)
    ├── sample_employee_data: payload used across tests
    └── test_client: HTTPX AsyncClient wired to the app with the
        in-memory collection injected
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings BEFORE any app imports
os.environ["MONGO_URL"] = "mongodb://127.0.0.1:27017/"
os.environ["MONGO_DATABASE"] = "employee_service_test"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_collection():
    """
    Provides a mock async collection.

    Usage:
        async def test_get(mock_collection):
            mock_collection.find_one.return_value = {"_id": oid, ...}
            result = await employee_service.get_employee(mock_collection, str(oid))
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    return collection


@pytest.fixture
def employees_collection():
    """A fresh, empty in-memory `employees` collection for each test."""
    client = AsyncMongoMockClient()
    return client["employee_service_test"]["employees"]


@pytest.fixture
def sample_employee_data():
    return {"name": "Ann", "salary": 1000.0, "age": 30.0}


@pytest_asyncio.fixture
async def test_client(employees_collection):
    """
    Provides an async HTTP test client for endpoint testing.

    The lifespan does not run under ASGITransport, so no real MongoDB is
    contacted; routes receive the in-memory collection through a dependency
    override.
    """
    from employee_service.database import get_employees_collection
    from employee_service.main import app

    app.dependency_overrides[get_employees_collection] = lambda: employees_collection
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
