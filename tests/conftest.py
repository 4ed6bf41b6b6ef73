"""
Customer API Tests - Test Configuration.

Provides pytest fixtures for the store, the service facade and an
authenticated HTTP client bound to a freshly created application.
"""

from typing import List

import pytest
from fastapi.testclient import TestClient

from customer_api.app.core.config import Settings
from customer_api.app.main import create_app
from customer_api.app.models.customer import Customer
from customer_api.app.services.customer_service import CustomerService
from customer_api.app.services.customer_store import CustomerStore

USERNAME = "user1"
PASSWORD = "password1"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with known credentials and the three demo customers."""
    return Settings(api_username=USERNAME, api_password=PASSWORD, seed_customers=True, log_file=None)


@pytest.fixture
def store() -> CustomerStore:
    """A store seeded with Albert, Felix and Wilson."""
    customer_store = CustomerStore()
    customer_store.seed()
    return customer_store


@pytest.fixture
def seeded(store: CustomerStore) -> List[Customer]:
    return store.list()


@pytest.fixture
def service(store: CustomerStore) -> CustomerService:
    return CustomerService(store)


@pytest.fixture
def app(test_settings: Settings):
    return create_app(test_settings)


@pytest.fixture
def anonymous_client(app) -> TestClient:
    """HTTP client without credentials."""
    return TestClient(app)


@pytest.fixture
def client(app) -> TestClient:
    """HTTP client sending valid Basic credentials on every request."""
    test_client = TestClient(app)
    test_client.auth = (USERNAME, PASSWORD)
    return test_client
