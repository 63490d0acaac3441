"""Pytest configuration and fixtures.

Shared fixtures build the repository and the FastAPI app on top of an
in-memory FakeRecordStore, so no test talks to DynamoDB.
"""

import pytest
from fastapi.testclient import TestClient

from users_api.db.repositories.users import UserRepository
from users_api.main import create_app
from tests.fakes.record_store_fake import FakeRecordStore


@pytest.fixture
def sample_item() -> dict:
    """A stored user record as DynamoDB returns it."""
    return {"email": "a@b.com", "firstName": "A", "lastName": "B"}


@pytest.fixture
def fake_store() -> FakeRecordStore:
    """Provide an empty FakeRecordStore for each test."""
    return FakeRecordStore()


@pytest.fixture
def fake_store_with_user(sample_item) -> FakeRecordStore:
    """Provide a FakeRecordStore that already holds sample_item."""
    return FakeRecordStore(initial_items=[sample_item])


@pytest.fixture
def user_repository(fake_store) -> UserRepository:
    return UserRepository(fake_store)


@pytest.fixture
def user_repository_with_user(fake_store_with_user) -> UserRepository:
    return UserRepository(fake_store_with_user)


@pytest.fixture
def client(user_repository) -> TestClient:
    """HTTP client for an app wired to the in-memory repository."""
    return TestClient(create_app(user_repository))
