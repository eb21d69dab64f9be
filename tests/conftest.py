"""Shared fixtures for the memo API tests."""

import pytest
from fastapi.testclient import TestClient

from memo_api.app.main import create_app
from memo_api.app.repositories.memo_repository import InMemoryMemoRepository
from memo_api.app.services.memo_service import MemoService


@pytest.fixture
def repository() -> InMemoryMemoRepository:
    """Create an empty in-memory repository."""
    return InMemoryMemoRepository()


@pytest.fixture
def service(repository: InMemoryMemoRepository) -> MemoService:
    """Create a service backed by the repository fixture."""
    return MemoService(repository)


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh application with no memos."""
    with TestClient(create_app()) as test_client:
        yield test_client
