"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Iterator

import pytest

from src.db.memory_repository import InMemoryGameRepository
from src.services.quoridor_service import QuoridorService


@pytest.fixture
def repository() -> Iterator[InMemoryGameRepository]:
    """Fresh in-memory game registry per test."""
    repo = InMemoryGameRepository()
    yield repo


@pytest.fixture
def service(repository: InMemoryGameRepository) -> QuoridorService:
    return QuoridorService(repository)
