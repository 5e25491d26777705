"""Shared fixtures for unit tests."""

from datetime import date
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.account import Account
from domain.entities.profile import Education, Experience, Profile, ProfileFields


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.accounts = AsyncMock()
        self.posts = AsyncMock()
        self.commits = 0
        self.rolled_back = False

    @property
    def committed(self) -> bool:
        return self.commits > 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, exc_type: Any, *args: Any) -> None:
        if exc_type:
            await self.rollback()


def make_experience(title: str = "Engineer") -> Experience:
    """Build an experience record with only the required fields."""
    return Experience(title=title, company="Acme", from_date=date(2020, 1, 1))


def make_education(school: str = "State University") -> Education:
    """Build an education record with only the required fields."""
    return Education(
        school=school,
        degree="BSc",
        field_of_study="Computer Science",
        from_date=date(2015, 9, 1),
    )


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def account(user_id: UUID) -> Account:
    """An existing account for user_id."""
    return Account(id=user_id, email="dev@example.com", name="Dev", avatar_url="https://a.png")


@pytest.fixture
def profile(user_id: UUID) -> Profile:
    """A stored profile for user_id with empty history."""
    return Profile.create(user_id, ProfileFields(status="Developer", skills="python, sql"))
