"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.account_deletion_service import AccountDeletionService
from domain.services.github_service import GitHubService
from domain.services.profile_service import ProfileService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.github.github_client import GitHubClient


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())


@lru_cache
def get_account_deletion_service() -> AccountDeletionService:
    """Get account deletion service instance."""
    return AccountDeletionService(get_uow_factory())


@lru_cache
def get_github_service() -> GitHubService:
    """Get GitHub service instance."""
    return GitHubService(GitHubClient())
