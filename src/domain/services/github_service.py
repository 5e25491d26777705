"""GitHub repository lookup service."""

from typing import List

from core.exceptions import GitHubProfileNotFoundError
from domain.entities.repository import Repository
from domain.repositories.repository_lookup import IRepositoryLookup


class GitHubService:
    """Service layer for listing a GitHub user's recent repositories."""

    def __init__(self, lookup: IRepositoryLookup) -> None:
        self._lookup = lookup

    async def get_repositories(self, username: str) -> List[Repository]:
        """Get repository summaries for ``username``, oldest first."""
        payload = await self._lookup.list_repositories(username)
        if payload is None:
            raise GitHubProfileNotFoundError(username)
        return [Repository.from_api(item) for item in payload]
