"""GitHub repository lookup protocol."""

from typing import Any, Protocol


class IRepositoryLookup(Protocol):
    """Outbound lookup of a GitHub account's public repositories."""

    async def list_repositories(self, username: str) -> list[dict[str, Any]] | None:
        """Return the raw repository listing, or None when it is unavailable."""
        ...
