"""Account repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.account import Account


class IAccountRepository(Protocol):
    """Repository interface for Account entities."""

    async def get(self, id: UUID) -> Account | None:
        """Get an account by ID."""
        ...

    async def get_many(self, ids: list[UUID]) -> dict[UUID, Account]:
        """Get several accounts in a single query, keyed by ID."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an account and return success status."""
        ...
