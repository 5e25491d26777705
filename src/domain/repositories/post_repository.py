"""Post repository protocol."""

from typing import Protocol
from uuid import UUID


class IPostRepository(Protocol):
    """Repository interface for an account's posts.

    Posts are owned elsewhere; profiles only need to remove them.
    """

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every post written by a user and return how many were removed."""
        ...
