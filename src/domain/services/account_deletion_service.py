"""Cascade deletion of an account and everything it owns."""

from typing import Awaitable, Callable
from uuid import UUID

import structlog

from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class AccountDeletionService:
    """Delete a user's posts, then profile, then the account itself.

    Every step runs and commits in its own unit of work. A failing step is
    logged and re-raised, and the steps after it are not attempted; steps
    already committed stay committed. All steps tolerate missing rows, so
    the whole deletion can be retried.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def delete_account(self, user_id: UUID) -> None:
        """Remove posts, profile and account for ``user_id`` in that order."""
        steps: list[tuple[str, Callable[[IUnitOfWork], Awaitable[object]]]] = [
            ("posts", lambda uow: uow.posts.delete_all_for_user(user_id)),
            ("profile", lambda uow: uow.profiles.delete_by_user(user_id)),
            ("account", lambda uow: uow.accounts.delete(user_id)),
        ]

        for step, action in steps:
            try:
                async with self._uow_factory() as uow:
                    result = await action(uow)
                    await uow.commit()
            except Exception:
                logger.exception(
                    "cascade_delete_step_failed",
                    user_id=str(user_id),
                    step=step,
                )
                raise

            logger.info(
                "cascade_delete_step_completed",
                user_id=str(user_id),
                step=step,
                result=result,
            )

        logger.info("account_deleted", user_id=str(user_id))
