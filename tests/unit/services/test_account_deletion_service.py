"""Unit tests for AccountDeletionService."""

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from domain.services.account_deletion_service import AccountDeletionService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> AccountDeletionService:
    return AccountDeletionService(lambda: uow)


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_deletes_posts_profile_then_account(
        self, service: AccountDeletionService, uow: FakeUnitOfWork, user_id: UUID
    ):
        order = MagicMock()
        order.attach_mock(uow.posts.delete_all_for_user, "posts")
        order.attach_mock(uow.profiles.delete_by_user, "profile")
        order.attach_mock(uow.accounts.delete, "account")

        await service.delete_account(user_id)

        assert [name for name, _, _ in order.mock_calls] == ["posts", "profile", "account"]
        uow.posts.delete_all_for_user.assert_called_once_with(user_id)
        uow.profiles.delete_by_user.assert_called_once_with(user_id)
        uow.accounts.delete.assert_called_once_with(user_id)

    @pytest.mark.asyncio
    async def test_commits_each_step_separately(
        self, service: AccountDeletionService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.posts.delete_all_for_user.return_value = 0
        uow.profiles.delete_by_user.return_value = True
        uow.accounts.delete.return_value = True

        await service.delete_account(user_id)

        assert uow.commits == 3

    @pytest.mark.asyncio
    async def test_succeeds_when_nothing_left_to_delete(
        self, service: AccountDeletionService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.posts.delete_all_for_user.return_value = 0
        uow.profiles.delete_by_user.return_value = False
        uow.accounts.delete.return_value = False

        await service.delete_account(user_id)

        uow.accounts.delete.assert_called_once_with(user_id)

    @pytest.mark.asyncio
    async def test_failed_step_propagates_and_stops(
        self, service: AccountDeletionService, uow: FakeUnitOfWork, user_id: UUID
    ):
        # Steps already committed stay committed; nothing is rolled back across steps.
        uow.posts.delete_all_for_user.return_value = 1
        uow.profiles.delete_by_user.side_effect = RuntimeError("storage down")

        with pytest.raises(RuntimeError, match="storage down"):
            await service.delete_account(user_id)

        assert uow.commits == 1
        assert uow.rolled_back
        uow.accounts.delete.assert_not_called()
