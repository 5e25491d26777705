"""Profile service layer with business logic."""

from typing import Callable, List
from uuid import UUID

import structlog

from core.exceptions import AccountNotFoundError, ProfileNotFoundError
from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
    ProfileWithOwner,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic.

    Each method reads the owner's profile, applies one change and writes the
    whole document back. Concurrent writers to the same profile are not
    serialized; the last write wins.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_for_user(self, user_id: UUID) -> ProfileWithOwner:
        """Get a user's profile together with the owning account."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            owner = await uow.accounts.get(user_id)
            return ProfileWithOwner(profile=profile, owner=owner)

    async def get_all(self) -> List[ProfileWithOwner]:
        """Get every profile with its owner, fetching owners in one batch."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            owners = await uow.accounts.get_many([p.user_id for p in profiles])
            return [
                ProfileWithOwner(profile=profile, owner=owners.get(profile.user_id))
                for profile in profiles
            ]

    async def upsert(self, user_id: UUID, fields: ProfileFields) -> Profile:
        """Create the user's profile, or merge the fields into the existing one."""
        async with self._uow_factory() as uow:
            account = await uow.accounts.get(user_id)
            if not account:
                raise AccountNotFoundError(str(user_id))

            profile = await uow.profiles.get_by_user(user_id)
            if profile:
                profile.apply(fields)
                saved = await uow.profiles.replace(profile)
                await uow.commit()
                logger.info("profile_updated", user_id=str(user_id))
                return saved

            created = await uow.profiles.create(Profile.create(user_id, fields))
            await uow.commit()
            logger.info("profile_created", user_id=str(user_id), profile_id=str(created.id))
            return created

    async def add_experience(self, user_id: UUID, experience: Experience) -> Profile:
        """Prepend an experience record to the user's profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_experience(experience)

            saved = await uow.profiles.replace(profile)
            await uow.commit()
            return saved

    async def remove_experience(self, user_id: UUID, experience_id: UUID) -> Profile:
        """Remove an experience record. An unknown id leaves the list as is."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if not profile.remove_experience(experience_id):
                logger.info(
                    "experience_not_found",
                    user_id=str(user_id),
                    experience_id=str(experience_id),
                )

            saved = await uow.profiles.replace(profile)
            await uow.commit()
            return saved

    async def add_education(self, user_id: UUID, education: Education) -> Profile:
        """Prepend an education record to the user's profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_education(education)

            saved = await uow.profiles.replace(profile)
            await uow.commit()
            return saved

    async def remove_education(self, user_id: UUID, education_id: UUID) -> Profile:
        """Remove an education record. An unknown id leaves the list as is."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if not profile.remove_education(education_id):
                logger.info(
                    "education_not_found",
                    user_id=str(user_id),
                    education_id=str(education_id),
                )

            saved = await uow.profiles.replace(profile)
            await uow.commit()
            return saved

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        """Load the user's profile or raise if there is none."""
        profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError(str(user_id))
        return profile
