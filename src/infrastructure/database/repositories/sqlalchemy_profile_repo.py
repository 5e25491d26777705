"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Education, Experience, Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get every profile, oldest first."""
        stmt = select(ProfileModel).order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def replace(self, profile: Profile) -> Profile:
        """Overwrite every mutable column of a stored profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.status = profile.status
        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.bio = profile.bio
        model.github_username = profile.github_username
        model.skills = list(profile.skills)
        model.social = dict(profile.social)
        model.experience = [_dump_experience(item) for item in profile.experience]
        model.education = [_dump_education(item) for item in profile.education]
        model.updated_at = profile.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            experience=[_load_experience(item) for item in model.experience or []],
            education=[_load_education(item) for item in model.education or []],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            status=entity.status,
            company=entity.company,
            website=entity.website,
            location=entity.location,
            bio=entity.bio,
            github_username=entity.github_username,
            skills=list(entity.skills),
            social=dict(entity.social),
            experience=[_dump_experience(item) for item in entity.experience],
            education=[_dump_education(item) for item in entity.education],
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


def _dump_date(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _load_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _dump_experience(item: Experience) -> dict[str, Any]:
    return {
        "id": str(item.id),
        "title": item.title,
        "company": item.company,
        "location": item.location,
        "from": _dump_date(item.from_date),
        "to": _dump_date(item.to_date),
        "current": item.current,
        "description": item.description,
    }


def _load_experience(data: dict[str, Any]) -> Experience:
    return Experience(
        id=UUID(data["id"]),
        title=data["title"],
        company=data["company"],
        location=data.get("location"),
        from_date=_load_date(data["from"]),  # type: ignore[arg-type]
        to_date=_load_date(data.get("to")),
        current=data.get("current", False),
        description=data.get("description"),
    )


def _dump_education(item: Education) -> dict[str, Any]:
    return {
        "id": str(item.id),
        "school": item.school,
        "degree": item.degree,
        "fieldofstudy": item.field_of_study,
        "from": _dump_date(item.from_date),
        "to": _dump_date(item.to_date),
        "current": item.current,
        "description": item.description,
    }


def _load_education(data: dict[str, Any]) -> Education:
    return Education(
        id=UUID(data["id"]),
        school=data["school"],
        degree=data["degree"],
        field_of_study=data["fieldofstudy"],
        from_date=_load_date(data["from"]),  # type: ignore[arg-type]
        to_date=_load_date(data.get("to")),
        current=data.get("current", False),
        description=data.get("description"),
    )
