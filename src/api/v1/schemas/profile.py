"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "Developer",
                "skills": "Python, FastAPI, PostgreSQL",
                "company": "Acme",
                "website": "https://example.com",
                "location": "Berlin",
                "bio": "Backend engineer",
                "github_username": "octocat",
                "twitter": "https://twitter.com/octocat",
            }
        },
    )

    status: str = Field(..., min_length=1, max_length=100)
    skills: str = Field(
        ..., min_length=1, description="Comma-separated list of skills, or a JSON array"
    )
    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    github_username: str | None = Field(
        None,
        max_length=100,
        validation_alias=AliasChoices("github_username", "githubusername"),
    )
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def join_skill_list(cls, v: Any) -> Any:
        """Accept a list of skills as the equivalent comma-separated string."""
        if isinstance(v, list):
            return ",".join(str(item) for item in v)
        return v


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("to_date", mode="before")
    @classmethod
    def blank_to_date_is_none(cls, v: Any) -> Any:
        return None if v == "" else v


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(..., min_length=1, max_length=255)
    degree: str = Field(..., min_length=1, max_length=255)
    field_of_study: str = Field(..., min_length=1, max_length=255, alias="fieldofstudy")
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("to_date", mode="before")
    @classmethod
    def blank_to_date_is_none(cls, v: Any) -> Any:
        return None if v == "" else v


class ExperienceResponse(BaseModel):
    """Schema for an experience entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class EducationResponse(BaseModel):
    """Schema for an education entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    school: str
    degree: str
    field_of_study: str = Field(alias="fieldofstudy")
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class OwnerSummary(BaseModel):
    """Public summary of the account that owns a profile."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str | None = None
    avatar_url: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    user: OwnerSummary | None = None
    status: str
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str] = []
    social: dict[str, str] = {}
    experience: list[ExperienceResponse] = []
    education: list[EducationResponse] = []
    created_at: datetime
    updated_at: datetime


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile response."""

    data: ProfileResponse


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles response."""

    data: list[ProfileResponse]


class RepositoryResponse(BaseModel):
    """Schema for a GitHub repository summary."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    full_name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    created_at: str | None = None


class RepositoryListResponse(BaseModel):
    """Schema for list of GitHub repositories."""

    data: list[RepositoryResponse]
