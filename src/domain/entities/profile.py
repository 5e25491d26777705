"""Profile aggregate and its embedded history records."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.entities.account import Account

SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")

# Optional scalar fields merged by the upsert (status is handled separately)
OPTIONAL_SCALAR_FIELDS = ("company", "website", "location", "bio", "github_username")


def parse_skills(raw: str) -> list[str]:
    """Split a comma-delimited skills string into trimmed entries.

    Order and duplicates are kept, and empty entries are not dropped.
    """
    return [skill.strip() for skill in raw.split(",")]


@dataclass
class Experience:
    """A job held by the profile owner."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: Optional[str] = None
    to_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


@dataclass
class Education:
    """A school attended by the profile owner."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


@dataclass(frozen=True)
class ProfileFields:
    """Validated input for creating or updating a profile."""

    status: str
    skills: str
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


@dataclass
class Profile:
    """Domain entity for a developer profile, one per account."""

    user_id: UUID
    status: str
    id: UUID = field(default_factory=uuid4)
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    skills: list[str] = field(default_factory=list)
    social: dict[str, str] = field(default_factory=dict)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    @classmethod
    def create(cls, user_id: UUID, fields: ProfileFields) -> "Profile":
        """Build a new profile for an owner from the supplied fields."""
        profile = cls(user_id=user_id, status=fields.status)
        profile.apply(fields)
        return profile

    def apply(self, fields: ProfileFields) -> None:
        """Merge supplied fields into the profile.

        ``status`` and ``skills`` are always replaced. Every other scalar and
        each social platform is replaced only when a non-empty value is
        given; otherwise the stored value is kept. History collections are
        never touched here.
        """
        self.status = fields.status
        self.skills = parse_skills(fields.skills)

        for name in OPTIONAL_SCALAR_FIELDS:
            value = getattr(fields, name)
            if value:
                setattr(self, name, value)

        for platform in SOCIAL_PLATFORMS:
            url = getattr(fields, platform)
            if url:
                self.social[platform] = url

        self.updated_at = datetime.utcnow()

    def add_experience(self, experience: Experience) -> None:
        """Insert an experience record at the head of the list."""
        self.experience.insert(0, experience)
        self.updated_at = datetime.utcnow()

    def remove_experience(self, experience_id: UUID) -> bool:
        """Remove the first experience with the given id, if any."""
        return self._remove_by_id(self.experience, experience_id)

    def add_education(self, education: Education) -> None:
        """Insert an education record at the head of the list."""
        self.education.insert(0, education)
        self.updated_at = datetime.utcnow()

    def remove_education(self, education_id: UUID) -> bool:
        """Remove the first education with the given id, if any."""
        return self._remove_by_id(self.education, education_id)

    def _remove_by_id(
        self, records: list[Experience] | list[Education], record_id: UUID
    ) -> bool:
        index = next((i for i, record in enumerate(records) if record.id == record_id), None)
        if index is None:
            return False
        del records[index]
        self.updated_at = datetime.utcnow()
        return True


@dataclass(frozen=True, slots=True)
class ProfileWithOwner:
    """Read-only value object: a Profile bundled with its owner account."""

    profile: Profile
    owner: Optional[Account]
