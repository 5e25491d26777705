"""GitHub repository summary value object."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Repository:
    """Read-only summary of a public GitHub repository."""

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

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Repository":
        """Build a summary from one item of the GitHub repos listing."""
        return cls(
            id=payload["id"],
            name=payload["name"],
            full_name=payload.get("full_name", payload["name"]),
            html_url=payload.get("html_url", ""),
            description=payload.get("description"),
            language=payload.get("language"),
            stargazers_count=payload.get("stargazers_count", 0),
            watchers_count=payload.get("watchers_count", 0),
            forks_count=payload.get("forks_count", 0),
            created_at=payload.get("created_at"),
        )
