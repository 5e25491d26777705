"""GitHub REST client for public repository listings."""

from typing import Any, Optional
from urllib.parse import quote

import httpx
import structlog

from core.config import settings

logger = structlog.get_logger()


class GitHubClient:
    """Fetch a user's repositories from the GitHub REST API.

    One request per lookup, no retries. A non-200 response, a body that is
    not a JSON list, or a transport error is reported as ``None``. The
    username is percent-encoded as a single path segment.
    """

    def __init__(
        self,
        base_url: str = settings.github_api_url,
        client_id: str = settings.github_client_id,
        client_secret: str = settings.github_client_secret,
        per_page: int = settings.github_repos_per_page,
        timeout: float = settings.github_timeout_seconds,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = (client_id, client_secret) if client_id and client_secret else None
        self._per_page = per_page
        self._timeout = timeout
        self._transport = transport

    async def list_repositories(self, username: str) -> Optional[list[dict[str, Any]]]:
        """Return up to ``per_page`` repositories, oldest first."""
        params = {
            "per_page": self._per_page,
            "sort": "created",
            "direction": "asc",
        }
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": settings.app_name,
        }

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                auth=self._auth,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    f"/users/{quote(username, safe='')}/repos", params=params, headers=headers
                )
        except httpx.HTTPError as e:
            logger.warning("github_lookup_failed", username=username, error=str(e))
            return None

        if response.status_code != 200:
            logger.info(
                "github_lookup_not_found",
                username=username,
                status_code=response.status_code,
            )
            return None

        try:
            payload = response.json()
        except ValueError:
            payload = None
        if not isinstance(payload, list):
            logger.warning("github_lookup_unexpected_body", username=username)
            return None
        return payload
