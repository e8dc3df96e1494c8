import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import MalformedResponseError, NetworkError, NotFoundError
from .models import REPO_LIMIT, Profile, ProfileResult, RepoSummary

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"

_repo_list = TypeAdapter(list[RepoSummary])


def build_client(base_url: str = GITHUB_API_URL, timeout: float = 10.0, **kwargs: Any) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` configured for the GitHub REST API."""
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Accept": "application/vnd.github+json"},
        timeout=timeout,
        **kwargs,
    )


class ProfileFetcher:
    """Looks up a GitHub user and their most recently updated repositories.

    The fetcher does not own the HTTP client: pass one built with
    :func:`build_client`, or one wrapping ``httpx.MockTransport`` in tests.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def fetch_profile(self, username: str) -> ProfileResult:
        """Fetch the profile, then the repositories, of ``username``.

        Raises:
            NotFoundError: the user does not exist. No repository request is made.
            NetworkError: the service is unreachable or answered with an error status.
            MalformedResponseError: a payload could not be parsed.
        """
        # "." and ".." survive quoting and would be resolved as path segments
        if not username.strip("."):
            raise NotFoundError(username)
        user_path = f"/users/{quote(username, safe='')}"

        payload = await self._get_json(username, user_path)
        try:
            profile = Profile.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponseError(username, f"Unexpected profile payload for {username}") from exc

        payload = await self._get_json(
            username,
            f"{user_path}/repos",
            params={"sort": "updated", "per_page": REPO_LIMIT},
        )
        try:
            repos = _repo_list.validate_python(payload)
        except ValidationError as exc:
            raise MalformedResponseError(username, f"Unexpected repository payload for {username}") from exc

        logger.info("Fetched profile of '%s' with %d repositories", profile.login, len(repos))
        return ProfileResult(profile=profile, repos=tuple(repos[:REPO_LIMIT]))

    async def _get_json(self, username: str, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = await self.client.get(path, params=params)
        except httpx.RequestError as exc:
            raise NetworkError(username, f"Could not reach GitHub: {exc!r}") from exc

        if response.status_code == 404:
            raise NotFoundError(username)
        if not response.is_success:
            raise NetworkError(
                username,
                f"GitHub answered {response.status_code} for {path}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(username, f"Response for {path} is not JSON") from exc
