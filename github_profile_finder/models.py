from pydantic import AwareDatetime, BaseModel, ConfigDict

REPO_LIMIT = 6


class Profile(BaseModel):
    """GitHub user profile, as returned by ``GET /users/{username}``."""

    model_config = ConfigDict(frozen=True)

    login: str
    name: str | None = None
    avatar_url: str
    html_url: str
    bio: str | None = None
    location: str | None = None
    public_repos: int
    followers: int
    following: int
    created_at: AwareDatetime


class RepoSummary(BaseModel):
    """One entry of ``GET /users/{username}/repos``."""

    model_config = ConfigDict(frozen=True)

    name: str
    html_url: str
    visibility: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int
    forks_count: int
    updated_at: AwareDatetime


class ProfileResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: Profile
    repos: tuple[RepoSummary, ...]
