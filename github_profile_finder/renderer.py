from collections.abc import Sequence
from datetime import datetime, timezone, tzinfo

from .documents import ErrorDocument, ErrorPanel, ProfileDocument, ProfileSummary, RepoCard
from .errors import FetchError, MalformedResponseError, NetworkError, NotFoundError
from .models import Profile, RepoSummary

NO_BIO = "This user has no bio."
NO_LOCATION = "Earth"
NO_DESCRIPTION = "No description provided."

NOT_FOUND_PANEL = ErrorPanel(
    kind=NotFoundError.kind,
    title="User not found",
    message="The username you entered doesn't seem to exist on GitHub. Please check the spelling and try again.",
)

DETAILED_PANELS = {
    NotFoundError: NOT_FOUND_PANEL,
    NetworkError: ErrorPanel(
        kind=NetworkError.kind,
        title="GitHub is unreachable",
        message="We couldn't reach GitHub right now. Please check your connection and try again.",
    ),
    MalformedResponseError: ErrorPanel(
        kind=MalformedResponseError.kind,
        title="Unexpected response",
        message="GitHub sent back data we couldn't read. Please try again later.",
    ),
}

# en-US month names, independent of the process locale
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def long_date(value: datetime, tz: tzinfo = timezone.utc) -> str:
    """Format as ``January 25, 2011``."""
    value = value.astimezone(tz)
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def short_date(value: datetime, tz: tzinfo = timezone.utc) -> str:
    """Format as ``Jan 25, 2011``."""
    value = value.astimezone(tz)
    return f"{MONTHS[value.month - 1][:3]} {value.day}, {value.year}"


def render_repo(repo: RepoSummary, tz: tzinfo = timezone.utc) -> RepoCard:
    return RepoCard(
        name=repo.name,
        url=repo.html_url,
        visibility=repo.visibility,
        description=repo.description or NO_DESCRIPTION,
        language=repo.language or None,
        stars=repo.stargazers_count,
        forks=repo.forks_count,
        updated=short_date(repo.updated_at, tz),
    )


def render(profile: Profile, repos: Sequence[RepoSummary], tz: tzinfo = timezone.utc) -> ProfileDocument:
    """Describe the page for a successfully fetched profile.

    Dates are shown in ``tz``. Absent optional fields get fixed fallback text,
    except the repository language which is left out.
    """
    summary = ProfileSummary(
        login=profile.login,
        display_name=profile.name or profile.login,
        avatar_url=profile.avatar_url,
        bio=profile.bio or NO_BIO,
        location=profile.location or NO_LOCATION,
        joined=long_date(profile.created_at, tz),
        public_repos=profile.public_repos,
        followers=profile.followers,
        following=profile.following,
        profile_url=profile.html_url,
        repositories_url=f"{profile.html_url}?tab=repositories",
    )
    return ProfileDocument(profile=summary, repos=tuple(render_repo(repo, tz) for repo in repos))


def render_error(error: FetchError, detailed: bool = False) -> ErrorDocument:
    """Describe the page for a failed lookup.

    Unless ``detailed`` is set every failure shows the same "User not found" panel.
    """
    if not detailed:
        return ErrorDocument(error=NOT_FOUND_PANEL)
    return ErrorDocument(error=DETAILED_PANELS.get(type(error), NOT_FOUND_PANEL))
