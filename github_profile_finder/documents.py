"""Display documents: what the page shows, decoupled from how it is shown."""

import re
from abc import abstractmethod
from html import escape
from pathlib import Path

from pydantic import BaseModel, ConfigDict

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def render_template(name: str, context: dict[str, object], fragments: dict[str, str] | None = None) -> str:
    """Fill ``{{key}}`` placeholders of a template.

    Values in ``context`` are HTML-escaped, ``fragments`` are inserted as-is
    and must already be rendered markup.
    """
    values = {key: escape(str(value)) for key, value in context.items()}
    values.update(fragments or {})

    def substitute(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    template = (TEMPLATES_DIR / name).read_text()
    return PLACEHOLDER.sub(substitute, template)


class ProfileSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    login: str
    display_name: str
    avatar_url: str
    bio: str
    location: str
    joined: str
    public_repos: int
    followers: int
    following: int
    profile_url: str
    repositories_url: str


class RepoCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    visibility: str
    description: str
    language: str | None
    stars: int
    forks: int
    updated: str

    def to_html(self) -> str:
        language = ""
        if self.language is not None:
            language = render_template("language.html", {"language": self.language})
        return render_template(
            "repo_card.html",
            self.model_dump(exclude={"language"}),
            fragments={"language": language},
        )


class ErrorPanel(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    title: str
    message: str


class DisplayDocument(BaseModel):
    """What the result area shows. Subclasses render themselves."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def to_html(self) -> str: ...


class ProfileDocument(DisplayDocument):
    """A profile summary panel followed by up to six repository cards."""

    profile: ProfileSummary
    repos: tuple[RepoCard, ...]

    def to_html(self) -> str:
        return render_template(
            "profile.html",
            self.profile.model_dump(),
            fragments={"repo_cards": "".join(card.to_html() for card in self.repos)},
        )


class ErrorDocument(DisplayDocument):
    """The panel shown in place of a profile when a lookup fails."""

    error: ErrorPanel

    def to_html(self) -> str:
        return render_template("error.html", self.error.model_dump())
