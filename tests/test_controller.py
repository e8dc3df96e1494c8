import asyncio

import pytest

from fakes import FakeGitHub, octocat, user_payload
from github_profile_finder.controller import SearchController, SearchState
from github_profile_finder.documents import ErrorDocument, ProfileDocument
from github_profile_finder.fetcher import ProfileFetcher
from github_profile_finder.models import Profile, ProfileResult

pytestmark = pytest.mark.anyio


class GatedFetcher:
    """Fetcher whose lookups resolve only when released."""

    def __init__(self, *usernames: str):
        self.gates = {username: asyncio.Event() for username in usernames}

    def release(self, username: str) -> None:
        self.gates[username].set()

    async def fetch_profile(self, username: str) -> ProfileResult:
        await self.gates[username].wait()
        return ProfileResult(profile=Profile.model_validate(user_payload(username)), repos=())


async def test_octocat_scenario() -> None:
    fake = octocat()
    async with fake.client() as client:
        controller = SearchController(ProfileFetcher(client))
        document = await controller.submit("  octocat ")

    assert isinstance(document, ProfileDocument)
    assert controller.display is document
    assert controller.state is SearchState.DISPLAYING
    html = document.to_html()
    assert "octocat" in html
    assert html.count('class="repo-card"') == 6


async def test_unknown_user_scenario() -> None:
    fake = FakeGitHub()
    async with fake.client() as client:
        controller = SearchController(ProfileFetcher(client))
        document = await controller.submit("this-user-does-not-exist-xyz")

    assert isinstance(document, ErrorDocument)
    assert document.error.title == "User not found"
    assert controller.state is SearchState.ERROR_DISPLAYED
    assert len(fake.requests) == 1


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
async def test_blank_query_does_nothing(query: str) -> None:
    fake = octocat()
    async with fake.client() as client:
        controller = SearchController(ProfileFetcher(client))
        shown = await controller.submit("octocat")
        requests_before = len(fake.requests)

        assert await controller.submit(query) is None

    assert len(fake.requests) == requests_before
    assert controller.display is shown
    assert controller.state is SearchState.DISPLAYING


async def test_error_replaces_previous_profile() -> None:
    fake = octocat()
    async with fake.client() as client:
        controller = SearchController(ProfileFetcher(client))
        await controller.submit("octocat")
        await controller.submit("ghost")

    assert isinstance(controller.display, ErrorDocument)


async def test_detailed_errors() -> None:
    fake = FakeGitHub()
    async with fake.client() as client:
        controller = SearchController(ProfileFetcher(client), detailed_errors=True)
        document = await controller.submit("ghost")

    assert isinstance(document, ErrorDocument)
    assert document.error.kind == "not_found"


async def test_stale_result_is_dropped() -> None:
    fetcher = GatedFetcher("first", "second")
    controller = SearchController(fetcher)

    first = asyncio.create_task(controller.submit("first"))
    await asyncio.sleep(0)
    second = asyncio.create_task(controller.submit("second"))
    await asyncio.sleep(0)
    assert controller.state is SearchState.SEARCHING

    fetcher.release("second")
    assert await second is not None
    fetcher.release("first")
    assert await first is None

    assert isinstance(controller.display, ProfileDocument)
    assert controller.display.profile.login == "second"
    assert controller.state is SearchState.DISPLAYING


async def test_finished_search_is_the_resting_state() -> None:
    fake = FakeGitHub()
    async with fake.client() as client:
        controller = SearchController(ProfileFetcher(client))
        assert controller.state is SearchState.IDLE

        await controller.submit("ghost")
        await controller.submit("  ")

    assert controller.state is SearchState.ERROR_DISPLAYED
    assert isinstance(controller.display, ErrorDocument)
