"""
GitHub Profile Finder

A search page for public GitHub profiles. Submitting a username fetches the
profile and the six most recently updated repositories from the GitHub REST
API and renders them below the search form.

Endpoints:
- GET  /     - Search page; ``?username=`` runs a search
- POST /     - Form submission, renders the result
- GET  /api  - Service info
"""

from collections.abc import AsyncIterator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, FastAPI, Form, Query
from fastapi.responses import HTMLResponse

from .config import Settings
from .controller import SearchController
from .documents import render_template
from .fetcher import ProfileFetcher, build_client
from .models import REPO_LIMIT

app = FastAPI(
    title="GitHub Profile Finder",
    description="Look up a GitHub user and their latest repositories",
)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


async def get_controller(settings: Annotated[Settings, Depends(get_settings)]) -> AsyncIterator[SearchController]:
    async with build_client(settings.api_url, settings.api_timeout) as client:
        yield SearchController(
            ProfileFetcher(client),
            tz=settings.tzinfo,
            detailed_errors=settings.detailed_errors,
        )


async def search_page(controller: SearchController, query: str) -> str:
    document = await controller.submit(query)
    content = document.to_html() if document is not None else ""
    return render_template("page.html", {"query": query.strip()}, fragments={"content": content})


@app.get("/", response_class=HTMLResponse)
async def index(
    controller: Annotated[SearchController, Depends(get_controller)],
    username: str = Query(""),
):
    """Serve the search page, running a search when a username is given."""
    return await search_page(controller, username)


@app.post("/", response_class=HTMLResponse)
async def search(
    controller: Annotated[SearchController, Depends(get_controller)],
    username: Annotated[str, Form()] = "",
):
    """Process the search form."""
    return await search_page(controller, username)


@app.get("/api")
def api_info(settings: Annotated[Settings, Depends(get_settings)]):
    """Health check and info endpoint."""
    return {
        "service": "GitHub Profile Finder",
        "version": "1.0.0",
        "upstream": settings.api_url,
        "repositories_per_profile": REPO_LIMIT,
        "detailed_errors": settings.detailed_errors,
        "endpoints": {
            "search": "/",
            "info": "/api",
        },
    }
