"""Run the GitHub Profile Finder with uvicorn."""

import os

import uvicorn

from github_profile_finder.app import app, get_settings
from github_profile_finder.config import setup_logging


if __name__ == "__main__":
    setup_logging(get_settings())
    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
