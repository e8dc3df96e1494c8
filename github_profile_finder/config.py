import logging
import os
import sys
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from pydantic import BaseModel

from .fetcher import GITHUB_API_URL


class Settings(BaseModel):
    """Application settings."""

    api_url: str = GITHUB_API_URL
    api_timeout: float = 10.0
    timezone: str = "UTC"
    detailed_errors: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables, reading ``.env`` first."""
        load_dotenv()
        return cls(
            api_url=os.getenv("GITHUB_API_URL", GITHUB_API_URL),
            api_timeout=float(os.getenv("GITHUB_API_TIMEOUT", "10")),
            timezone=os.getenv("DISPLAY_TIMEZONE", "UTC"),
            detailed_errors=os.getenv("DETAILED_ERRORS", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(__name__).info("Logging configured: level=%s", settings.log_level)
