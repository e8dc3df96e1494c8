import enum
import logging
from datetime import timezone, tzinfo

from .documents import DisplayDocument
from .errors import FetchError
from .fetcher import ProfileFetcher
from .renderer import render, render_error

logger = logging.getLogger(__name__)


class SearchState(enum.Enum):
    """Controller states.

    ``IDLE`` is only the state before the first submission. Once a search
    has finished, ``DISPLAYING`` or ``ERROR_DISPLAYED`` is the resting state
    until the next submission moves back to ``SEARCHING``.
    """

    IDLE = "idle"
    SEARCHING = "searching"
    DISPLAYING = "displaying"
    ERROR_DISPLAYED = "error_displayed"


class SearchController:
    """Runs a search submission and owns the document currently on display.

    Every submission gets a generation number. When submissions overlap, only
    the most recent one may update the display; older results are dropped no
    matter when they resolve.
    """

    def __init__(self, fetcher: ProfileFetcher, tz: tzinfo = timezone.utc, detailed_errors: bool = False):
        self.fetcher = fetcher
        self.tz = tz
        self.detailed_errors = detailed_errors
        self.state = SearchState.IDLE
        self.display: DisplayDocument | None = None
        self._generation = 0

    async def submit(self, query: str) -> DisplayDocument | None:
        """Search for ``query`` and update the display.

        Returns the new document, or ``None`` when the query is blank or the
        result was superseded by a newer submission.
        """
        username = query.strip()
        if not username:
            return None

        self._generation += 1
        generation = self._generation
        self.state = SearchState.SEARCHING

        try:
            result = await self.fetcher.fetch_profile(username)
        except FetchError as exc:
            logger.warning("Lookup of '%s' failed (%s): %s", username, exc.kind, exc.message)
            document: DisplayDocument = render_error(exc, detailed=self.detailed_errors)
            state = SearchState.ERROR_DISPLAYED
        else:
            document = render(result.profile, result.repos, self.tz)
            state = SearchState.DISPLAYING

        if generation != self._generation:
            logger.debug("Dropping stale result for '%s'", username)
            return None

        self.display = document
        self.state = state
        return document
