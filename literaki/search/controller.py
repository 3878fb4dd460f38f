import logging
from typing import Callable
from literaki.config import EngineSettings
from literaki.reporting.progress import NullProgressSink, ProgressSink
from literaki.search.cancellation import CANCELLED, CancellationToken, Cancelled
from literaki.search.matcher import MatchSource, match

logger = logging.getLogger(__name__)

class SearchToken(CancellationToken):
    """
    Token bound to one search version. It reads as cancelled as soon as the
    controller has moved on to a newer search.
    """

    def __init__(self, controller: "SearchController", version: int):
        super().__init__()
        self.controller = controller
        self.version = version

    @property
    def cancelled(self) -> bool:
        return self._cancelled or self.controller.version != self.version

class SearchController:
    """
    Runs one search per user input and supersedes any search still in
    flight. Only the most recent search may deliver a result.
    """

    def __init__(
        self,
        source: MatchSource,
        progress: ProgressSink | None = None,
        on_result: Callable[[str, set[str]], None] | None = None,
        settings: EngineSettings | None = None,
    ):
        self.source = source
        self.progress = progress or NullProgressSink()
        self.on_result = on_result
        self.settings = settings or EngineSettings()
        self.version = 0

    def new_token(self) -> SearchToken:
        self.version += 1
        return SearchToken(self, self.version)

    def cancel(self) -> None:
        """
        Supersedes the current search without starting another one.
        """
        self.version += 1

    async def submit(self, query: str) -> set[str] | Cancelled:
        token = self.new_token()
        result = await match(query, self.source, token, self.progress, self.settings)

        # A newer search may have started after our last checkpoint
        if isinstance(result, Cancelled) or token.cancelled:
            logger.debug(f"Dropping stale result for {query!r} (version {token.version})")
            return CANCELLED

        if self.on_result:
            self.on_result(query, result)
        return result
