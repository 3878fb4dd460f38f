import asyncio
import logging
from literaki.messages import templates
from literaki.reporting.progress import LoggingProgressSink, ProgressSink
from literaki.storage.json_store import IndexCache
from literaki.words.index import DictionaryIndex, build_index
from literaki.words.sources import WordSource, create_source

logger = logging.getLogger(__name__)

class WordBank:
    """
    Owns the dictionary index of one word source. The index is loaded on
    first use and shared by every later caller; a failed load is not
    remembered so the caller can retry.
    """

    def __init__(
        self,
        source: WordSource,
        cache: IndexCache | None = None,
        progress: ProgressSink | None = None,
    ):
        self.source = source
        self.cache = cache
        self.progress = progress or LoggingProgressSink()
        self._task: asyncio.Task | None = None

    @classmethod
    def from_location(cls, location: str, cache_dir: str | None = None, progress: ProgressSink | None = None):
        cache = IndexCache.for_source(cache_dir, location) if cache_dir else None
        return cls(create_source(location), cache, progress)

    async def get_index(self) -> DictionaryIndex:
        if self._task is None:
            self._task = asyncio.ensure_future(self._load())
        task = self._task
        try:
            return await asyncio.shield(task)
        except Exception:
            if self._task is task:
                self._task = None
            raise

    def reset(self) -> None:
        """
        Forgets the loaded index; the next get_index() loads it again.
        """
        self._task = None

    async def _load(self) -> DictionaryIndex:
        self.progress.report_status(templates.STATUS_CHECKING_CACHE)
        self.progress.report(10)
        if self.cache is not None:
            cached = self.cache.try_load()
            if cached is not None:
                logger.info(f"Loaded index with {len(cached.key_map)} keys from cache")
                self._finish()
                return cached

        self.progress.report_status(self.source.loading_status)
        self.progress.report(20)
        try:
            words = await self.source.load_words()
        except Exception:
            self.progress.report_status(templates.STATUS_LOAD_FAILED)
            raise
        logger.info(f"Loaded {len(words)} words from {self.source.describe()}")

        self.progress.report_status(templates.STATUS_PROCESSING)
        self.progress.report(50)
        await asyncio.sleep(0)
        try:
            index = build_index(words)
        except Exception:
            self.progress.report_status(templates.STATUS_LOAD_FAILED)
            raise

        self.progress.report_status(templates.STATUS_OPTIMIZING)
        self.progress.report(75)
        if self.cache is not None:
            try:
                self.cache.store(index)
            except OSError as e:
                logger.warning(f"Could not write index cache: {e}")

        self._finish()
        return index

    def _finish(self) -> None:
        self.progress.report_status(templates.STATUS_READY)
        self.progress.report(100)
