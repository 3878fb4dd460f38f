import asyncio
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable
import aiohttp
from literaki.errors import SourceUnavailableError
from literaki.messages import templates

logger = logging.getLogger(__name__)

# Small dictionary for UI work without touching the real word list
MOCK_WORDS = [
    "ma", "ala", "kot", "tam", "kota", "flopy", "skisła", "śreżoga", "pokwitli",
    "kołkująca", "nieuleczań", "designerowi", "redesignowi", "serpentynami",
    "nieprzepysznych",
]

def split_words(text: str) -> list[str]:
    """
    One word per line; surrounding whitespace and blank lines are dropped.
    """
    return [line.strip() for line in re.split(r"\r?\n", text) if line.strip()]

class WordSource(ABC):
    """
    Supplies the raw word list the index is built from.
    """

    # Status shown while load_words runs
    loading_status = templates.STATUS_DOWNLOADING

    @abstractmethod
    async def load_words(self) -> list[str]:
        """
        Raises SourceUnavailableError when the words cannot be read.
        """
        pass

    def describe(self) -> str:
        return self.__class__.__name__

class StaticWordSource(WordSource):
    def __init__(self, words: Iterable[str]):
        self.words = list(words)

    async def load_words(self) -> list[str]:
        return [w.strip() for w in self.words if w.strip()]

    def describe(self) -> str:
        return f"{len(self.words)} in-memory words"

class MockWordSource(StaticWordSource):
    loading_status = templates.STATUS_MOCK

    def __init__(self):
        super().__init__(MOCK_WORDS)

    def describe(self) -> str:
        return "mock"

class FileWordSource(WordSource):
    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    async def load_words(self) -> list[str]:
        try:
            text = await asyncio.to_thread(self.path.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read word list {self.path}: {e}")
            raise SourceUnavailableError(f"Cannot read word list {self.path}: {e}") from e
        return split_words(text)

    def describe(self) -> str:
        return str(self.path)

class HttpWordSource(WordSource):
    def __init__(self, url: str, timeout: float = 60.0):
        self.url = url
        self.timeout = timeout

    async def load_words(self) -> list[str]:
        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.get(self.url) as resp:
                    if resp.status != 200:
                        text = await resp.text()
                        logger.error(f"Word list download failed: {resp.status} - {text[:200]}")
                        raise SourceUnavailableError(f"{self.url} answered {resp.status}")
                    body = await resp.read()
            text = body.decode("utf-8")
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
            logger.error(f"Word list download failed: {e}")
            raise SourceUnavailableError(f"Cannot download {self.url}: {e}") from e
        return split_words(text)

    def describe(self) -> str:
        return self.url

def create_source(location: str) -> WordSource:
    if location.lower() == "mock":
        return MockWordSource()
    elif location.startswith(("http://", "https://")):
        return HttpWordSource(location)
    else:
        return FileWordSource(location)
