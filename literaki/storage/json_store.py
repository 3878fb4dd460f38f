import hashlib
import logging
from pathlib import Path
from pydantic import ValidationError
from literaki.words.index import DictionaryIndex

logger = logging.getLogger(__name__)

class IndexCache:
    """
    Keeps a built DictionaryIndex in a JSON file so the next start can skip
    rebuilding it. A damaged file is thrown away and treated as a miss.
    """

    def __init__(self, path: str = ".literaki/index.json"):
        self.path = Path(path)

    @classmethod
    def for_source(cls, directory: str, location: str) -> "IndexCache":
        # One cache file per word source
        digest = hashlib.sha1(location.encode("utf-8")).hexdigest()[:12]
        return cls(str(Path(directory) / f"index-{digest}.json"))

    def try_load(self) -> DictionaryIndex | None:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = f.read()
            return DictionaryIndex.model_validate_json(payload)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Discarding unreadable index cache {self.path}: {e}")
            self.clear()
            return None

    def store(self, index: DictionaryIndex) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(index.model_dump_json())

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
