import json
import logging
from pathlib import Path
from pydantic import BaseModel, Field, ValidationError
from literaki.errors import ConfigError
from literaki.words.keys import POLISH_ALPHABET

logger = logging.getLogger(__name__)

class EngineSettings(BaseModel):
    """
    Tunable policy of the engine. Defaults follow the final version of the
    game; every value can be overridden from a JSON settings file.
    """
    permutation_cutoff: int = Field(8, ge=1)    # longer queries are scanned, not permuted
    max_wildcards: int = Field(2, ge=0)
    alphabet: tuple[str, ...] = POLISH_ALPHABET  # letters a wildcard may stand for
    permutation_checkpoint: int = Field(1000, ge=1)
    scan_checkpoint: int = Field(100, ge=1)
    default_round_length: int = Field(7, ge=1)
    round_lengths: list[int] = [6, 7, 8, 9]
    word_source: str = "slowa.txt"
    cache_dir: str | None = ".literaki"         # None disables the index cache

def load_settings(path: str | None = None) -> EngineSettings:
    if path is None:
        return EngineSettings()
    settings_file = Path(path)
    if not settings_file.exists():
        logger.info(f"Settings file {path} not found, using defaults")
        return EngineSettings()
    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        return EngineSettings.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid settings file {path}: {e}") from e
