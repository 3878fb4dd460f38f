import logging
from typing import Iterable
from pydantic import BaseModel, ConfigDict, model_validator
from literaki.errors import EmptyInputError
from literaki.words.keys import canonical_key

logger = logging.getLogger(__name__)

class IndexStats(BaseModel):
    words: int
    keys: int
    keys_by_length: dict[int, int]
    words_by_length: dict[int, int]

class DictionaryIndex(BaseModel):
    """
    Searchable view of a word list. Built once by build_index and read-only
    afterwards; readers never see a half-built index.
    """
    model_config = ConfigDict(frozen=True)

    word_set: frozenset[str]
    key_map: dict[str, list[str]]            # canonical key -> words, source order
    length_buckets: dict[int, list[str]]     # length -> distinct keys
    words_by_length: dict[int, list[str]]    # length -> distinct words

    @model_validator(mode="after")
    def _check_structure(self) -> "DictionaryIndex":
        seen_keys = set()
        for length, keys in self.length_buckets.items():
            for key in keys:
                if len(key) != length:
                    raise ValueError(f"Key {key!r} filed under length {length}")
                if key not in self.key_map:
                    raise ValueError(f"Bucketed key {key!r} missing from key map")
                if key in seen_keys:
                    raise ValueError(f"Key {key!r} bucketed twice")
                seen_keys.add(key)
        if len(seen_keys) != len(self.key_map):
            raise ValueError("Length buckets do not cover the key map")
        keyed_words = set()
        for key, words in self.key_map.items():
            for word in words:
                if canonical_key(word) != key:
                    raise ValueError(f"Word {word!r} filed under foreign key {key!r}")
                keyed_words.add(word)
        if keyed_words != self.word_set:
            raise ValueError("Key map words differ from the word set")

        bucketed_words = set()
        for length, words in self.words_by_length.items():
            for word in words:
                if len(word) != length:
                    raise ValueError(f"Word {word!r} filed under length {length}")
                if word in bucketed_words:
                    raise ValueError(f"Word {word!r} listed twice by length")
                bucketed_words.add(word)
        if bucketed_words != self.word_set:
            raise ValueError("Word length index does not cover the word set")
        return self

    def contains(self, word: str) -> bool:
        return word.lower() in self.word_set

    def words_for_key(self, key: str) -> list[str]:
        return list(self.key_map.get(key, []))

    def keys_of_length(self, length: int) -> list[str]:
        return list(self.length_buckets.get(length, []))

    def lengths(self) -> list[int]:
        return sorted(self.length_buckets)

    def stats(self) -> IndexStats:
        return IndexStats(
            words=len(self.word_set),
            keys=len(self.key_map),
            keys_by_length={n: len(keys) for n, keys in sorted(self.length_buckets.items())},
            words_by_length={n: len(words) for n, words in sorted(self.words_by_length.items())},
        )

def build_index(words: Iterable[str]) -> DictionaryIndex:
    """
    Builds the key map, word set and both length indexes in one pass over
    the words. Raises EmptyInputError when nothing usable was supplied.
    """
    key_map: dict[str, list[str]] = {}
    word_set: set[str] = set()
    words_by_length: dict[int, list[str]] = {}

    for raw in words:
        word = raw.strip().lower()
        if not word:
            continue
        key = canonical_key(word)
        if key not in key_map:
            key_map[key] = []
        key_map[key].append(word)
        if word not in word_set:
            word_set.add(word)
            if len(word) not in words_by_length:
                words_by_length[len(word)] = []
            words_by_length[len(word)].append(word)

    if not word_set:
        raise EmptyInputError("Word list contains no usable words")

    # key_map keys are already distinct, so buckets never repeat a key
    length_buckets: dict[int, list[str]] = {}
    for key in key_map:
        if len(key) not in length_buckets:
            length_buckets[len(key)] = []
        length_buckets[len(key)].append(key)

    logger.info(f"Built index with {len(key_map)} keys from {len(word_set)} words")
    return DictionaryIndex(
        word_set=frozenset(word_set),
        key_map=key_map,
        length_buckets=length_buckets,
        words_by_length=words_by_length,
    )
