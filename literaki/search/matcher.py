import asyncio
import itertools
import logging
from collections import Counter
from typing import AbstractSet, Sequence
from literaki.config import EngineSettings
from literaki.errors import TooManyWildcardsError
from literaki.reporting.progress import NullProgressSink, ProgressSink
from literaki.search.cancellation import CANCELLED, CancellationToken, Cancelled
from literaki.search.permutations import distinct_permutations, estimate_candidates
from literaki.words.index import DictionaryIndex
from literaki.words.keys import WILDCARD, canonical_key, count_wildcards, normalize

logger = logging.getLogger(__name__)

MatchSource = DictionaryIndex | AbstractSet[str]

async def match(
    query: str,
    source: MatchSource,
    token: CancellationToken | None = None,
    progress: ProgressSink | None = None,
    settings: EngineSettings | None = None,
) -> set[str] | Cancelled:
    """
    Returns every word that uses exactly the letters of the query, where each
    wildcard may stand for any alphabet letter.

    Queries up to settings.permutation_cutoff letters are answered by key
    lookup when an index is available, or by permuting the letters against
    a flat word set. Longer queries scan the words of the same length.
    Flat word sets are expected to hold lower-case words.
    """
    settings = settings or EngineSettings()
    token = token or CancellationToken()
    progress = progress or NullProgressSink()

    letters = normalize(query)
    if not letters:
        return set()

    wildcards = count_wildcards(letters)
    if wildcards > settings.max_wildcards:
        raise TooManyWildcardsError(wildcards, settings.max_wildcards)

    if len(letters) > settings.permutation_cutoff:
        candidates = _words_of_length(source, len(letters))
        return await scan_match(
            letters, candidates, token, progress, settings.alphabet, settings.scan_checkpoint
        )
    if isinstance(source, DictionaryIndex):
        return lookup_match(letters, source, settings.alphabet)
    return await permutation_match(
        letters, source, token, progress, settings.alphabet, settings.permutation_checkpoint
    )

def expand_wildcard_keys(letters: str, alphabet: Sequence[str]) -> set[str]:
    """
    Canonical keys of every query obtained by replacing each wildcard with
    each alphabet letter independently.
    """
    regular = letters.replace(WILDCARD, "")
    wildcards = len(letters) - len(regular)
    if wildcards == 0:
        return {canonical_key(letters)}
    return {
        canonical_key(regular + "".join(choice))
        for choice in itertools.product(alphabet, repeat=wildcards)
    }

def lookup_match(letters: str, index: DictionaryIndex, alphabet: Sequence[str]) -> set[str]:
    matches = set()
    for key in expand_wildcard_keys(letters, alphabet):
        matches.update(index.words_for_key(key))
    return matches

async def permutation_match(
    letters: str,
    word_set: AbstractSet[str],
    token: CancellationToken,
    progress: ProgressSink,
    alphabet: Sequence[str],
    checkpoint: int = 1000,
) -> set[str] | Cancelled:
    """
    Tests every distinct arrangement of the letters for membership in the
    word set. Used when no key map is available.
    """
    regular = letters.replace(WILDCARD, "")
    wildcards = len(letters) - len(regular)
    estimated = estimate_candidates(regular, wildcards, len(alphabet))

    matches = set()
    checked = 0
    tried_keys = set()
    for choice in itertools.product(alphabet, repeat=wildcards):
        concrete = regular + "".join(choice)
        key = canonical_key(concrete)
        if key in tried_keys:
            continue
        tried_keys.add(key)
        for candidate in distinct_permutations(key):
            checked += 1
            if candidate in word_set:
                matches.add(candidate)
            if checked % checkpoint == 0:
                progress.report(min(99.0, checked * 100 / estimated))
                if token.cancelled:
                    logger.debug(f"Permutation search for {letters!r} cancelled after {checked} candidates")
                    return CANCELLED
                await asyncio.sleep(0)

    progress.report(100)
    return matches

async def scan_match(
    letters: str,
    candidates: Sequence[str],
    token: CancellationToken,
    progress: ProgressSink,
    alphabet: Sequence[str],
    checkpoint: int = 100,
) -> set[str] | Cancelled:
    """
    Keeps the candidates whose letters the query can supply, with wildcards
    covering whatever the regular letters lack. A wildcard only stands for a
    letter of the alphabet. Candidates must already have the query's length.
    """
    supply = Counter(letters.replace(WILDCARD, ""))
    wildcards = count_wildcards(letters)
    allowed = set(alphabet)
    total = len(candidates)

    matches = set()
    for checked, word in enumerate(candidates, 1):
        shortfall = _shortfall(word, supply)
        if sum(shortfall.values()) <= wildcards and allowed.issuperset(shortfall):
            matches.add(word)
        if checked % checkpoint == 0:
            progress.report(checked * 100 / total)
            if token.cancelled:
                logger.debug(f"Scan for {letters!r} cancelled at {checked}/{total}")
                return CANCELLED
            await asyncio.sleep(0)

    progress.report(100)
    return matches

def missing_letters(word: str, supply: Counter) -> int:
    """
    How many letters of the word the supply cannot cover.
    """
    return sum(_shortfall(word, supply).values())

def _shortfall(word: str, supply: Counter) -> Counter:
    return Counter(word) - supply

def _words_of_length(source: MatchSource, length: int) -> list[str]:
    if isinstance(source, DictionaryIndex):
        return source.words_by_length.get(length, [])
    return [w for w in source if len(w) == length]
