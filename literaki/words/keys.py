from typing import Iterable

WILDCARD = "?"

# Literaki tile alphabet in collation order
POLISH_ALPHABET = (
    "a", "ą", "b", "c", "ć", "d", "e", "ę", "f", "g", "h", "i", "j", "k", "l", "ł",
    "m", "n", "ń", "o", "ó", "p", "r", "s", "ś", "t", "u", "w", "y", "z", "ź", "ż",
)

# Older word lists also carry loanwords spelled with v and x
EXTENDED_ALPHABET = (
    "a", "ą", "b", "c", "ć", "d", "e", "ę", "f", "g", "h", "i", "j", "k", "l", "ł",
    "m", "n", "ń", "o", "ó", "p", "r", "s", "ś", "t", "u", "v", "w", "x", "y", "z",
    "ź", "ż",
)

_ORDER = {ch: i for i, ch in enumerate(EXTENDED_ALPHABET)}


def _collation(ch: str) -> tuple[int, int]:
    # Alphabet letters first, everything else (wildcard included) by code point
    position = _ORDER.get(ch)
    if position is None:
        return (1, ord(ch))
    return (0, position)


def normalize(text: str) -> str:
    return text.strip().lower()


def canonical_key(letters: Iterable[str]) -> str:
    """
    Sorts the letters into the fixed collation order. Two words are anagrams
    of each other exactly when their canonical keys are equal.
    """
    return "".join(sorted((ch.lower() for ch in letters), key=_collation))


def count_wildcards(query: str) -> int:
    return query.count(WILDCARD)
