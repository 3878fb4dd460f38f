from collections import Counter
from math import factorial
from typing import Iterator, Sequence


def distinct_permutations(letters: Sequence[str]) -> Iterator[str]:
    """
    Lazily yields every distinct ordering of the letters. Repeated letters
    are skipped per recursion level so no ordering is produced twice, and
    at most one permutation is held in memory at a time.
    """
    pool = list(letters)
    if not pool:
        yield ""
        return

    current: list[str] = []
    used = [False] * len(pool)

    def walk() -> Iterator[str]:
        if len(current) == len(pool):
            yield "".join(current)
            return
        seen = set()
        for i, ch in enumerate(pool):
            if used[i] or ch in seen:
                continue
            seen.add(ch)
            used[i] = True
            current.append(ch)
            yield from walk()
            current.pop()
            used[i] = False

    yield from walk()


def count_distinct_permutations(letters: Sequence[str]) -> int:
    total = factorial(len(letters))
    for repeats in Counter(letters).values():
        total //= factorial(repeats)
    return total


def estimate_candidates(regular: Sequence[str], wildcards: int, alphabet_size: int) -> int:
    """
    Estimated number of candidates checked by the permutation search:
    distinct orderings of the regular letters times every wildcard choice.
    """
    return count_distinct_permutations(regular) * alphabet_size ** wildcards
