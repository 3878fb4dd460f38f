import logging
import random
from literaki.game.models import NoWordsOfLength, RoundDraw
from literaki.words.index import DictionaryIndex

logger = logging.getLogger(__name__)

def shuffle_letters(letters: str, rng: random.Random | None = None) -> str:
    # random.shuffle is an unbiased Fisher-Yates shuffle
    chars = list(letters)
    (rng or random).shuffle(chars)
    return "".join(chars)

def sample(
    index: DictionaryIndex,
    length: int,
    rng: random.Random | None = None,
) -> RoundDraw | NoWordsOfLength:
    """
    Draws one key of the given length uniformly at random and returns its
    letters in shuffled order together with every word that fits them.
    """
    keys = index.keys_of_length(length)
    if not keys:
        logger.info(f"No words of length {length} in the dictionary")
        return NoWordsOfLength(length=length)

    rng = rng or random
    key = rng.choice(keys)
    solutions = sorted(set(index.words_for_key(key)))
    return RoundDraw(key=key, letters=shuffle_letters(key, rng), solutions=solutions)
