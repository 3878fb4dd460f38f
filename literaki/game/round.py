import logging
import random
from literaki.game.models import GuessOutcome, NoWordsOfLength, RoundDraw, RoundSnapshot, RoundState
from literaki.game.sampler import sample, shuffle_letters
from literaki.words.index import DictionaryIndex
from literaki.words.keys import normalize

logger = logging.getLogger(__name__)

class GameRound:
    """
    One round of the find-every-word game: the player sees a shuffled
    letter set and has to find all dictionary words built from exactly
    those letters.
    """

    def __init__(self, index: DictionaryIndex, count: int = 7, rng: random.Random | None = None):
        self.index = index
        self.rng = rng or random.Random()
        self.state = RoundState.UNINITIALIZED
        self.count = count
        self.letters = ""
        self.solutions: list[str] = []
        self.found: list[str] = []
        self.revealed = False

    def start(self, count: int | None = None) -> RoundDraw | NoWordsOfLength:
        """
        Draws fresh letters of the given length. When the dictionary has no
        such words the current round is left exactly as it was.
        """
        count = count if count is not None else self.count
        draw = sample(self.index, count, self.rng)
        if isinstance(draw, NoWordsOfLength):
            return draw

        self.count = count
        self.letters = draw.letters
        self.solutions = draw.solutions
        self.found = []
        self.revealed = False
        self.state = RoundState.ACTIVE
        logger.info(f"New round: {len(self.solutions)} solutions for {count} letters")
        return draw

    def next_round(self, count: int | None = None) -> RoundDraw | NoWordsOfLength:
        return self.start(count)

    def guess(self, word: str) -> GuessOutcome:
        normalized = normalize(word)
        if not normalized:
            return GuessOutcome.EMPTY
        if normalized in self.found:
            return GuessOutcome.ALREADY_FOUND
        if normalized not in self.solutions:
            return GuessOutcome.NOT_A_SOLUTION
        self.found.append(normalized)
        return GuessOutcome.SOLVED

    def check_arrangement(self) -> GuessOutcome:
        """
        Guesses the word currently spelled by the tiles on display.
        """
        return self.guess(self.letters)

    def shuffle(self) -> str:
        self.letters = shuffle_letters(self.letters, self.rng)
        return self.letters

    def move_letter(self, source: int, target: int) -> str:
        """
        Moves the tile at position source to position target. Raises
        ValueError when either position is off the rack.
        """
        if not (0 <= source < len(self.letters) and 0 <= target < len(self.letters)):
            raise ValueError(f"Tile positions {source}, {target} outside 0..{len(self.letters) - 1}")
        chars = list(self.letters)
        letter = chars.pop(source)
        chars.insert(target, letter)
        self.letters = "".join(chars)
        return self.letters

    def give_up(self) -> list[str]:
        # found keeps only what the player guessed
        self.revealed = True
        return list(self.solutions)

    @property
    def remaining(self) -> list[str]:
        return [w for w in self.solutions if w not in self.found]

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            state=self.state,
            count=self.count,
            letters=self.letters,
            solutions=list(self.solutions),
            found=list(self.found),
            revealed=self.revealed,
        )
