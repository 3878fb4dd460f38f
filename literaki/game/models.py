from enum import Enum
from pydantic import BaseModel

class RoundDraw(BaseModel):
    key: str                 # Canonical key that was drawn
    letters: str             # Shuffled display order of the key
    solutions: list[str]     # Deduplicated, sorted words for the key

class NoWordsOfLength(BaseModel):
    """
    The dictionary has no key of the requested length. Not an error, but
    callers must show it differently from an ordinary round.
    """
    length: int

class RoundState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"

class GuessOutcome(str, Enum):
    SOLVED = "solved"                  # New solution, appended to found
    ALREADY_FOUND = "already_found"
    NOT_A_SOLUTION = "not_a_solution"
    EMPTY = "empty"

class RoundSnapshot(BaseModel):
    state: RoundState
    count: int
    letters: str
    solutions: list[str]
    found: list[str]
    revealed: bool = False   # Player gave up and saw every solution

    @property
    def remaining(self) -> list[str]:
        return [w for w in self.solutions if w not in self.found]
