import random
import pytest
from literaki.game.models import GuessOutcome, NoWordsOfLength, RoundDraw, RoundState
from literaki.game.round import GameRound
from literaki.game.sampler import sample, shuffle_letters
from literaki.words.index import build_index
from literaki.words.keys import canonical_key
from literaki.words.sources import MOCK_WORDS

def test_sample_missing_length():
    index = build_index(["kot", "kota"])
    before = index.model_dump()
    result = sample(index, 50)
    assert result == NoWordsOfLength(length=50)
    assert index.model_dump() == before

def test_sampled_letters_sort_to_drawn_key():
    index = build_index(MOCK_WORDS + ["tok", "kto", "mat"])
    rng = random.Random(7)
    for _ in range(200):
        length = rng.choice(index.lengths())
        draw = sample(index, length, rng)
        assert isinstance(draw, RoundDraw)
        assert canonical_key(draw.letters) == draw.key
        assert draw.key in index.keys_of_length(length)
        assert draw.solutions == sorted(set(index.words_for_key(draw.key)))

def test_sample_deduplicates_solutions():
    index = build_index(["kot", "tok", "kot"])
    draw = sample(index, 3, random.Random(1))
    assert draw.solutions == ["kot", "tok"]

def test_shuffle_keeps_letters():
    rng = random.Random(3)
    letters = "kołkująca"
    for _ in range(20):
        assert sorted(shuffle_letters(letters, rng)) == sorted(letters)

def test_round_guess_scenario():
    game = GameRound(build_index(["kot", "kota", "ma"]), rng=random.Random(5))
    assert game.state == RoundState.UNINITIALIZED

    draw = game.start(3)
    assert isinstance(draw, RoundDraw)
    assert game.state == RoundState.ACTIVE
    assert game.solutions == ["kot"]
    assert game.found == []

    assert game.guess("kot") == GuessOutcome.SOLVED
    assert game.found == ["kot"]
    assert game.guess(" KOT ") == GuessOutcome.ALREADY_FOUND
    assert game.found == ["kot"]

def test_round_rejects_wrong_and_empty_guesses():
    game = GameRound(build_index(["kot", "tok", "kota"]), rng=random.Random(5))
    game.start(3)
    assert game.guess("kota") == GuessOutcome.NOT_A_SOLUTION
    assert game.guess("   ") == GuessOutcome.EMPTY
    assert game.found == []
    assert game.guess("tok") == GuessOutcome.SOLVED
    assert game.guess("kot") == GuessOutcome.SOLVED
    assert game.found == ["tok", "kot"]
    assert game.remaining == []

def test_shuffle_keeps_solutions_and_found():
    game = GameRound(build_index(["kołkująca"]), rng=random.Random(2))
    game.start(9)
    game.guess("kołkująca")
    letters = game.letters
    game.shuffle()
    assert sorted(game.letters) == sorted(letters)
    assert game.solutions == ["kołkująca"]
    assert game.found == ["kołkująca"]

def test_give_up_reveals_without_touching_found():
    game = GameRound(build_index(["kot", "tok", "kto"]), rng=random.Random(4))
    game.start(3)
    game.guess("tok")
    assert game.give_up() == ["kot", "kto", "tok"]
    assert game.revealed
    assert game.found == ["tok"]
    assert game.remaining == ["kot", "kto"]

    game.next_round()
    assert not game.revealed
    assert game.found == []
    assert game.count == 3

def test_start_without_words_keeps_round():
    game = GameRound(build_index(["kot", "kota"]), rng=random.Random(1))
    game.start(4)
    game.guess("kota")
    before = game.snapshot()

    assert game.next_round(12) == NoWordsOfLength(length=12)
    assert game.snapshot() == before
    assert game.count == 4

def test_check_arrangement_and_move_letter():
    game = GameRound(build_index(["kot"]), rng=random.Random(1))
    game.start(3)
    game.letters = "otk"
    assert game.check_arrangement() == GuessOutcome.NOT_A_SOLUTION
    assert game.move_letter(2, 0) == "kot"
    assert game.check_arrangement() == GuessOutcome.SOLVED

    for source, target in [(3, 0), (0, 3), (-1, 0)]:
        with pytest.raises(ValueError):
            game.move_letter(source, target)
    assert game.letters == "kot"

def test_start_with_zero_length_is_not_the_current_length():
    game = GameRound(build_index(["kot", "tok"]), count=3, rng=random.Random(1))
    game.start()
    game.guess("kot")
    before = game.snapshot()

    assert game.start(0) == NoWordsOfLength(length=0)
    assert game.snapshot() == before
    assert game.count == 3

def test_snapshot():
    game = GameRound(build_index(["kot", "tok"]), count=3, rng=random.Random(1))
    game.start()
    game.guess("kot")
    snap = game.snapshot()
    assert snap.state == RoundState.ACTIVE
    assert snap.count == 3
    assert snap.found == ["kot"]
    assert snap.remaining == ["tok"]
    assert sorted(snap.letters) == sorted("kot")
