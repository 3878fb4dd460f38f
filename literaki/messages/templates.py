import random
from urllib.parse import quote

STATUS_CHECKING_CACHE = "Sprawdzanie pamięci podręcznej..."
STATUS_DOWNLOADING = "Pobieranie listy słów..."
STATUS_PROCESSING = "Przetwarzanie słownika..."
STATUS_OPTIMIZING = "Optymalizowanie wyszukiwania..."
STATUS_MOCK = "Wczytywanie mockowego słownika"
STATUS_READY = "Słownik gotowy"
STATUS_LOAD_FAILED = "Błąd przy wczytywaniu listy słów."

TOO_MANY_WILDCARDS = "Dozwolone są nie więcej niż dwie blanki"
NO_MATCHES = "Brak możliwych słów wykorzystujących wszystkie litery."
MATCHES_TEMPLATE = "Używając wszystkie litery, można ułożyć {count} {form}."
NO_WORDS_OF_LENGTH = "Brak słów o takiej długości"

SKIP_COMMENTS = [
    "idywiduum o skromnych horyzontach",
    "7-letni chińczyk zrobiłby to lepiej",
    "czy jakieś słowo zostanie w ogóle rozwiązane?",
    "ten przycisk był tylko do testów, ale spoko, używaj go aż się popsuje",
    "nie wiem czy to jest aż tak trudne, ale może po prostu to nie jest twoja mocna strona",
]

INCORRECT_COMMENTS = [
    "nie, to nie jest poprawne",
    "niestety, to nie jest jedno z możliwych słów",
    "nie, spróbuj ponownie",
    "to nie jest poprawne, ale nie poddawaj się!",
    "niestety, takiego słowa nie ma w słowniku",
    "nie, to nie jest poprawne rozwiązanie",
]

DUPLICATE_COMMENTS = [
    "to słowo już zostało znalezione, spróbuj inne",
    "już masz to słowo, poszukaj czegoś innego",
    "to słowo jest już na liście, znajdź inne",
    "to słowo już zostało odgadnięte, spróbuj innego",
    "to słowo jest już zaliczone, poszukaj innego",
    "to słowo już masz, spróbuj znaleźć inne",
]

CORRECT_COMMENTS = [
    "essa!",
    "jakbym mógł to dałbym Ci za to 67 punktów",
    "niczym poeta/ka",
    "niezły zasób słów, bratku/siostro",
    "noo i o to właśnie chodzi",
    "JAZDAAA!",
]

def plural_form(count: int) -> str:
    """
    Polish declension of "słowo" for the given count.
    """
    if count == 1:
        return "słowo"
    mod10 = count % 10
    mod100 = count % 100
    if 12 <= mod100 <= 14 or mod10 == 0 or 5 <= mod10 <= 9 or mod10 == 1:
        return "słów"
    return "słowa"

def describe_matches(count: int) -> str:
    if not count:
        return NO_MATCHES
    return MATCHES_TEMPLATE.format(count=count, form=plural_form(count))

def pick_comment(pool: list[str], rng: random.Random | None = None) -> str:
    return (rng or random).choice(pool)

def dictionary_link(word: str) -> str:
    return f"https://sjp.pl/{quote(word)}"
