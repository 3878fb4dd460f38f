import asyncio
import logging
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from literaki.config import EngineSettings, load_settings
from literaki.errors import ConfigError, EmptyInputError, SourceUnavailableError, TooManyWildcardsError
from literaki.game.models import GuessOutcome, NoWordsOfLength
from literaki.game.round import GameRound
from literaki.messages import templates
from literaki.reporting.progress import RichProgressSink
from literaki.search.cancellation import Cancelled
from literaki.search.controller import SearchController
from literaki.words.bank import WordBank
from literaki.words.index import DictionaryIndex

app = typer.Typer(help="Literaki: anagrams and the find-every-word game for Polish.")
console = Console()
logger = logging.getLogger(__name__)

SourceOption = typer.Option(None, "--source", help="Word list: file path, http(s) URL or 'mock'")
SettingsOption = typer.Option("literaki.json", "--settings", help="Path to settings JSON")
NoCacheOption = typer.Option(False, "--no-cache", help="Do not read or write the index cache")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Debug logging")

@app.command()
def check(
    letters: str = typer.Argument(..., help="Letters to use, '?' marks a blank tile"),
    source: Optional[str] = SourceOption,
    settings_file: str = SettingsOption,
    no_cache: bool = NoCacheOption,
    verbose: bool = VerboseOption,
):
    """
    Lists every word that uses exactly the given letters.
    """
    settings = _prepare(settings_file, verbose)
    asyncio.run(_async_check(letters, settings, source, no_cache))

@app.command()
def play(
    length: Optional[int] = typer.Option(None, help="Number of letters per round"),
    source: Optional[str] = SourceOption,
    settings_file: str = SettingsOption,
    no_cache: bool = NoCacheOption,
    verbose: bool = VerboseOption,
):
    """
    Plays rounds of the find-every-word game in the terminal.
    """
    settings = _prepare(settings_file, verbose)
    asyncio.run(_async_play(length or settings.default_round_length, settings, source, no_cache))

@app.command()
def stats(
    source: Optional[str] = SourceOption,
    settings_file: str = SettingsOption,
    no_cache: bool = NoCacheOption,
    verbose: bool = VerboseOption,
):
    """
    Shows how many words and letter sets the dictionary has per length.
    """
    settings = _prepare(settings_file, verbose)
    asyncio.run(_async_stats(settings, source, no_cache))

def _prepare(settings_file: str, verbose: bool) -> EngineSettings:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    try:
        return load_settings(settings_file)
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

async def _load_index(settings: EngineSettings, source: Optional[str], no_cache: bool) -> DictionaryIndex:
    location = source or settings.word_source
    cache_dir = None if no_cache or location == "mock" else settings.cache_dir
    with RichProgressSink(f"[cyan]{templates.STATUS_CHECKING_CACHE}") as progress:
        bank = WordBank.from_location(location, cache_dir, progress)
        try:
            return await bank.get_index()
        except (SourceUnavailableError, EmptyInputError) as e:
            logger.error(f"Loading {location} failed: {e}")
            console.print(f"[red]{templates.STATUS_LOAD_FAILED} {e}[/red]")
            raise typer.Exit(1)

async def _async_check(letters: str, settings: EngineSettings, source: Optional[str], no_cache: bool):
    index = await _load_index(settings, source, no_cache)
    with RichProgressSink("[cyan]Szukanie...") as progress:
        controller = SearchController(index, progress=progress, settings=settings)
        try:
            result = await controller.submit(letters)
        except TooManyWildcardsError:
            console.print(f"[yellow]{templates.TOO_MANY_WILDCARDS}[/yellow]")
            raise typer.Exit(1)

    if isinstance(result, Cancelled):
        return
    console.print(templates.describe_matches(len(result)))
    if result:
        table = Table()
        table.add_column("Słowo", style="cyan")
        table.add_column("Słownik", style="dim")
        for word in sorted(result):
            table.add_row(word, templates.dictionary_link(word))
        console.print(table)

async def _async_stats(settings: EngineSettings, source: Optional[str], no_cache: bool):
    index = await _load_index(settings, source, no_cache)
    summary = index.stats()
    table = Table(title=f"{summary.words} słów, {summary.keys} zestawów liter")
    table.add_column("Długość", justify="right")
    table.add_column("Słowa", justify="right")
    table.add_column("Zestawy liter", justify="right")
    for length, keys in summary.keys_by_length.items():
        table.add_row(str(length), str(summary.words_by_length.get(length, 0)), str(keys))
    console.print(table)

async def _async_play(length: int, settings: EngineSettings, source: Optional[str], no_cache: bool):
    index = await _load_index(settings, source, no_cache)
    game = GameRound(index, count=length)
    _start_round(game, length)

    lengths = ", ".join(str(n) for n in settings.round_lengths)
    console.print(f"[dim]Komendy: :shuffle, :check, :give-up, :next, :length N ({lengths}), :quit[/dim]")
    while True:
        try:
            raw = typer.prompt("Słowo", default="", show_default=False)
        except (typer.Abort, EOFError):
            break
        command = raw.strip()
        if command == ":quit":
            break
        elif command == ":shuffle":
            game.shuffle()
            _show_letters(game)
        elif command == ":check":
            _report_guess(game, game.check_arrangement(), game.letters)
        elif command == ":give-up":
            console.print(f"[yellow]{templates.pick_comment(templates.SKIP_COMMENTS)}[/yellow]")
            for word in game.give_up():
                marker = "[green]✓[/green]" if word in game.found else " "
                console.print(f"{marker} {word}  [dim]{templates.dictionary_link(word)}[/dim]")
        elif command == ":next":
            _start_round(game, game.count)
        elif command.startswith(":length"):
            parts = command.split()
            if len(parts) != 2 or not parts[1].isdigit():
                console.print("[yellow]Użycie: :length N[/yellow]")
                continue
            _start_round(game, int(parts[1]))
        else:
            _report_guess(game, game.guess(command), command)

def _start_round(game: GameRound, length: int):
    draw = game.start(length)
    if isinstance(draw, NoWordsOfLength):
        console.print(f"[yellow]{templates.NO_WORDS_OF_LENGTH} ({draw.length})[/yellow]")
        return
    _show_letters(game)

def _show_letters(game: GameRound):
    tiles = " ".join(f"[bold on blue] {ch.upper()} [/bold on blue]" for ch in game.letters)
    console.print(tiles)
    console.print(f"Znaleziono {len(game.found)}/{len(game.solutions)} {templates.plural_form(len(game.solutions))}")

def _report_guess(game: GameRound, outcome: GuessOutcome, word: str):
    if outcome == GuessOutcome.SOLVED:
        console.print(f"[green]{templates.pick_comment(templates.CORRECT_COMMENTS)}[/green] {word.strip().lower()}")
        _show_letters(game)
    elif outcome == GuessOutcome.ALREADY_FOUND:
        console.print(f"[yellow]{templates.pick_comment(templates.DUPLICATE_COMMENTS)}[/yellow]")
    elif outcome == GuessOutcome.NOT_A_SOLUTION:
        console.print(f"[red]{templates.pick_comment(templates.INCORRECT_COMMENTS)}[/red]")

if __name__ == "__main__":
    app()
