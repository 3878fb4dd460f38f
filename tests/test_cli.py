from typer.testing import CliRunner
from literaki.cli import app

runner = CliRunner()

def test_check_lists_matches(tmp_path):
    result = runner.invoke(app, ["check", "aotk", "--source", "mock", "--settings", str(tmp_path / "none.json")])
    assert result.exit_code == 0
    assert "1 słowo" in result.output
    assert "kota" in result.output

def test_check_without_matches(tmp_path):
    result = runner.invoke(app, ["check", "la", "--source", "mock", "--settings", str(tmp_path / "none.json")])
    assert result.exit_code == 0
    assert "Brak możliwych słów" in result.output

def test_check_rejects_three_blanks(tmp_path):
    result = runner.invoke(app, ["check", "a???", "--source", "mock", "--settings", str(tmp_path / "none.json")])
    assert result.exit_code == 1
    assert "dwie blanki" in result.output

def test_missing_word_list_fails(tmp_path):
    result = runner.invoke(app, [
        "stats", "--source", str(tmp_path / "brak.txt"), "--no-cache",
        "--settings", str(tmp_path / "none.json"),
    ])
    assert result.exit_code == 1

def test_stats(tmp_path):
    result = runner.invoke(app, ["stats", "--source", "mock", "--settings", str(tmp_path / "none.json")])
    assert result.exit_code == 0
    assert "15 słów" in result.output

def test_play_round(tmp_path):
    words = tmp_path / "slowa.txt"
    words.write_text("kot\nkota\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["play", "--length", "3", "--source", str(words), "--no-cache", "--settings", str(tmp_path / "none.json")],
        input="kot\nkot\n:give-up\n:length 12\n:quit\n",
    )
    assert result.exit_code == 0
    assert "Znaleziono 0/1 słowo" in result.output
    assert "Znaleziono 1/1 słowo" in result.output
    assert "https://sjp.pl/kot" in result.output
    assert "Brak słów o takiej długości" in result.output
