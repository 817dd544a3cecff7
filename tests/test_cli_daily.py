from pathlib import Path
from apps.cli.daily import main


def _words(tmp_path: Path, lines) -> str:
    p = tmp_path / "words"
    p.write_bytes(("\n".join(lines) + "\n").encode("ascii"))
    return str(p)


def _args(tmp_path: Path, words: str, *extra):
    return ["--words", words, "--robot", str(tmp_path / "robot"), "--seed", "1", "--dry-run", *extra]


def test_dry_run_prints_message(tmp_path: Path, capsys):
    words = _words(tmp_path, ["crane", "slate", "react", "brace"])
    (tmp_path / "robot").write_text("beep boop\n", encoding="utf-8")
    assert main(_args(tmp_path, words, "--goal", "brace", "--days", "7")) == 0
    out = capsys.readouterr().out
    assert out.startswith("beep boop\n\n**Wordle 7**\n")
    assert "🟩🟩🟩🟩🟩 ||`brace`" in out


def test_wrong_length_goal_exits_cleanly(tmp_path: Path, capsys):
    words = _words(tmp_path, ["crane", "slate"])
    assert main(_args(tmp_path, words, "--goal", "cranes")) == 1
    assert "could not guess" in capsys.readouterr().err


def test_goal_missing_from_words(tmp_path: Path, capsys):
    words = _words(tmp_path, ["crane", "slate", "react"])
    assert main(_args(tmp_path, words, "--goal", "brace")) == 1
    assert "could not guess" in capsys.readouterr().err


def test_malformed_words_file(tmp_path: Path, capsys):
    p = tmp_path / "words"
    p.write_bytes(b"crane\nslate")
    assert main(_args(tmp_path, str(p), "--goal", "crane")) == 1
    assert "could not load words" in capsys.readouterr().err
