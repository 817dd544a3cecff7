from pathlib import Path
import pytest
from wordlebot.datasets import load_dictionary, pretty_summary, split_records, validate_wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_split_records():
    assert split_records(b"crane\nslate\n", 5) == ["crane", "slate"]
    # the separator byte is not inspected
    assert split_records(b"crane\rslate;", 5) == ["crane", "slate"]
    assert split_records(b"", 5) == []


def test_split_records_bad_width():
    with pytest.raises(ValueError):
        split_records(b"crane\nslat\n", 5)


def test_load_dictionary_drops_duplicates(tmp_path: Path):
    p = tmp_path / "words"
    _write(p, ["crane", "slate", "crane", "react"])
    d = load_dictionary(p, 5)
    assert list(d) == ["crane", "slate", "react"]
    assert d.index_of("react") == 2
    assert "slate" in d and "brace" not in d


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope", 5)


def test_load_dictionary_rejects_uppercase(tmp_path: Path):
    p = tmp_path / "words"
    _write(p, ["crane", "SLATE"])
    with pytest.raises(ValueError):
        load_dictionary(p, 5)


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words"
    _write(p, ["crane", "raise", "stare"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["words"]["count"] == 3
    s = pretty_summary(rep)
    assert "N=5" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("raise\ncranes\n???\n\nraise\n", encoding="utf-8")
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is False
    assert rep["words"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope"))
    assert rep["passed"] is False and rep["words"]["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_requires_trailing_separator(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("crane\nslate", encoding="utf-8")
    rep = validate_wordlist(5, str(p))
    assert rep["words"]["invalid_lines"] == 0
    assert rep["passed"] is False
    assert any("record width" in msg for msg in rep["issues"])
    assert any("trailing newline" in msg for msg in rep["issues"])
    # the loader refuses the same file
    with pytest.raises(ValueError):
        load_dictionary(p, 5)


def test_validate_wordlist_passes_what_the_loader_accepts(tmp_path: Path):
    p = tmp_path / "words"
    p.write_bytes(b"crane\nslate\n")
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert list(load_dictionary(p, 5)) == ["crane", "slate"]
