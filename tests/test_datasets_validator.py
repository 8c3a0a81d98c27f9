from pathlib import Path
from wordtree.datasets import load_words, pretty_summary, save_words, validate_wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "solutions_5.txt"
    _write(words, ["crane", "raise", "stare", "", "trace"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 4 and rep["unique_count"] == 4
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=4" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    words = tmp_path / "solutions_5.txt"
    # 'raiser' has the wrong length, '???' invalid chars, 'Crane' not lowercase
    _write(words, ["crane", "raiser", "???", "Crane", "crane"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_load_and_save_words(tmp_path: Path):
    p = save_words(["crane", "slate"], tmp_path / "sub" / "w.txt")
    assert Path(p).read_text(encoding="utf-8") == "crane\nslate\n"
    _write(Path(p), [" Crane ", "", "SLATE"])
    assert load_words(p) == ["crane", "slate"]
