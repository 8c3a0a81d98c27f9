import json
import sys
from pathlib import Path

import pytest
from apps.cli import solve


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["solve", *argv])
    solve.main()


def test_cli_solves_and_dumps(tmp_path: Path, monkeypatch, capsys):
    words = tmp_path / "w.txt"
    words.write_text("aaaaa\nbbbbb\nccccc\n", encoding="utf-8")
    _run(monkeypatch, "--words", str(words), "--progress", "off",
         "--dump-dir", str(tmp_path / "dump"), "--outdir", str(tmp_path / "out"))

    out = capsys.readouterr().out
    assert "aaaaa ⬛⬛⬛⬛⬛ bbbbb or ccccc !" in out
    assert "average score : 2.0" in out
    assert (tmp_path / "dump" / "all_words.csv").exists()
    assert (tmp_path / "dump" / "all_scores.csv").exists()
    manifests = list((tmp_path / "out").glob("run_*_manifest.json"))
    assert len(manifests) == 1
    data = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert data["done"] is True and data["num_candidates"] == 3


def test_cli_filters_by_history(tmp_path: Path, monkeypatch, capsys):
    words = tmp_path / "w.txt"
    words.write_text("crane\nraise\nstare\ntrace\n", encoding="utf-8")
    _run(monkeypatch, "--words", str(words), "--progress", "off", "raise", "YYBBG")

    out = capsys.readouterr().out
    assert "2 candidate(s) remaining" in out
    assert "crane or trace !" in out
    assert "average score : 1.5" in out


def test_cli_rejects_odd_history(tmp_path: Path, monkeypatch):
    words = tmp_path / "w.txt"
    words.write_text("crane\nraise\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        _run(monkeypatch, "--words", str(words), "raise")


def test_cli_rejects_bad_wordlist(tmp_path: Path, monkeypatch):
    words = tmp_path / "w.txt"
    words.write_text("crane\ncranes\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        _run(monkeypatch, "--words", str(words), "--progress", "off")


@pytest.mark.parametrize("guess", ["rais", "ra1se"])
def test_cli_rejects_malformed_guess(tmp_path: Path, monkeypatch, guess):
    words = tmp_path / "w.txt"
    words.write_text("crane\nraise\nstare\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "--words", str(words), "--progress", "off", guess, "BBBBB")
    assert exc.value.code == 2


def test_cli_missing_wordlist_points_to_fetch(tmp_path: Path, monkeypatch):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "--words", str(tmp_path / "missing.txt"), "--progress", "off")
    assert "script.fetch_words" in str(exc.value.code)
