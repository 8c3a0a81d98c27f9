import json
import re
from pathlib import Path

from wordtree.harness.io import (
    timestamp_id, write_codes_csv, write_manifest, write_words_csv,
)


def test_write_words_csv(tmp_path: Path):
    path = write_words_csv(["crane", "slate"], str(tmp_path / "out" / "all_words.csv"))
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    assert lines == ['0\t"crane"', '1\t"slate"']


def test_write_codes_csv(tmp_path: Path):
    path = write_codes_csv(str(tmp_path / "all_scores.csv"))
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    assert len(lines) == 243
    assert lines[0] == '0\t"' + "⬛" * 5 + '"'
    assert lines[242] == '242\t"' + "🟩" * 5 + '"'


def test_write_manifest_roundtrip(tmp_path: Path):
    manifest = {"run_id": timestamp_id(), "score": 1.5, "done": True}
    path = write_manifest(manifest, str(tmp_path / "m.json"))
    assert json.loads(Path(path).read_text(encoding="utf-8")) == manifest


def test_timestamp_id_format():
    assert re.fullmatch(r"\d{8}T\d{6}Z", timestamp_id())
